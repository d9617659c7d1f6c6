"""Loop interactivo del juego.

Estados: INIT -> AWAITING_GUESS -> (SOLVED | USER_EXIT | CREATE_FAILED).

Reglas:
- Un intento fallido (red/servidor) no termina la sesión.
- Si se obtuvo un id de sesión, siempre se intenta borrarlo al salir.
- Ningún camino alcanzable es fatal para el proceso.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from rich.console import Console

from cli.ui_components import (
    GUESS_PROMPT,
    print_failure,
    print_game_created,
    print_invalid_guess,
    print_result,
)
from core.domain.models import Feedback, GameSession, GuessAttempt
from core.domain.rules import is_exit, normalize, validate_guess
from core.errors import MastermindError
from core.interfaces.game_api import GameAPI
from core.telemetry import get_logger

logger = get_logger(__name__)

# Devuelve None cuando la entrada estándar se cerró (EOF).
LineReader = Callable[[str], "str | None"]


class GameState(str, Enum):
    INIT = "init"
    AWAITING_GUESS = "awaiting_guess"
    SOLVED = "solved"
    USER_EXIT = "user_exit"
    CREATE_FAILED = "create_failed"


@dataclass
class GameOutcome:
    """Cómo terminó una partida."""

    state: GameState = GameState.INIT
    session: GameSession | None = None
    attempts: list[tuple[GuessAttempt, Feedback]] = field(default_factory=list)


def console_reader(console: Console) -> LineReader:
    def read(prompt: str) -> str | None:
        try:
            return console.input(prompt)
        except EOFError:
            return None

    return read


def _guess_loop(api: GameAPI, console: Console, read_line: LineReader, outcome: GameOutcome) -> GameState:
    assert outcome.session is not None
    game_id = outcome.session.game_id

    while True:
        raw = read_line(GUESS_PROMPT)
        if raw is None:
            console.print()
            return GameState.USER_EXIT
        if is_exit(raw):
            console.print("Exiting...")
            return GameState.USER_EXIT

        guess = normalize(raw)
        if not validate_guess(guess):
            print_invalid_guess(console)
            continue

        try:
            feedback = api.guess(game_id, guess)
        except MastermindError as exc:
            logger.info("guess_failed", game_id=game_id, error=repr(exc))
            print_failure(console, "Guess", exc.message)
            console.print()
            continue

        outcome.attempts.append((GuessAttempt(guess=guess), feedback))
        print_result(console, feedback.black, feedback.white)
        if feedback.solved:
            tries = len(outcome.attempts)
            console.print(f"[bold green]You guessed the code![/bold green] ({tries} attempt{'' if tries == 1 else 's'})")
            return GameState.SOLVED


def play(api: GameAPI, console: Console, read_line: LineReader | None = None) -> GameOutcome:
    """Juega una partida completa contra `api` y borra la sesión al terminar.

    Ctrl-C en cualquier fase (creación, loop o limpieza) termina la partida
    como salida del usuario; nunca escapa de aquí.
    """

    read_line = read_line or console_reader(console)
    outcome = GameOutcome()

    try:
        console.print("Creating new game...")
        try:
            outcome.session = GameSession(game_id=api.create_game())
        except MastermindError as exc:
            logger.info("create_game_failed", error=repr(exc))
            print_failure(console, "Game creation", exc.message)
            outcome.state = GameState.CREATE_FAILED
        else:
            print_game_created(console, outcome.session.game_id)
            outcome.state = GameState.AWAITING_GUESS
            outcome.state = _guess_loop(api, console, read_line, outcome)
    except KeyboardInterrupt:
        console.print("\nExiting...")
        outcome.state = GameState.USER_EXIT
    finally:
        _cleanup(api, console, outcome)

    return outcome


def _cleanup(api: GameAPI, console: Console, outcome: GameOutcome) -> None:
    try:
        if outcome.session is not None:
            # best-effort: delete_game descarta sus propios errores
            api.delete_game(outcome.session.game_id)
    except KeyboardInterrupt:
        logger.info("game_delete_interrupted", game_id=outcome.session.game_id)
    console.print("Done.")
