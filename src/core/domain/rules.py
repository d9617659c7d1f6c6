"""Reglas locales del juego: normalización de input, validación y render.

Son funciones puras; ninguna hace I/O.
"""

from __future__ import annotations

from core.domain.models import CODE_LENGTH, MAX_DIGIT, MIN_DIGIT

EXIT_COMMAND = "exit"


def normalize(raw: str | None) -> str:
    return (raw or "").strip()


def is_exit(raw: str | None) -> bool:
    """True si el input (sin espacios, sin distinguir mayúsculas) es `exit`."""

    return normalize(raw).lower() == EXIT_COMMAND


def validate_guess(guess: str) -> bool:
    """Exactamente 4 caracteres, todos dígitos en el rango '1'..'6'."""

    if len(guess) != CODE_LENGTH:
        return False
    return all(MIN_DIGIT <= ch <= MAX_DIGIT for ch in guess)


def render_feedback(black: int, white: int) -> str:
    """`black` veces 'B' seguido de `white` veces 'W' (p.ej. 2,1 -> 'BBW')."""

    return "B" * black + "W" * white
