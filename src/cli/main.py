"""CLI principal (Typer).

Por qué Typer:
- Un único punto de entrada: sin argumentos juega una partida.
- Subcomandos auxiliares (`doctor`) sin cambiar la interacción por defecto.
"""

from __future__ import annotations

import typer
from rich.console import Console

from adapters.mastermind_api import MastermindAPI
from cli import doctor
from cli.game import play
from cli.ui_components import print_banner
from core.config import AppSettings
from core.telemetry import setup_logging

app = typer.Typer(
    add_completion=False,
    help="Terminal client for a remote Mastermind game server.",
)
app.add_typer(doctor.app, name="doctor")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Play a game: guess the 4-digit code (digits 1-6). Type 'exit' to quit."""

    if ctx.invoked_subcommand is not None:
        return

    settings = AppSettings()
    setup_logging(settings.log_level)

    console = Console()
    print_banner(console, settings.server_url)
    play(MastermindAPI(settings.server_url, settings), console)


def run() -> None:
    app()
