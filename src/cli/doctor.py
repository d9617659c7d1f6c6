"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.text import Text

from adapters.mastermind_api import MastermindAPI
from cli.ui_components import build_settings_table
from core.config import AppSettings, write_user_env_vars
from core.errors import MastermindError
from core.telemetry import setup_logging

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_server(api: MastermindAPI) -> tuple[bool, str]:
    """Create a throwaway game and delete it right away."""

    try:
        game_id = api.create_game()
    except MastermindError as exc:
        return False, exc.message
    api.delete_game(game_id)
    return True, f"created and deleted game {game_id}"


@app.command()
def run() -> None:
    """Run baseline diagnostics against the configured server."""

    settings = AppSettings()
    setup_logging(settings.log_level)

    table = build_settings_table(settings)
    ok, detail = _check_server(MastermindAPI(settings.server_url, settings))
    # el detalle viene del servidor: texto plano, sin markup
    table.add_row("Server round trip", "OK" if ok else "FAIL", Text(detail))
    _console.print(table)

    if not ok:
        _console.print(
            "\n[yellow]Note:[/yellow] Set MASTERMINDSERVER or run `mastermind doctor set-server` to use another server."
        )


@app.command(name="set-server")
def set_server() -> None:
    """Store the server URL in the user config .env."""

    current = AppSettings().server_url
    server_url = typer.prompt("Server URL", default=current, show_default=True).strip()
    if not server_url:
        raise typer.BadParameter("server URL is required")

    env_path = write_user_env_vars({"MASTERMINDSERVER": server_url})
    _console.print(f"[green]Saved server URL to:[/green] {env_path}")
