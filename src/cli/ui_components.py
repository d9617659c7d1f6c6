"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar el loop de juego con detalles visuales.
- Los textos visibles para el usuario viven en un solo lugar.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.rules import render_feedback

GUESS_PROMPT = "Enter your guess (e.g. 1234) or 'exit': "


def print_banner(console: Console, server_url: str) -> None:
    """Imprime el banner de bienvenida con las reglas."""

    title = Text("Mastermind Game (Terminal)", style="bold cyan")
    server = Text(f"Server: {server_url}", style="dim")
    rules = Text(
        "Rules:\n"
        "- Enter a 4-digit guess (digits 1-6).\n"
        "- B = correct digit in correct place.\n"
        "- W = correct digit in wrong place.\n"
        "- Type 'exit' anytime to quit."
    )
    body = Text.assemble(title, "\n", server, "\n\n", rules)
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_game_created(console: Console, game_id: str) -> None:
    console.print(Text.assemble(("Game created.", "green"), f" ID: {game_id}\n"))


def print_result(console: Console, black: int, white: int) -> None:
    # markup off: la línea de resultado se imprime tal cual
    console.print(f"Result: {render_feedback(black, white)}\n", markup=False, highlight=False)


def print_invalid_guess(console: Console) -> None:
    console.print("[yellow]Invalid guess. Must be 4 digits between 1-6.[/yellow]\n")


def print_failure(console: Console, what: str, message: str) -> None:
    console.print(Text.assemble((f"{what} failed: ", "bold red"), message))


def build_settings_table(settings: AppSettings) -> Table:
    """Tabla con la configuración efectiva (usada por `doctor`)."""

    table = Table(title="Mastermind Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    table.add_row("Server URL", "OK", Text(settings.server_url))
    table.add_row(
        "Timeouts",
        "OK",
        f"request {settings.http_timeout_seconds:g}s / resource {settings.resource_timeout_seconds:g}s"
        f" / ceiling {settings.wait_ceiling_seconds:g}s",
    )
    return table
