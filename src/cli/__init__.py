"""CLI (Typer + Rich): loop interactivo y diagnósticos."""
