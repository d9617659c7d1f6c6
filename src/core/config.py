"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Se resuelve una sola vez al arrancar y se pasa explícitamente a la fachada.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SERVER_URL = "https://mastermind.darkube.app"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "mastermind"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "mastermind"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "mastermind"
    return Path.home() / ".config" / "mastermind"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# Mastermind client user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - `MASTERMINDSERVER` se respeta tal cual (sin prefijo) por compatibilidad.
    """

    model_config = SettingsConfigDict(
        env_prefix="MASTERMIND_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    server_url: str = Field(
        default=DEFAULT_SERVER_URL,
        min_length=1,
        validation_alias=AliasChoices("MASTERMINDSERVER", "MASTERMIND_SERVER_URL"),
        description="Base URL del servidor de juego.",
    )
    http_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Timeout por request (connect/read/write/pool, segundos).",
    )
    resource_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Timeout del intercambio completo, incluyendo el body (segundos).",
    )
    wait_ceiling_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Techo de la espera síncrona, independiente del transporte (segundos).",
    )
    user_agent: str = Field(
        default="mastermind-client/0.1",
        min_length=1,
        description="User-Agent para las peticiones al servidor.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
