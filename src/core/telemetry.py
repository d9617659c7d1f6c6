"""Logging estructurado (structlog).

Los logs van a stderr para no mezclarse con la salida del juego en stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.processors import JSONRenderer


def configure_default_logging() -> None:
    """Config mínima hasta que se llame a `setup_logging`.

    Sin esto structlog imprime todos los niveles en stdout. Se respeta una
    configuración previa de la aplicación que nos importe.
    """

    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def setup_logging(log_level: str = "WARNING") -> None:
    """Inicializa structlog sobre el `logging` estándar.

    Args:
        log_level: Nivel de logging (DEBUG, INFO, WARNING, ERROR)
    """

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **context: Any) -> Any:
    """Logger estructurado con contexto opcional ligado."""

    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger


configure_default_logging()
