"""Errores del cliente Mastermind.

Toda falla visible para el usuario es un `MastermindError`; la CLI solo
muestra `message`, nunca un traceback.
"""

from __future__ import annotations


class MastermindError(Exception):
    """Base de la taxonomía de errores del cliente."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class URLError(MastermindError):
    """La URL destino no se pudo componer; no hubo intento de red."""


class NetworkError(MastermindError):
    """Falla de transporte, timeout o ausencia de respuesta."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ProtocolError(MastermindError):
    """Un body 2xx no tiene la forma JSON esperada."""


class APIError(MastermindError):
    """Respuesta no-2xx del servidor."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"APIError(status_code={self.status_code}, message={self.message!r})"
