"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en el borde HTTP: un body 2xx que no encaja se detecta
  en un solo punto (`ValidationError` -> `ProtocolError`).
- Los DTOs del wire y las entidades del juego comparten el mismo lenguaje.

Nota:
- Estos modelos describen *qué* intercambia el cliente, no *cómo* se envía.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

CODE_LENGTH = 4
MIN_DIGIT = "1"
MAX_DIGIT = "6"


class GameSession(BaseModel):
    """Sesión de juego emitida por el servidor.

    Vive mientras dura el loop interactivo; al salir se borra (best-effort).
    """

    game_id: str = Field(
        ...,
        min_length=1,
        description="Identificador opaco emitido por el servidor.",
    )


class GuessAttempt(BaseModel):
    """Intento de adivinanza ya validado localmente."""

    guess: str = Field(
        ...,
        pattern=rf"^[{MIN_DIGIT}-{MAX_DIGIT}]{{{CODE_LENGTH}}}$",
        description="Cuatro dígitos entre 1 y 6.",
    )


class Feedback(BaseModel):
    """Resultado de un intento: pegs negros y blancos."""

    # strict: `true` o `"2"` no cuentan como enteros
    model_config = ConfigDict(extra="ignore", strict=True)

    black: int = Field(
        ...,
        ge=0,
        le=CODE_LENGTH,
        description="Dígito correcto en la posición correcta.",
    )
    white: int = Field(
        ...,
        ge=0,
        le=CODE_LENGTH,
        description="Dígito correcto en la posición incorrecta.",
    )

    @model_validator(mode="after")
    def _bounded_by_guess_length(self) -> Feedback:
        if self.black + self.white > CODE_LENGTH:
            raise ValueError(f"black + white exceeds the guess length ({CODE_LENGTH})")
        return self

    @property
    def solved(self) -> bool:
        return self.black == CODE_LENGTH


class ErrorPayload(BaseModel):
    """Body opcional de las respuestas no-2xx."""

    model_config = ConfigDict(extra="ignore")

    error: str = Field(
        ...,
        description="Mensaje de error para el usuario.",
    )


class CreateGameResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    game_id: str = Field(..., min_length=1)


class GuessRequest(BaseModel):
    game_id: str
    guess: str


# El body 200 de `/guess` tiene exactamente la forma de `Feedback`.
GuessResponse = Feedback
