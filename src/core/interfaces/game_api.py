"""Contrato del servidor de juego.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- Permite probar el loop con un fake en memoria, sin HTTP.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Feedback


@runtime_checkable
class GameAPI(Protocol):
    """Las tres operaciones que el loop necesita del servidor.

    Reglas de diseño:
    - `create_game` y `guess` lanzan `MastermindError` ante cualquier falla.
    - `delete_game` es best-effort: nunca lanza.
    """

    def create_game(self) -> str:
        """Crea una sesión y devuelve su id."""

        ...

    def guess(self, game_id: str, guess: str) -> Feedback:
        """Envía un intento y devuelve el feedback del servidor."""

        ...

    def delete_game(self, game_id: str) -> None:
        """Borra la sesión; descarta cualquier error."""

        ...
