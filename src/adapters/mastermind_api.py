"""Cliente del servidor Mastermind.

Tres operaciones sobre `send_request`:
- `POST /game`        -> `{"game_id": str}`
- `POST /guess`       -> `{"black": int, "white": int}`
- `DELETE /game/{id}` -> ignorado (best-effort)

Las respuestas no-200 pueden traer `{"error": str}`; si no, se usa
`"Error <status>"`.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx
from pydantic import ValidationError

from adapters.http_client import send_request
from core.config import AppSettings
from core.domain.models import (
    CreateGameResponse,
    ErrorPayload,
    Feedback,
    GuessRequest,
    GuessResponse,
)
from core.errors import APIError, ProtocolError, URLError
from core.interfaces.game_api import GameAPI
from core.telemetry import get_logger

logger = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def decode_error(body: bytes) -> str | None:
    """Extrae `error` de un body no-200, o None si no se puede."""

    try:
        return ErrorPayload.model_validate_json(body).error
    except ValidationError:
        return None


class MastermindAPI(GameAPI):
    """Fachada síncrona del servidor de juego."""

    def __init__(
        self,
        base_url: str,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.strip("/")
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def endpoint(self, path: str) -> str:
        """Compone `{base}/{path}` y verifica que sea una URL http(s) usable."""

        raw = f"{self._base_url}/{path}"
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as exc:
            raise URLError(f"invalid URL: {raw}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise URLError(f"invalid URL: {raw}")
        return str(url)

    def create_game(self) -> str:
        response = send_request(
            "POST",
            self.endpoint("game"),
            settings=self._settings,
            transport=self._transport,
        )
        if response.status_code != 200:
            raise self._api_error(response.status_code, response.body)

        try:
            created = CreateGameResponse.model_validate_json(response.body)
        except ValidationError as exc:
            raise ProtocolError("unexpected response from server when creating a game") from exc

        logger.info("game_created", game_id=created.game_id)
        return created.game_id

    def guess(self, game_id: str, guess: str) -> Feedback:
        body = GuessRequest(game_id=game_id, guess=guess).model_dump_json().encode("utf-8")
        response = send_request(
            "POST",
            self.endpoint("guess"),
            content=body,
            headers=JSON_HEADERS,
            settings=self._settings,
            transport=self._transport,
        )
        if response.status_code != 200:
            raise self._api_error(response.status_code, response.body)

        try:
            feedback = GuessResponse.model_validate_json(response.body)
        except ValidationError as exc:
            raise ProtocolError("unexpected response from server for guess") from exc

        logger.debug("guess_scored", game_id=game_id, black=feedback.black, white=feedback.white)
        return feedback

    def delete_game(self, game_id: str) -> None:
        """Borra la sesión. Best-effort: cualquier falla se descarta a propósito."""

        try:
            if not game_id:
                raise URLError("empty game id")
            send_request(
                "DELETE",
                self.endpoint(f"game/{quote(game_id, safe='')}"),
                settings=self._settings,
                transport=self._transport,
            )
        except Exception as exc:
            logger.debug("game_delete_failed", game_id=game_id, error=repr(exc))

    @staticmethod
    def _api_error(status_code: int, body: bytes) -> APIError:
        message = decode_error(body)
        if message is None:
            message = f"Error {status_code}"
        logger.info("api_error", status_code=status_code, message=message)
        return APIError(status_code, message)
