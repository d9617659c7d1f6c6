"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y la normalización de errores de red.
- Convierte un intercambio async en una llamada bloqueante con techo de espera.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass

import httpx

from core.config import AppSettings
from core.errors import NetworkError, URLError
from core.telemetry import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RawResponse:
    """Status + body crudo de un único intercambio HTTP."""

    status_code: int
    body: bytes


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def _exchange(
    method: str,
    url: str,
    *,
    content: bytes | None,
    headers: dict[str, str] | None,
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None,
) -> RawResponse:
    async with build_async_client(settings, transport=transport) as client:
        try:
            response = await asyncio.wait_for(
                client.request(method, url, content=content, headers=headers),
                timeout=settings.resource_timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise NetworkError(
                f"request timed out after {settings.resource_timeout_seconds:g} seconds",
                cause=exc,
            ) from exc

    if response is None:
        raise NetworkError("no response from server")
    return RawResponse(status_code=response.status_code, body=response.content)


def send_request(
    method: str,
    url: str,
    *,
    content: bytes | None = None,
    headers: dict[str, str] | None = None,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RawResponse:
    """Ejecuta exactamente un intercambio HTTP y espera su resultado.

    Límites:
    - `http_timeout_seconds`: timeout de httpx (connect/read/write/pool).
    - `resource_timeout_seconds`: el intercambio completo, body incluido.
    - `wait_ceiling_seconds`: techo de la espera síncrona, aunque el
      transporte no haya disparado su propio timeout.

    Lanza `URLError` si la URL no es utilizable y `NetworkError` ante
    cualquier otra falla. Sin reintentos.
    """

    settings = settings or AppSettings()
    ceiling = settings.wait_ceiling_seconds
    started = time.perf_counter()
    logger.debug("http_request", method=method, url=url)

    try:
        result = asyncio.run(
            asyncio.wait_for(
                _exchange(
                    method,
                    url,
                    content=content,
                    headers=headers,
                    settings=settings,
                    transport=transport,
                ),
                timeout=ceiling,
            )
        )
    except asyncio.TimeoutError as exc:
        logger.info("http_ceiling_exceeded", method=method, url=url, ceiling_seconds=ceiling)
        raise NetworkError(f"request timed out after {ceiling:g} seconds", cause=exc) from exc
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
        raise URLError(f"invalid URL: {url}") from exc
    except httpx.TimeoutException as exc:
        raise NetworkError(str(exc) or "request timed out", cause=exc) from exc
    except httpx.HTTPError as exc:
        logger.info("http_transport_error", method=method, url=url, error=repr(exc))
        raise NetworkError(str(exc) or exc.__class__.__name__, cause=exc) from exc

    logger.debug(
        "http_response",
        method=method,
        url=url,
        status_code=result.status_code,
        elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    return result
