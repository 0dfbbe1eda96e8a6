"""Wrapper de httpx: constructor de clientes y ejecutor de requests.

Por qué un wrapper:
- Estandariza timeouts, headers y redirecciones para todas las operaciones.
- Facilita testeo: se puede sustituir `build_async_client` por un cliente con
  `httpx.MockTransport`.

Contrato del ejecutor:
- URL no parseable -> `InvalidUrlError`.
- Fallo de transporte o deadline vencido -> `ResponseFailedError`.
- Cuerpo que no es UTF-8 -> `DecodingDataFailedError`.
- Cualquier otra respuesta -> `HttpOutcome(body, status == 200)`; el status
  es un dato, no un error.
- Los errores no llevan `__cause__`: la excepción de httpx solo se registra
  en el log a nivel DEBUG.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Mapping

import httpx

from networkkit.core.config import NetworkKitSettings
from networkkit.core.domain.models import HttpOutcome
from networkkit.core.errors import (
    DecodingDataFailedError,
    InvalidUrlError,
    ResponseFailedError,
)

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_async_client(
    settings: NetworkKitSettings | None = None,
    *,
    timeout: float | None = None,
    extra_headers: Mapping[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` de un solo uso (sin pooling entre llamadas)."""

    settings = settings or NetworkKitSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "*/*",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout or settings.timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=headers,
        transport=transport,
    )


def parse_url(url: str) -> httpx.URL:
    """Valida que `url` sea absoluta (http/https con host)."""

    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError, ValueError):
        raise InvalidUrlError() from None
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidUrlError()
    return parsed


async def execute_request(
    method: str,
    url: str,
    *,
    content: bytes | None = None,
    headers: Mapping[str, str] | None = None,
    timeout: float,
    settings: NetworkKitSettings | None = None,
) -> HttpOutcome:
    """Ejecuta un request y normaliza la respuesta a `HttpOutcome`.

    `timeout` es un deadline para el ciclo completo (conexión + envío +
    lectura), no por fase.
    """

    target = parse_url(url)
    async with build_async_client(settings, timeout=timeout, extra_headers=headers) as client:
        try:
            response = await asyncio.wait_for(
                client.request(method, target, content=content),
                timeout=timeout,
            )
        except (httpx.HTTPError, asyncio.TimeoutError) as exc:
            logger.debug("%s %s failed: %s", method, target, type(exc).__name__)
            raise ResponseFailedError() from None

    logger.debug(
        "%s %s -> HTTP %d (%d bytes)",
        method,
        target,
        response.status_code,
        len(response.content),
    )

    try:
        body = response.content.decode("utf-8")
    except UnicodeDecodeError:
        raise DecodingDataFailedError() from None
    return HttpOutcome(body=body, success=response.status_code == 200)
