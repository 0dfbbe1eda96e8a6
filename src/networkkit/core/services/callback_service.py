"""Operaciones HTTP con callback.

Cada función ejecuta la operación async equivalente de `http_service` en el
pool de segundo plano y entrega el resultado con un `CallbackDispatcher`.

Reglas:
- Nunca lanzan por fallos de red/URL/decodificación: el callback recibe
  `("", False)` (operaciones de texto) o `None` (operaciones tipadas).
- Un status distinto de 200 también llega como `("", False)`.
- El tipo de error no se expone; solo queda en el log a nivel DEBUG.
- Devuelven el `Future` del trabajo; su resultado es el mismo valor que
  recibe el callback.
- Los argumentos inválidos (p. ej. `timeout <= 0`) lanzan `ValueError` en
  la llamada, antes de programar el trabajo.

Example:

    def on_done(body: str, success: bool) -> None:
        if success:
            print(body)

    post("https://httpbin.org/post", {"foo": "bar"}, callback=on_done)
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Future
from typing import Any, Awaitable, Callable, Mapping, Optional, TypeVar

from networkkit.adapters.assets import FileReference
from networkkit.adapters.dispatchers import InlineDispatcher, submit_background
from networkkit.core.config import NetworkKitSettings, resolve_timeout
from networkkit.core.domain.models import HttpOutcome
from networkkit.core.errors import NetworkKitError
from networkkit.core.interfaces.dispatcher import CallbackDispatcher
from networkkit.core.interfaces.image_encoder import ImageEncoder
from networkkit.core.services import http_service

T = TypeVar("T")
R = TypeVar("R")

Parameters = Mapping[str, str]
OutcomeCallback = Callable[[str, bool], Any]

logger = logging.getLogger(__name__)


def _submit(
    work: Callable[[], Awaitable[R]],
    *,
    fallback: R,
    deliver: Callable[[R], None],
    settings: NetworkKitSettings,
) -> "Future[R]":
    def run() -> R:
        try:
            result = asyncio.run(work())
        except NetworkKitError as exc:
            logger.debug("callback request failed: %s", exc.kind.value)
            result = fallback
        deliver(result)
        return result

    return submit_background(settings.callback_workers, run)


def _submit_outcome(
    work: Callable[[], Awaitable[HttpOutcome]],
    callback: OutcomeCallback,
    dispatcher: CallbackDispatcher | None,
    settings: NetworkKitSettings,
) -> "Future[HttpOutcome]":
    dispatcher = dispatcher or InlineDispatcher()

    async def outcome_or_failed() -> HttpOutcome:
        outcome = await work()
        return outcome if outcome.success else HttpOutcome.failed()

    return _submit(
        outcome_or_failed,
        fallback=HttpOutcome.failed(),
        deliver=lambda outcome: dispatcher.dispatch(callback, outcome.body, outcome.success),
        settings=settings,
    )


def _submit_value(
    work: Callable[[], Awaitable[R]],
    callback: Callable[[Optional[R]], Any],
    dispatcher: CallbackDispatcher | None,
    settings: NetworkKitSettings,
) -> "Future[Optional[R]]":
    dispatcher = dispatcher or InlineDispatcher()
    return _submit(
        work,
        fallback=None,
        deliver=lambda value: dispatcher.dispatch(callback, value),
        settings=settings,
    )


def get(
    url: str,
    parameters: Parameters | None = None,
    *,
    callback: OutcomeCallback,
    timeout: float | None = None,
    dispatcher: CallbackDispatcher | None = None,
    settings: NetworkKitSettings | None = None,
) -> "Future[HttpOutcome]":
    settings = settings or NetworkKitSettings()
    timeout = resolve_timeout(timeout, settings)
    return _submit_outcome(
        lambda: http_service.get(url, parameters, timeout=timeout, settings=settings),
        callback,
        dispatcher,
        settings,
    )


def post(
    url: str,
    parameters: Parameters | None = None,
    *,
    callback: OutcomeCallback,
    timeout: float | None = None,
    dispatcher: CallbackDispatcher | None = None,
    settings: NetworkKitSettings | None = None,
) -> "Future[HttpOutcome]":
    settings = settings or NetworkKitSettings()
    timeout = resolve_timeout(timeout, settings)
    return _submit_outcome(
        lambda: http_service.post(url, parameters, timeout=timeout, settings=settings),
        callback,
        dispatcher,
        settings,
    )


def get_object(
    url: str,
    model: type[T],
    parameters: Parameters | None = None,
    *,
    callback: Callable[[Optional[T]], Any],
    timeout: float | None = None,
    dispatcher: CallbackDispatcher | None = None,
    settings: NetworkKitSettings | None = None,
) -> "Future[Optional[T]]":
    settings = settings or NetworkKitSettings()
    timeout = resolve_timeout(timeout, settings)
    return _submit_value(
        lambda: http_service.get_object(url, model, parameters, timeout=timeout, settings=settings),
        callback,
        dispatcher,
        settings,
    )


def get_object_array(
    url: str,
    model: type[T],
    parameters: Parameters | None = None,
    *,
    callback: Callable[[Optional[list[T]]], Any],
    timeout: float | None = None,
    dispatcher: CallbackDispatcher | None = None,
    settings: NetworkKitSettings | None = None,
) -> "Future[Optional[list[T]]]":
    settings = settings or NetworkKitSettings()
    timeout = resolve_timeout(timeout, settings)
    return _submit_value(
        lambda: http_service.get_object_array(
            url, model, parameters, timeout=timeout, settings=settings
        ),
        callback,
        dispatcher,
        settings,
    )


def post_object(
    url: str,
    model: type[T],
    parameters: Parameters | None = None,
    *,
    callback: Callable[[Optional[T]], Any],
    timeout: float | None = None,
    dispatcher: CallbackDispatcher | None = None,
    settings: NetworkKitSettings | None = None,
) -> "Future[Optional[T]]":
    settings = settings or NetworkKitSettings()
    timeout = resolve_timeout(timeout, settings)
    return _submit_value(
        lambda: http_service.post_object(url, model, parameters, timeout=timeout, settings=settings),
        callback,
        dispatcher,
        settings,
    )


def post_object_array(
    url: str,
    model: type[T],
    parameters: Parameters | None = None,
    *,
    callback: Callable[[Optional[list[T]]], Any],
    timeout: float | None = None,
    dispatcher: CallbackDispatcher | None = None,
    settings: NetworkKitSettings | None = None,
) -> "Future[Optional[list[T]]]":
    settings = settings or NetworkKitSettings()
    timeout = resolve_timeout(timeout, settings)
    return _submit_value(
        lambda: http_service.post_object_array(
            url, model, parameters, timeout=timeout, settings=settings
        ),
        callback,
        dispatcher,
        settings,
    )


def upload(
    url: str,
    parameters: Parameters | None = None,
    *,
    callback: OutcomeCallback,
    videos: Mapping[str, FileReference] | None = None,
    images: Mapping[str, Any] | None = None,
    audios: Mapping[str, FileReference] | None = None,
    image_compression_quality: float | None = None,
    timeout: float | None = None,
    image_encoder: ImageEncoder | None = None,
    dispatcher: CallbackDispatcher | None = None,
    settings: NetworkKitSettings | None = None,
) -> "Future[HttpOutcome]":
    settings = settings or NetworkKitSettings()
    timeout = resolve_timeout(timeout, settings)
    return _submit_outcome(
        lambda: http_service.upload(
            url,
            parameters,
            videos=videos,
            images=images,
            audios=audios,
            image_compression_quality=image_compression_quality,
            timeout=timeout,
            image_encoder=image_encoder,
            settings=settings,
        ),
        callback,
        dispatcher,
        settings,
    )
