"""Operaciones HTTP (forma async, que también es el núcleo de las demás).

Cada operación existe una sola vez aquí; `callback_service` la envuelve para
la forma con callback.

Errores (ver `networkkit.core.errors`):
- `get`/`post`/`upload` lanzan `InvalidUrlError`, `ResponseFailedError` o
  `DecodingDataFailedError` (cuerpo no UTF-8). Un status distinto de 200 se
  devuelve como `HttpOutcome(body, False)`.
- Las variantes `*_object*` además lanzan `DecodingDataFailedError` si el
  request no fue 200 o el JSON no encaja con el modelo, y
  `EncodingDataFailedError` si el texto no se puede re-codificar.

Example:

    outcome = await get("https://httpbin.org/get", {"foo": "bar"})
    if outcome.success:
        print(outcome.body)

    user = await get_object("https://api.example.com/me", User)
"""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from networkkit.adapters import http_client
from networkkit.adapters.assets import FileReference, collect_upload_fields
from networkkit.adapters.image_codec import default_image_encoder
from networkkit.core.config import NetworkKitSettings, resolve_timeout
from networkkit.core.decoding import decode_object, decode_object_array, require_success
from networkkit.core.domain.models import HttpOutcome
from networkkit.core.encoding import append_query, build_parameter_string
from networkkit.core.interfaces.image_encoder import ImageEncoder
from networkkit.core.multipart import (
    build_multipart_body,
    choose_boundary,
    multipart_content_type,
)

T = TypeVar("T")

Parameters = Mapping[str, str]


async def get(
    url: str,
    parameters: Parameters | None = None,
    *,
    timeout: float | None = None,
    settings: NetworkKitSettings | None = None,
) -> HttpOutcome:
    """HTTP GET; los parámetros van codificados tras `?`."""

    settings = settings or NetworkKitSettings()
    return await http_client.execute_request(
        "GET",
        append_query(url, parameters),
        timeout=resolve_timeout(timeout, settings),
        settings=settings,
    )


async def post(
    url: str,
    parameters: Parameters | None = None,
    *,
    timeout: float | None = None,
    settings: NetworkKitSettings | None = None,
) -> HttpOutcome:
    """HTTP POST con cuerpo `application/x-www-form-urlencoded`."""

    settings = settings or NetworkKitSettings()
    return await http_client.execute_request(
        "POST",
        url,
        content=build_parameter_string(parameters).encode("utf-8"),
        headers={"Content-Type": http_client.FORM_CONTENT_TYPE},
        timeout=resolve_timeout(timeout, settings),
        settings=settings,
    )


async def get_object(
    url: str,
    model: type[T],
    parameters: Parameters | None = None,
    *,
    timeout: float | None = None,
    settings: NetworkKitSettings | None = None,
) -> T:
    outcome = await get(url, parameters, timeout=timeout, settings=settings)
    return decode_object(require_success(outcome), model)


async def get_object_array(
    url: str,
    model: type[T],
    parameters: Parameters | None = None,
    *,
    timeout: float | None = None,
    settings: NetworkKitSettings | None = None,
) -> list[T]:
    outcome = await get(url, parameters, timeout=timeout, settings=settings)
    return decode_object_array(require_success(outcome), model)


async def post_object(
    url: str,
    model: type[T],
    parameters: Parameters | None = None,
    *,
    timeout: float | None = None,
    settings: NetworkKitSettings | None = None,
) -> T:
    outcome = await post(url, parameters, timeout=timeout, settings=settings)
    return decode_object(require_success(outcome), model)


async def post_object_array(
    url: str,
    model: type[T],
    parameters: Parameters | None = None,
    *,
    timeout: float | None = None,
    settings: NetworkKitSettings | None = None,
) -> list[T]:
    outcome = await post(url, parameters, timeout=timeout, settings=settings)
    return decode_object_array(require_success(outcome), model)


async def upload(
    url: str,
    parameters: Parameters | None = None,
    *,
    videos: Mapping[str, FileReference] | None = None,
    images: Mapping[str, Any] | None = None,
    audios: Mapping[str, FileReference] | None = None,
    image_compression_quality: float | None = None,
    timeout: float | None = None,
    image_encoder: ImageEncoder | None = None,
    settings: NetworkKitSettings | None = None,
) -> HttpOutcome:
    """HTTP POST `multipart/form-data` con parámetros y adjuntos.

    Los adjuntos se resuelven a bytes (lectura síncrona) antes de abrir la
    conexión. Los que no se pueden resolver se omiten sin error.
    """

    settings = settings or NetworkKitSettings()
    timeout = resolve_timeout(timeout, settings)
    # Validar la URL antes de leer ficheros potencialmente grandes.
    http_client.parse_url(url)

    quality = image_compression_quality
    if quality is None:
        quality = settings.image_compression_quality

    fields = collect_upload_fields(
        parameters=parameters,
        images=images,
        videos=videos,
        audios=audios,
        image_encoder=image_encoder or default_image_encoder(),
        image_quality=quality,
    )
    boundary = choose_boundary(fields)
    return await http_client.execute_request(
        "POST",
        url,
        content=build_multipart_body(boundary, fields),
        headers={"Content-Type": multipart_content_type(boundary)},
        timeout=timeout,
        settings=settings,
    )
