"""Capa de decodificación tipada (JSON → modelos Pydantic v2).

Implementación:
- El texto ya decodificado como UTF-8 se vuelve a convertir en bytes y se
  valida con un `TypeAdapter` construido en cada llamada (sin estado global).
- `T` suele ser un `BaseModel`, pero sirve cualquier tipo que Pydantic sepa
  validar (dataclasses, `TypedDict`, ...).

Errores:
- JSON mal formado o forma incorrecta -> `DecodingDataFailedError`.
- Fallo al re-codificar el texto a bytes -> `EncodingDataFailedError`.
- Los errores no encadenan la causa (`from None`); el detalle del parser
  solo queda en el log a nivel DEBUG.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from networkkit.core.domain.models import HttpOutcome
from networkkit.core.errors import DecodingDataFailedError, EncodingDataFailedError

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _to_json_bytes(text: str) -> bytes:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        raise EncodingDataFailedError() from None


def _validate(adapter: TypeAdapter, raw: bytes):
    try:
        return adapter.validate_json(raw)
    except ValidationError as exc:
        logger.debug("decoding failed with %d validation error(s)", exc.error_count())
        raise DecodingDataFailedError() from None


def decode_object(text: str, model: type[T]) -> T:
    """Decodifica un único objeto JSON. Un cuerpo vacío no es decodificable."""

    if not text:
        raise DecodingDataFailedError()
    return _validate(TypeAdapter(model), _to_json_bytes(text))


def decode_object_array(text: str, model: type[T]) -> list[T]:
    """Decodifica un array JSON de objetos `model`."""

    return _validate(TypeAdapter(list[model]), _to_json_bytes(text))  # type: ignore[valid-type]


def require_success(outcome: HttpOutcome) -> str:
    """Devuelve el cuerpo si el request fue 200; si no, no hay nada que decodificar."""

    if not outcome.success:
        raise DecodingDataFailedError()
    return outcome.body
