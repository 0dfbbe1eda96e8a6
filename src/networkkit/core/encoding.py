"""Codificador de parámetros (`application/x-www-form-urlencoded`).

Implementación:
- Las claves nunca se codifican.
- Los valores se escapan con un conjunto "alfanumérico": letras, marcas y
  dígitos Unicode (categorías L*, M*, N*) pasan tal cual; el resto se emite
  como `%XX` (bytes UTF-8, hex en mayúsculas), incluidos `-._~`.

Notas:
- Un valor que no se puede codificar en UTF-8 (surrogates sueltos) se degrada
  a cadena vacía; el resto del mapa se codifica igualmente.
- El orden de las entradas es el del mapa; no hay invariante de orden.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Mapping

logger = logging.getLogger(__name__)


def _is_alphanumeric(char: str) -> bool:
    return unicodedata.category(char)[0] in ("L", "M", "N")


def percent_encode(value: str) -> str | None:
    """Escapa `value` dejando pasar solo letras y dígitos.

    Devuelve `None` si el valor no es representable en UTF-8.
    """

    out: list[str] = []
    for char in value:
        if _is_alphanumeric(char):
            out.append(char)
            continue
        try:
            raw = char.encode("utf-8")
        except UnicodeEncodeError:
            return None
        out.append("".join(f"%{byte:02X}" for byte in raw))
    return "".join(out)


def build_parameter_string(parameters: Mapping[str, str] | None) -> str:
    """Construye `k=v&k=v` a partir de un mapa; `None` o `{}` dan `""`."""

    if not parameters:
        return ""

    pairs: list[str] = []
    for key, value in parameters.items():
        encoded = percent_encode(value)
        if encoded is None:
            logger.debug("parameter %r could not be encoded, sending empty value", key)
            encoded = ""
        pairs.append(f"{key}={encoded}")
    return "&".join(pairs)


def append_query(url: str, parameters: Mapping[str, str] | None) -> str:
    """URL de un GET: añade `?<parámetros>` solo si hay parámetros."""

    query = build_parameter_string(parameters)
    if not query:
        return url
    return f"{url}?{query}"
