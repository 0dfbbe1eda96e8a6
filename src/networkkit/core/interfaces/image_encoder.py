"""Contrato del códec de imágenes usado por `upload`.

Reglas de diseño:
- Es una capacidad opcional del entorno: si no hay implementación, las
  imágenes que no vengan ya como bytes no se pueden adjuntar.
- El multipart nunca ve el códec, solo los bytes resultantes.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ImageEncoder(Protocol):
    """Re-codifica una imagen del host como JPEG."""

    def encode_jpeg(self, image: Any, quality: float) -> bytes | None:
        """Devuelve los bytes JPEG (calidad 0..1) o `None` si no se puede."""

        ...
