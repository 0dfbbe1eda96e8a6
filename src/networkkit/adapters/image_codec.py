"""Adaptador de imágenes: re-codificación JPEG con Pillow.

Requisitos:
- `Pillow` instalado (extra `images`). Sin él, `default_image_encoder()`
  devuelve `None` y `upload` solo acepta imágenes ya codificadas (bytes).

Acepta:
- `PIL.Image.Image`
- Rutas locales (`str` / `os.PathLike`) a cualquier formato que Pillow abra.
"""

from __future__ import annotations

import io
import logging
import os
from typing import Any

try:
    from PIL import Image
except Exception:  # pragma: no cover
    Image = None  # type: ignore

logger = logging.getLogger(__name__)


def _pillow_quality(quality: float) -> int:
    return max(1, min(100, round(quality * 100)))


class PillowImageEncoder:
    """`ImageEncoder` basado en Pillow."""

    def encode_jpeg(self, image: Any, quality: float) -> bytes | None:
        if Image is None:
            return None
        try:
            if isinstance(image, (str, os.PathLike)):
                with Image.open(image) as opened:
                    return self._save(opened, quality)
            if isinstance(image, Image.Image):
                return self._save(image, quality)
        except (OSError, ValueError) as exc:
            logger.debug("JPEG encoding failed: %s", exc)
            return None
        logger.debug("unsupported image value of type %s", type(image).__name__)
        return None

    @staticmethod
    def _save(image: Any, quality: float) -> bytes:
        # JPEG no admite canal alfa ni paletas.
        if image.mode not in ("RGB", "L"):
            image = image.convert("RGB")
        buffer = io.BytesIO()
        image.save(buffer, format="JPEG", quality=_pillow_quality(quality))
        return buffer.getvalue()


def image_codec_available() -> bool:
    return Image is not None


def default_image_encoder() -> PillowImageEncoder | None:
    """Encoder del host, o `None` si Pillow no está disponible."""

    if Image is None:
        return None
    return PillowImageEncoder()
