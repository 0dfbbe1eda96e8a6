"""Resolución de adjuntos de `upload` a campos multipart.

Implementación:
- Vídeos y audios: rutas locales leídas enteras en memoria (sin streaming).
- Imágenes: `bytes` se envían tal cual; cualquier otro valor pasa por el
  `ImageEncoder` del host.

Notas:
- Un adjunto que no se puede resolver se omite del cuerpo sin lanzar error;
  solo queda un WARNING en el log con el nombre del campo.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Union

from networkkit.core.domain.models import AssetKind, FileField, MultipartField, TextField
from networkkit.core.interfaces.image_encoder import ImageEncoder

logger = logging.getLogger(__name__)

FileReference = Union[str, "os.PathLike[str]"]


def read_file_bytes(reference: FileReference) -> bytes | None:
    try:
        return Path(reference).read_bytes()
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("could not read %r: %s", reference, exc)
        return None


def _file_fields(files: Mapping[str, FileReference] | None, kind: AssetKind) -> list[FileField]:
    fields: list[FileField] = []
    for name, reference in (files or {}).items():
        data = read_file_bytes(reference)
        if data is None:
            logger.warning("dropping %s field %r: file could not be read", kind.value, name)
            continue
        fields.append(FileField(name=name, kind=kind, data=data))
    return fields


def _image_fields(
    images: Mapping[str, Any] | None,
    encoder: ImageEncoder | None,
    quality: float,
) -> list[FileField]:
    fields: list[FileField] = []
    for name, image in (images or {}).items():
        if isinstance(image, (bytes, bytearray, memoryview)):
            data: bytes | None = bytes(image)
        elif encoder is None:
            logger.warning("dropping image field %r: no image encoder available", name)
            continue
        else:
            data = encoder.encode_jpeg(image, quality)

        if data is None:
            logger.warning("dropping image field %r: image could not be encoded", name)
            continue
        fields.append(FileField(name=name, kind=AssetKind.IMAGE, data=data))
    return fields


def collect_upload_fields(
    *,
    parameters: Mapping[str, str] | None = None,
    images: Mapping[str, Any] | None = None,
    videos: Mapping[str, FileReference] | None = None,
    audios: Mapping[str, FileReference] | None = None,
    image_encoder: ImageEncoder | None = None,
    image_quality: float = 0.95,
) -> list[MultipartField]:
    """Campos en orden: parámetros, imágenes, vídeos, audios."""

    fields: list[MultipartField] = [
        TextField(name=key, value=value) for key, value in (parameters or {}).items()
    ]
    fields.extend(_image_fields(images, image_encoder, image_quality))
    fields.extend(_file_fields(videos, AssetKind.VIDEO))
    fields.extend(_file_fields(audios, AssetKind.AUDIO))
    return fields
