"""Modelos del dominio.

Por qué aquí:
- Son estructuras puras: no conocen httpx, Pillow ni el sistema de ficheros.
- Los servicios y adaptadores intercambian estos tipos, nunca respuestas crudas.

Nota:
- `HttpOutcome` es una tupla con nombre para poder desempaquetarla
  (`body, success = await get(...)`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union


class HttpOutcome(NamedTuple):
    """Resultado normalizado de una petición: cuerpo y éxito (status == 200)."""

    body: str
    success: bool

    @classmethod
    def failed(cls) -> "HttpOutcome":
        return cls(body="", success=False)


class AssetKind(str, Enum):
    """Tipos de adjunto binario soportados por `upload`."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"

    def filename(self) -> str:
        """Nombre de fichero fijo que se declara en el multipart."""

        return _FILENAMES[self]

    def content_type(self) -> str:
        """MIME fijo que se declara en el multipart."""

        return _CONTENT_TYPES[self]


_FILENAMES = {
    AssetKind.IMAGE: "image.jpg",
    AssetKind.VIDEO: "video.mp4",
    AssetKind.AUDIO: "audio.m4a",
}

_CONTENT_TYPES = {
    AssetKind.IMAGE: "image/jpg",
    AssetKind.VIDEO: "video/mp4",
    AssetKind.AUDIO: "audio/m4a",
}


@dataclass(frozen=True)
class TextField:
    """Campo de texto de un formulario multipart."""

    name: str
    value: str


@dataclass(frozen=True)
class FileField:
    """Adjunto binario ya resuelto a bytes."""

    name: str
    kind: AssetKind
    data: bytes

    @property
    def filename(self) -> str:
        return self.kind.filename()

    @property
    def content_type(self) -> str:
        return self.kind.content_type()


MultipartField = Union[TextField, FileField]
