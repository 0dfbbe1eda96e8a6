"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (resultado HTTP, campos multipart).
- El dominio no conoce httpx, Pillow ni el sistema de ficheros.
"""

from networkkit.core.domain.models import (
    AssetKind,
    FileField,
    HttpOutcome,
    MultipartField,
    TextField,
)

__all__ = ["AssetKind", "FileField", "HttpOutcome", "MultipartField", "TextField"]
