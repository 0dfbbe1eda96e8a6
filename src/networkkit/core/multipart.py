"""Constructor de cuerpos `multipart/form-data`.

Formato (CRLF entre líneas):
- Texto:   `--B`, `Content-Disposition: form-data; name="k"`, línea vacía, valor.
- Binario: `--B`, `Content-Disposition: ...; filename="<fijo>"`,
           `Content-Type: <fijo>`, línea vacía, bytes.
- Cierre:  `--B--` una única vez al final.

El builder solo recibe bytes ya resueltos; leer ficheros o re-codificar
imágenes es trabajo de `networkkit.adapters`.
"""

from __future__ import annotations

import uuid
from typing import Iterable, Sequence

from networkkit.core.domain.models import FileField, MultipartField, TextField

CRLF = "\r\n"


def new_boundary() -> str:
    return f"Boundary-{str(uuid.uuid4()).upper()}"


def _payload(field: MultipartField) -> bytes:
    if isinstance(field, FileField):
        return field.data
    return _encode(field.value)


def choose_boundary(fields: Iterable[MultipartField]) -> str:
    """Genera un boundary que no aparece en ningún campo ni nombre."""

    payloads = [(_encode(field.name), _payload(field)) for field in fields]
    while True:
        boundary = new_boundary()
        needle = boundary.encode("ascii")
        if not any(needle in name or needle in data for name, data in payloads):
            return boundary


def _encode(text: str) -> bytes:
    # Conversión con pérdida: un surrogate suelto nunca aborta el cuerpo.
    return text.encode("utf-8", errors="replace")


def build_multipart_body(boundary: str, fields: Sequence[MultipartField]) -> bytes:
    """Ensambla el cuerpo multipart en memoria."""

    parts: list[bytes] = []
    for field in fields:
        parts.append(_encode(f"--{boundary}{CRLF}"))
        if isinstance(field, TextField):
            parts.append(_encode(f'Content-Disposition: form-data; name="{field.name}"{CRLF}{CRLF}'))
            parts.append(_encode(f"{field.value}{CRLF}"))
            continue

        parts.append(
            _encode(
                f'Content-Disposition: form-data; name="{field.name}"; '
                f'filename="{field.filename}"{CRLF}'
            )
        )
        parts.append(_encode(f"Content-Type: {field.content_type}{CRLF}{CRLF}"))
        parts.append(field.data)
        parts.append(_encode(CRLF))

    parts.append(_encode(f"--{boundary}--{CRLF}"))
    return b"".join(parts)


def multipart_content_type(boundary: str) -> str:
    return f"multipart/form-data; boundary={boundary}"
