"""Taxonomía de errores compartida por todas las operaciones.

Reglas:
- Conjunto cerrado de cuatro tipos; ninguno se reintenta.
- Cada tipo lleva una única descripción fija y ningún contexto estructurado
  (ni el campo ofensivo ni el diagnóstico del parser).
- Solo las formas async los lanzan; las formas con callback los colapsan a
  `("", False)` / `None`.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Failure kinds surfaced by the throwing/async entry points."""

    INVALID_URL = "invalid_url"
    RESPONSE_FAILED = "response_failed"
    DECODING_DATA_FAILED = "decoding_data_failed"
    ENCODING_DATA_FAILED = "encoding_data_failed"

    def description(self) -> str:
        """Fixed human readable description, suitable for logging."""

        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorKind.INVALID_URL: "networkkit: URL object could not be created from given url string",
    ErrorKind.RESPONSE_FAILED: "networkkit: Making HTTP response failed",
    ErrorKind.DECODING_DATA_FAILED: "networkkit: Failed decoding result string",
    ErrorKind.ENCODING_DATA_FAILED: "networkkit: Failed encoding result string",
}


class NetworkKitError(Exception):
    """Base de los errores de networkkit; `kind` identifica el tipo."""

    kind: ErrorKind

    def __init__(self) -> None:
        super().__init__(self.kind.description())


class InvalidUrlError(NetworkKitError):
    kind = ErrorKind.INVALID_URL


class ResponseFailedError(NetworkKitError):
    kind = ErrorKind.RESPONSE_FAILED


class DecodingDataFailedError(NetworkKitError):
    kind = ErrorKind.DECODING_DATA_FAILED


class EncodingDataFailedError(NetworkKitError):
    kind = ErrorKind.ENCODING_DATA_FAILED

