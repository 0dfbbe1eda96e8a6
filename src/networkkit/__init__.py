"""networkkit: GET/POST/upload sobre httpx con decodificación JSON tipada.

Dos formas de llamada para cada operación:
- `networkkit.aio`: corrutinas que devuelven el resultado o lanzan
  `NetworkKitError`.
- `networkkit.callbacks`: funciones que ejecutan el request en segundo plano
  y entregan el resultado a un callback (nunca lanzan).
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from networkkit.core.config import NetworkKitSettings  # noqa: E402
from networkkit.core.domain.models import AssetKind, HttpOutcome  # noqa: E402
from networkkit.core.encoding import build_parameter_string  # noqa: E402
from networkkit.core.errors import (  # noqa: E402
    DecodingDataFailedError,
    EncodingDataFailedError,
    ErrorKind,
    InvalidUrlError,
    NetworkKitError,
    ResponseFailedError,
)
from networkkit.core.services import callback_service as callbacks  # noqa: E402
from networkkit.core.services import http_service as aio  # noqa: E402

__all__ = [
    "AssetKind",
    "DecodingDataFailedError",
    "EncodingDataFailedError",
    "ErrorKind",
    "HttpOutcome",
    "InvalidUrlError",
    "NetworkKitError",
    "NetworkKitSettings",
    "ResponseFailedError",
    "aio",
    "build_parameter_string",
    "callbacks",
    "__version__",
]
