from __future__ import annotations

from networkkit.core.errors import (
    DecodingDataFailedError,
    EncodingDataFailedError,
    ErrorKind,
    InvalidUrlError,
    NetworkKitError,
    ResponseFailedError,
)


def test_each_kind_has_its_own_fixed_description() -> None:
    descriptions = {kind.description() for kind in ErrorKind}

    assert len(descriptions) == len(ErrorKind) == 4


def test_exceptions_carry_kind_and_description() -> None:
    for cls, kind in [
        (InvalidUrlError, ErrorKind.INVALID_URL),
        (ResponseFailedError, ErrorKind.RESPONSE_FAILED),
        (DecodingDataFailedError, ErrorKind.DECODING_DATA_FAILED),
        (EncodingDataFailedError, ErrorKind.ENCODING_DATA_FAILED),
    ]:
        exc = cls()
        assert isinstance(exc, NetworkKitError)
        assert exc.kind is kind
        assert str(exc) == kind.description()
