from __future__ import annotations

from networkkit.core import multipart
from networkkit.core.domain.models import AssetKind, FileField, TextField
from networkkit.core.multipart import (
    build_multipart_body,
    choose_boundary,
    multipart_content_type,
    new_boundary,
)
from networkkit.tests.conftest import parse_multipart


def test_single_text_field_layout() -> None:
    body = build_multipart_body("B0UND", [TextField("foo", "bar")])

    assert body == (
        b"--B0UND\r\n"
        b'Content-Disposition: form-data; name="foo"\r\n\r\n'
        b"bar\r\n"
        b"--B0UND--\r\n"
    )
    parts = parse_multipart(body, "B0UND")
    assert len(parts) == 1
    assert parts[0][1] == b"bar"


def test_binary_fields_use_fixed_filename_and_mime_per_kind() -> None:
    fields = [
        FileField("photo", AssetKind.IMAGE, b"\xff\xd8jpeg"),
        FileField("clip", AssetKind.VIDEO, b"\x00\x01mp4"),
        FileField("voice", AssetKind.AUDIO, b"m4a\r\n--"),
    ]

    parts = parse_multipart(build_multipart_body("XYZ", fields), "XYZ")

    assert [headers["Content-Disposition"] for headers, _ in parts] == [
        'form-data; name="photo"; filename="image.jpg"',
        'form-data; name="clip"; filename="video.mp4"',
        'form-data; name="voice"; filename="audio.m4a"',
    ]
    assert [headers["Content-Type"] for headers, _ in parts] == ["image/jpg", "video/mp4", "audio/m4a"]
    assert [payload for _, payload in parts] == [b"\xff\xd8jpeg", b"\x00\x01mp4", b"m4a\r\n--"]


def test_no_fields_yields_only_terminator() -> None:
    assert build_multipart_body("B", []) == b"--B--\r\n"


def test_text_values_keep_non_ascii_verbatim() -> None:
    parts = parse_multipart(build_multipart_body("B", [TextField("name", "José ñ")]), "B")

    assert parts[0][1] == "José ñ".encode("utf-8")


def test_new_boundary_is_fresh_per_call() -> None:
    first, second = new_boundary(), new_boundary()

    assert first.startswith("Boundary-")
    assert first != second


def test_choose_boundary_skips_tokens_found_in_payloads(monkeypatch) -> None:
    candidates = iter(["Boundary-TAKEN", "Boundary-FREE"])
    monkeypatch.setattr(multipart, "new_boundary", lambda: next(candidates))

    boundary = choose_boundary([FileField("f", AssetKind.VIDEO, b"...Boundary-TAKEN...")])

    assert boundary == "Boundary-FREE"


def test_content_type_header() -> None:
    assert multipart_content_type("abc") == "multipart/form-data; boundary=abc"
