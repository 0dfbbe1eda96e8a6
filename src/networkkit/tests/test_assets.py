from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from networkkit.adapters.assets import collect_upload_fields, read_file_bytes
from networkkit.core.domain.models import AssetKind, FileField, TextField


class RecordingEncoder:
    def __init__(self, result: bytes | None = b"\xff\xd8fake") -> None:
        self.result = result
        self.calls: list[tuple[Any, float]] = []

    def encode_jpeg(self, image: Any, quality: float) -> bytes | None:
        self.calls.append((image, quality))
        return self.result


def test_read_file_bytes(tmp_path: Path) -> None:
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"video-bytes")

    assert read_file_bytes(path) == b"video-bytes"
    assert read_file_bytes(str(path)) == b"video-bytes"
    assert read_file_bytes(tmp_path / "missing.mp4") is None
    assert read_file_bytes(tmp_path) is None


def test_fields_are_ordered_parameters_images_videos_audios(tmp_path: Path) -> None:
    video = tmp_path / "v.mp4"
    video.write_bytes(b"v")
    audio = tmp_path / "a.m4a"
    audio.write_bytes(b"a")

    fields = collect_upload_fields(
        parameters={"title": "hello"},
        images={"cover": b"\xff\xd8raw"},
        videos={"clip": video},
        audios={"voice": str(audio)},
    )

    assert fields == [
        TextField("title", "hello"),
        FileField("cover", AssetKind.IMAGE, b"\xff\xd8raw"),
        FileField("clip", AssetKind.VIDEO, b"v"),
        FileField("voice", AssetKind.AUDIO, b"a"),
    ]


def test_unreadable_file_is_dropped_without_affecting_others(tmp_path: Path, caplog) -> None:
    audio = tmp_path / "a.m4a"
    audio.write_bytes(b"a")

    with caplog.at_level(logging.WARNING, logger="networkkit.adapters.assets"):
        fields = collect_upload_fields(
            parameters={"foo": "bar"},
            videos={"clip": tmp_path / "nope.mp4"},
            audios={"voice": audio},
        )

    assert [field.name for field in fields] == ["foo", "voice"]
    assert "clip" in caplog.text


def test_images_go_through_encoder_with_quality() -> None:
    encoder = RecordingEncoder()
    sentinel = object()

    fields = collect_upload_fields(images={"cover": sentinel}, image_encoder=encoder, image_quality=0.5)

    assert encoder.calls == [(sentinel, 0.5)]
    assert fields == [FileField("cover", AssetKind.IMAGE, b"\xff\xd8fake")]


def test_images_are_dropped_without_encoder_or_on_encoder_failure() -> None:
    assert collect_upload_fields(images={"cover": object()}, image_encoder=None) == []
    assert collect_upload_fields(images={"cover": object()}, image_encoder=RecordingEncoder(None)) == []


def test_encoded_image_bytes_skip_the_encoder() -> None:
    encoder = RecordingEncoder()

    fields = collect_upload_fields(images={"cover": bytearray(b"jpg")}, image_encoder=encoder)

    assert encoder.calls == []
    assert fields == [FileField("cover", AssetKind.IMAGE, b"jpg")]
