from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from networkkit.cli import doctor
from networkkit.cli.main import app
from networkkit.tests.conftest import BASE_URL

runner = CliRunner()


def test_get_command_prints_body(echo) -> None:
    result = runner.invoke(app, ["get", f"{BASE_URL}/get", "-p", "foo=bar"])

    assert result.exit_code == 0, result.output
    assert '"foo": "bar"' in result.output
    assert "OK" in result.output


def test_post_command(echo) -> None:
    result = runner.invoke(app, ["post", f"{BASE_URL}/post", "--param", "foo=bar"])

    assert result.exit_code == 0, result.output
    assert echo.requests[0].content == b"foo=bar"


def test_upload_command(echo, tmp_path: Path) -> None:
    video = tmp_path / "clip.mp4"
    video.write_bytes(b"video")

    result = runner.invoke(
        app,
        ["upload", f"{BASE_URL}/upload", "-p", "foo=bar", "--video", f"clip={video}"],
    )

    assert result.exit_code == 0, result.output
    assert "video.mp4" in result.output


def test_non_200_exits_with_failure(echo) -> None:
    result = runner.invoke(app, ["get", f"{BASE_URL}/status/500"])

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_invalid_url_reports_error() -> None:
    result = runner.invoke(app, ["get", "not a url"])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_malformed_parameter_is_rejected() -> None:
    result = runner.invoke(app, ["get", f"{BASE_URL}/get", "-p", "novalue"])

    assert result.exit_code == 2


def test_doctor_reports_connectivity(echo) -> None:
    result = runner.invoke(doctor.app, ["run", "--url", f"{BASE_URL}/get"])

    assert result.exit_code == 0, result.output
    assert "HTTP connectivity" in result.output


def test_doctor_fails_when_unreachable(echo) -> None:
    result = runner.invoke(doctor.app, ["run", "--url", f"{BASE_URL}/broken"])

    assert result.exit_code == 1
    assert "FAIL" in result.output
