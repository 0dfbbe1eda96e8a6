"""Entry point de la CLI `networkkit`.

Comandos:
- `get` / `post`: requests con parámetros `-p clave=valor`.
- `upload`: multipart con `--image/--video/--audio nombre=ruta`.
- `doctor run`: diagnóstico del entorno.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
from rich.console import Console

from networkkit import __version__
from networkkit.cli import doctor
from networkkit.cli.ui_components import build_outcome_panel, configure_logging, print_error
from networkkit.core.domain.models import HttpOutcome
from networkkit.core.errors import NetworkKitError
from networkkit.core.services import http_service

app = typer.Typer(no_args_is_help=True, help="GET/POST/upload helper built on httpx.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _parse_pairs(values: Optional[list[str]], option: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for raw in values or []:
        if "=" not in raw:
            raise typer.BadParameter(f"expected key=value, got {raw!r}", param_hint=option)
        key, value = raw.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter(f"empty key in {raw!r}", param_hint=option)
        pairs[key] = value
    return pairs


def _show(method: str, url: str, outcome: HttpOutcome) -> None:
    _console.print(build_outcome_panel(method, url, outcome))
    if not outcome.success:
        raise typer.Exit(code=1)


def _run_or_exit(coro) -> HttpOutcome:
    try:
        return asyncio.run(coro)
    except NetworkKitError as exc:
        print_error(_console, str(exc))
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs."),
) -> None:
    configure_logging(verbose)


@app.command()
def version() -> None:
    """Print the installed version."""

    _console.print(__version__)


@app.command()
def get(
    url: str = typer.Argument(..., help="Target URL."),
    param: Optional[list[str]] = typer.Option(None, "--param", "-p", help="Query parameter key=value."),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0.001, help="Deadline in seconds."),
) -> None:
    """Send a GET request."""

    parameters = _parse_pairs(param, "--param")
    outcome = _run_or_exit(http_service.get(url, parameters, timeout=timeout))
    _show("GET", url, outcome)


@app.command()
def post(
    url: str = typer.Argument(..., help="Target URL."),
    param: Optional[list[str]] = typer.Option(None, "--param", "-p", help="Form field key=value."),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0.001, help="Deadline in seconds."),
) -> None:
    """Send a url-encoded POST request."""

    parameters = _parse_pairs(param, "--param")
    outcome = _run_or_exit(http_service.post(url, parameters, timeout=timeout))
    _show("POST", url, outcome)


@app.command()
def upload(
    url: str = typer.Argument(..., help="Target URL."),
    param: Optional[list[str]] = typer.Option(None, "--param", "-p", help="Form field key=value."),
    image: Optional[list[str]] = typer.Option(None, "--image", help="Image field name=path."),
    video: Optional[list[str]] = typer.Option(None, "--video", help="Video field name=path."),
    audio: Optional[list[str]] = typer.Option(None, "--audio", help="Audio field name=path."),
    quality: Optional[float] = typer.Option(None, "--quality", min=0.0, max=1.0, help="JPEG quality (0..1)."),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0.001, help="Deadline in seconds."),
) -> None:
    """Send a multipart/form-data upload."""

    outcome = _run_or_exit(
        http_service.upload(
            url,
            _parse_pairs(param, "--param"),
            images=_parse_pairs(image, "--image"),
            videos=_parse_pairs(video, "--video"),
            audios=_parse_pairs(audio, "--audio"),
            image_compression_quality=quality,
            timeout=timeout,
        )
    )
    _show("UPLOAD", url, outcome)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
