"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from networkkit.adapters.image_codec import image_codec_available
from networkkit.core.config import NetworkKitSettings
from networkkit.core.errors import NetworkKitError
from networkkit.core.services import http_service

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

DEFAULT_CHECK_URL = "https://httpbin.org/get"


@app.callback()
def doctor() -> None:
    """Environment diagnostics."""


async def _check_http(url: str, settings: NetworkKitSettings) -> tuple[bool, str]:
    try:
        outcome = await http_service.get(url, settings=settings)
    except NetworkKitError as exc:
        return False, str(exc)
    if not outcome.success:
        return False, "Non-200 response"
    return True, f"{len(outcome.body)} chars received"


@app.command()
def run(
    url: str = typer.Option(DEFAULT_CHECK_URL, "--url", help="URL used for the connectivity check."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = NetworkKitSettings()

    table = Table(title="networkkit Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Timeout", "OK", f"{settings.timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Callback workers", "OK", str(settings.callback_workers))

    # Image codec
    if image_codec_available():
        table.add_row("Image codec", "OK", "Pillow available")
    else:
        table.add_row("Image codec", "OPTIONAL", "Pillow missing -> upload only accepts encoded image bytes")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Check proxies/firewall or pass another `--url` reachable from this host."
        )
        raise typer.Exit(code=1)
