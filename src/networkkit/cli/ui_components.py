"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar paneles en `get`, `post` y `upload`.
"""

from __future__ import annotations

import json
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from networkkit.core.domain.models import HttpOutcome


def configure_logging(verbose: bool) -> None:
    """Envía los logs de `networkkit` a la consola vía RichHandler."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _render_body(body: str) -> Syntax | Text:
    try:
        parsed = json.loads(body)
    except ValueError:
        return Text(body)
    return Syntax(json.dumps(parsed, indent=2, ensure_ascii=False), "json", word_wrap=True)


def build_outcome_panel(method: str, url: str, outcome: HttpOutcome) -> Panel:
    """Panel con el cuerpo de la respuesta y el marcador de éxito."""

    status = Text("OK", style="bold green") if outcome.success else Text("FAIL", style="bold red")
    title = Text.assemble(f"{method} {url} ", status)
    body = _render_body(outcome.body) if outcome.body else Text("(empty body)", style="dim")
    return Panel(body, title=title, border_style="green" if outcome.success else "red")


def print_error(console: Console, message: str) -> None:
    console.print(f"[red]Error:[/red] {message}")
