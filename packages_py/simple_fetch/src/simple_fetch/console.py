"""
Console output for simple_fetch, rendered with Rich.

Holds the builder's default failure logger (standard error) and the
request/response tracing panels shown when SIMPLE_FETCH_DEBUG is on.
"""
import json
from typing import Any, Mapping, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from .utils.headers import mask_headers_for_logging

console = Console()
err_console = Console(stderr=True)


def default_error_logger(message: str, error: BaseException) -> None:
    """Write a failed request to standard error."""
    err_console.print(
        f"[bold red][ERROR][/bold red] {escape(message)} "
        f"{escape(type(error).__name__)}: {escape(str(error))}"
    )


def _format_body(body: Any) -> str:
    """Format body for pretty printing."""
    if body is None:
        return ""
    if isinstance(body, (dict, list)):
        return json.dumps(body, indent=2, ensure_ascii=False)
    if isinstance(body, bytes):
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError:
            return f"<binary data: {len(body)} bytes>"
    return str(body)


def print_request(
    method: str,
    url: str,
    headers: Mapping[str, str],
    body: Any = None,
) -> None:
    """Render an outgoing request."""
    console.print(
        Panel(
            f"[bold cyan]{method}[/bold cyan] {escape(url)}",
            title="[bold blue]Request[/bold blue]",
        )
    )
    console.print("[bold]Headers:[/bold]", mask_headers_for_logging(headers))
    if body is not None:
        console.print(
            Panel(Syntax(_format_body(body), "json"), title="[bold]Request Body[/bold]")
        )


def print_response(
    url: str,
    status: int,
    status_text: Optional[str],
    headers: Mapping[str, str],
    data: Any = None,
) -> None:
    """Render a received response."""
    status_color = "green" if 200 <= status < 300 else "red"
    console.print(
        Panel(
            f"[bold {status_color}]{status}[/bold {status_color}] {escape(status_text or '')}",
            title=f"[bold blue]Response[/bold blue] ({escape(url)})",
        )
    )
    console.print("[bold]Headers:[/bold]", dict(headers))
    if data:
        console.print(
            Panel(Syntax(_format_body(data), "json"), title="[bold]Response Body[/bold]")
        )
