from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def info(msg: str) -> None:
    err_console.print(f"[bold cyan]•[/] {escape(msg)}")


def ok(msg: str) -> None:
    err_console.print(f"[bold green]OK[/] {escape(msg)}")


def warn(msg: str) -> None:
    err_console.print(f"[bold yellow]WARN[/] {escape(msg)}")


def err(msg: str) -> None:
    err_console.print(f"[bold red]ERR[/] {escape(msg)}")


def out(text: str) -> None:
    """Print an API response verbatim to stdout."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)
