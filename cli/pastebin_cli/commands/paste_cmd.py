from __future__ import annotations

from pathlib import Path

import typer

from pastebin_client import PastebinClientError, PreconditionError

from .. import console
from ..config import CliOptions
from ..http import make_client


def fail(e: Exception) -> typer.Exit:
    console.err(str(e))
    if isinstance(e, PreconditionError):
        return typer.Exit(code=2)
    return typer.Exit(code=1)


def add(
        ctx: typer.Context,
        file: Path = typer.Argument(..., help="File to post."),
        paste_format: str | None = typer.Option(None, "--format", "-f", help="Syntax highlighting, e.g. python."),
):
    """Post a file as a new paste and print its url."""
    opts: CliOptions = ctx.obj
    try:
        content = file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.err(f"Cannot read {file}: {e}")
        raise typer.Exit(code=1)

    try:
        with make_client(opts) as client:
            url = client.new_paste_from_file(content, file.name, paste_format=paste_format)
    except PastebinClientError as e:
        raise fail(e)
    console.out(url)


def delete(
        ctx: typer.Context,
        paste_key: str = typer.Argument(..., help="Key of the paste, e.g. B0SdAwyV."),
):
    """Delete one of your pastes."""
    opts: CliOptions = ctx.obj
    try:
        with make_client(opts) as client:
            result = client.delete_paste(paste_key)
    except PastebinClientError as e:
        raise fail(e)
    console.out(result)


def list_pastes(
        ctx: typer.Context,
        limit: int = typer.Option(100, "--limit", "-n", min=1, max=1000, help="Maximum number of pastes."),
):
    """Print the raw listing of your pastes."""
    opts: CliOptions = ctx.obj
    try:
        with make_client(opts) as client:
            results = client.list_pastes(limit=limit)
    except PastebinClientError as e:
        raise fail(e)
    console.out(results)
