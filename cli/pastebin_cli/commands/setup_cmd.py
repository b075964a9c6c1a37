from __future__ import annotations

import typer

from pastebin_client import (
    PastebinClient,
    PastebinClientError,
    save_client,
    set_debug,
    set_expire,
    set_password,
    set_username,
)

from .. import console
from ..config import CliOptions
from .paste_cmd import fail


def setup(
        ctx: typer.Context,
        username: str = typer.Option(..., "--username", "-u", prompt="Enter your pastebin username"),
        password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
):
    """Log in once and save the session key; the password is not saved."""
    opts: CliOptions = ctx.obj
    try:
        with PastebinClient(
                set_username(username),
                set_password(password),
                set_expire(opts.expire),
                set_debug(opts.debug),
        ) as client:
            client.login()
            path = save_client(client, opts.client_file)
    except PastebinClientError as e:
        raise fail(e)
    except OSError as e:
        console.err(f"Cannot save client to {opts.client_file}: {e}")
        raise typer.Exit(code=1)
    console.ok(f"Logged in as {username}. Client saved to {path}.")
