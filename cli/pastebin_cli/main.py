from __future__ import annotations

import typer

from pastebin_client import DEFAULT_EXPIRE, EXPIRE_VALUES

from .commands import paste_cmd, setup_cmd
from .config import CliOptions, client_file_path
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="pastebin",
        help="Post files to pastebin.com, list and delete them.",
        no_args_is_help=True,
    )

    app.command("add")(paste_cmd.add)
    app.command("del")(paste_cmd.delete)
    app.command("list")(paste_cmd.list_pastes)
    app.command("setup")(setup_cmd.setup)

    @app.callback()
    def _main(
            ctx: typer.Context,
            session_key: str | None = typer.Option(None, "-s", "--session", help="Session key to use."),
            expire: str = typer.Option(
                DEFAULT_EXPIRE, "-e", "--expire", help=f"Expiration for pastes [{','.join(EXPIRE_VALUES)}]."
            ),
            visibility: str | None = typer.Option(
                None, "-V", "--visibility", help="public, unlisted or private."
            ),
            client_file: str | None = typer.Option(None, "-c", "--client-file", help="File to save the client to."),
            anonymous: bool = typer.Option(False, "-a", "--anonymous", help="Do not use a configured account."),
            debug: bool = typer.Option(False, "-d", "--debug", help="Debug output, dumps requests."),
    ):
        setup_logging(debug)
        ctx.obj = CliOptions(
            client_file=client_file_path(client_file),
            expire=expire,
            visibility=visibility,
            session_key=session_key,
            anonymous=anonymous,
            debug=debug,
        )

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
