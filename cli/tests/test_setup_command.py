from __future__ import annotations

import httpx
from typer.testing import CliRunner

from pastebin_client import PastebinClient, restore_client, set_transport
from pastebin_cli import main
from pastebin_cli.commands import setup_cmd

TOKEN = "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4"


def _patch_transport(monkeypatch, status_code: int, text: str) -> list[httpx.Request]:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(status_code, text=text)

    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    monkeypatch.setattr(
        setup_cmd, "PastebinClient", lambda *options: PastebinClient(set_transport(http_client), *options)
    )
    return seen


def test_setup_logs_in_and_saves_session(tmp_path, monkeypatch) -> None:
    seen = _patch_transport(monkeypatch, 200, TOKEN)
    client_file = tmp_path / "client.toml"

    result = CliRunner().invoke(
        main._build_app(),
        ["-c", str(client_file), "-e", "1D", "setup"],
        input="johndoe\nsecret\n",
    )

    assert result.exit_code == 0, result.output
    assert len(seen) == 1
    assert "secret" not in client_file.read_text(encoding="utf-8")
    restored = restore_client(client_file)
    assert restored.session_key == TOKEN
    assert restored.username == "johndoe"
    assert restored.expire == "1D"


def test_setup_failed_login_saves_nothing(tmp_path, monkeypatch) -> None:
    _patch_transport(monkeypatch, 200, "Bad API request, invalid login")
    client_file = tmp_path / "client.toml"

    result = CliRunner().invoke(
        main._build_app(),
        ["-c", str(client_file), "setup", "--username", "johndoe", "--password", "wrong"],
    )

    assert result.exit_code == 1
    assert "invalid login" in result.output
    assert not client_file.exists()
