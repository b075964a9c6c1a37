from __future__ import annotations

from typer.testing import CliRunner

from pastebin_client import NotLoggedIn, TransportError
from pastebin_cli import main
from pastebin_cli.commands import paste_cmd


class _DummyClient:
    def __init__(self, fail: Exception | None = None) -> None:
        self.calls: list[tuple] = []
        self._fail = fail

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        return None

    def _call(self, *args):
        self.calls.append(args)
        if self._fail is not None:
            raise self._fail

    def new_paste_from_file(self, content: str, name: str, **kwargs) -> str:
        self._call("paste", content, name, kwargs)
        return "https://pastebin.com/B0SdAwyV"

    def delete_paste(self, paste_key: str) -> str:
        self._call("delete", paste_key)
        return "Paste Removed"

    def list_pastes(self, limit: int = 100) -> str:
        self._call("list", limit)
        return "<paste></paste>"


def _invoke(monkeypatch, tmp_path, args, client):
    seen = {}

    def _make_client(opts):
        seen["opts"] = opts
        return client

    monkeypatch.setattr(paste_cmd, "make_client", _make_client)
    runner = CliRunner()
    result = runner.invoke(main._build_app(), ["-c", str(tmp_path / "client.toml"), *args])
    return result, seen


def test_add_posts_file_content(tmp_path, monkeypatch) -> None:
    src = tmp_path / "main.go"
    src.write_text("package main\n", encoding="utf-8")
    client = _DummyClient()

    result, seen = _invoke(monkeypatch, tmp_path, ["-e", "1H", "add", str(src), "--format", "go"], client)

    assert result.exit_code == 0, result.output
    assert "https://pastebin.com/B0SdAwyV" in result.output
    assert client.calls == [("paste", "package main\n", "main.go", {"paste_format": "go"})]
    assert seen["opts"].expire == "1H"
    assert seen["opts"].client_file == str(tmp_path / "client.toml")


def test_add_missing_file(tmp_path, monkeypatch) -> None:
    client = _DummyClient()
    result, _ = _invoke(monkeypatch, tmp_path, ["add", str(tmp_path / "missing.txt")], client)
    assert result.exit_code != 0
    assert client.calls == []


def test_del_prints_api_answer(tmp_path, monkeypatch) -> None:
    client = _DummyClient()
    result, _ = _invoke(monkeypatch, tmp_path, ["del", "B0SdAwyV"], client)
    assert result.exit_code == 0, result.output
    assert "Paste Removed" in result.output
    assert client.calls == [("delete", "B0SdAwyV")]


def test_list_passes_limit(tmp_path, monkeypatch) -> None:
    client = _DummyClient()
    result, _ = _invoke(monkeypatch, tmp_path, ["list", "--limit", "5"], client)
    assert result.exit_code == 0, result.output
    assert "<paste></paste>" in result.output
    assert client.calls == [("list", 5)]


def test_not_logged_in_exits_with_2(tmp_path, monkeypatch) -> None:
    client = _DummyClient(fail=NotLoggedIn("you are not logged in, login first"))
    result, _ = _invoke(monkeypatch, tmp_path, ["list"], client)
    assert result.exit_code == 2
    assert "not logged in" in result.output


def test_transport_error_exits_with_1(tmp_path, monkeypatch) -> None:
    client = _DummyClient(fail=TransportError("connection refused"))
    result, _ = _invoke(monkeypatch, tmp_path, ["-a", "del", "x"], client)
    assert result.exit_code == 1
    assert "connection refused" in result.output


def test_global_flags_reach_options(tmp_path, monkeypatch) -> None:
    client = _DummyClient()
    key = "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4"
    result, seen = _invoke(monkeypatch, tmp_path, ["-a", "-d", "-s", key, "-V", "private", "list"], client)
    assert result.exit_code == 0, result.output
    opts = seen["opts"]
    assert opts.anonymous
    assert opts.debug
    assert opts.session_key == key
    assert opts.visibility == "private"
