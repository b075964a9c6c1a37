from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from .client import PastebinClient
from .config_types import DEFAULT_DEV_KEY, DEFAULT_EXPIRE, DEFAULT_URL, DEFAULT_VISIBILITY
from .errors import PersistenceError
from .options import Option, set_dev_key, set_expire, set_session_key, set_url, set_username, set_visibility

logger = logging.getLogger(__name__)


def to_record(client: PastebinClient) -> dict[str, Any]:
    """Persistable fields of a client. The password is never included."""
    state = client.state
    return {
        "url": state.base_url,
        "dev_key": state.dev_key,
        "session_key": state.session_key,
        "username": state.username,
        "expire": state.expire,
        "visibility": state.visibility.value,
    }


def from_record(data: dict[str, Any], *options: Option) -> PastebinClient:
    dev_key = str(data.get("dev_key") or "").strip()
    if not dev_key:
        dev_key = DEFAULT_DEV_KEY
        logger.debug("api_dev_key set to default")

    restored: list[Option] = [
        set_url(str(data.get("url") or DEFAULT_URL)),
        set_dev_key(dev_key),
        set_username(str(data.get("username") or "")),
        set_expire(str(data.get("expire") or DEFAULT_EXPIRE)),
        set_visibility(str(data.get("visibility") or DEFAULT_VISIBILITY.value)),
    ]
    session_key = str(data.get("session_key") or "").strip()
    if session_key:
        restored.append(set_session_key(session_key))
    return PastebinClient(*restored, *options)


def save_client(client: PastebinClient, path: str | os.PathLike[str]) -> Path:
    """Write the client's state to path (TOML, mode 0600). Returns the path."""
    p = Path(path).expanduser()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(tomli_w.dumps(to_record(client)).encode("utf-8"))
    os.chmod(p, 0o600)
    return p


def restore_client(path: str | os.PathLike[str], *options: Option) -> PastebinClient:
    """Load a client saved with save_client, then apply options.

    Raises FileNotFoundError if there is no saved state, PersistenceError if
    the file cannot be decoded and ConfigurationError if a stored value is
    invalid.
    """
    p = Path(path).expanduser()
    with p.open("rb") as f:
        try:
            data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise PersistenceError(f"cannot read client state from {p}: {e}") from e
    return from_record(data, *options)
