from __future__ import annotations

import os
from dataclasses import dataclass

from platformdirs import user_config_dir

from pastebin_client import DEFAULT_EXPIRE

APP_NAME = "pastebin"
CLIENT_FILENAME = "client.toml"
ENV_CLIENT_FILE = "PASTEBIN_CLIENT_FILE"


@dataclass
class CliOptions:
    client_file: str
    expire: str = DEFAULT_EXPIRE
    visibility: str | None = None
    session_key: str | None = None
    anonymous: bool = False
    debug: bool = False


def client_file_path(override: str | None = None) -> str:
    """Where the saved client lives: --client-file, then $PASTEBIN_CLIENT_FILE, then the user config dir."""
    if override:
        return os.path.expanduser(override)
    env_value = os.getenv(ENV_CLIENT_FILE, "").strip()
    if env_value:
        return os.path.expanduser(env_value)
    return os.path.join(user_config_dir(APP_NAME), CLIENT_FILENAME)
