from __future__ import annotations

import re
from typing import Any

_KEY_RE = re.compile(r"[0-9a-f]{32}", re.IGNORECASE)


def key_ok(value: Any) -> bool:
    """Return True if value has the shape of an api_dev_key / api_user_key.

    The API answers a failed login with HTTP 200 and a plain-text message, so
    this check is also what tells a session key apart from an error body.
    """
    if not isinstance(value, str):
        return False
    return _KEY_RE.fullmatch(value) is not None
