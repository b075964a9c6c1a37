from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_URL = "https://pastebin.com/api/"
# api_dev_key registered for this client
DEFAULT_DEV_KEY = "10b20d3ff00b856a455ba5004ea9d2a1"

EXPIRE_VALUES: dict[str, str] = {
    "N": "Never",
    "10M": "10 Minutes",
    "1H": "1 Hour",
    "1D": "1 Day",
    "1W": "1 Week",
    "2W": "2 Weeks",
    "1M": "1 Month",
    "6M": "6 Months",
    "1Y": "1 Year",
}
DEFAULT_EXPIRE = "10M"


class Visibility(Enum):
    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"

    @property
    def code(self) -> str:
        """Value of the api_paste_private field."""
        return _VISIBILITY_CODES[self]

    @classmethod
    def parse(cls, value: "Visibility | str | int") -> "Visibility":
        if isinstance(value, Visibility):
            return value
        raw = str(value).strip().lower()
        for member, code in _VISIBILITY_CODES.items():
            if raw in (member.value, code):
                return member
        raise ValueError(f"unknown visibility {value!r}")


_VISIBILITY_CODES = {
    Visibility.PUBLIC: "0",
    Visibility.UNLISTED: "1",
    Visibility.PRIVATE: "2",
}

DEFAULT_VISIBILITY = Visibility.UNLISTED


@dataclass
class ClientState:
    base_url: str = DEFAULT_URL
    dev_key: str = DEFAULT_DEV_KEY
    session_key: str = ""
    username: str = ""
    expire: str = DEFAULT_EXPIRE
    visibility: Visibility = DEFAULT_VISIBILITY
