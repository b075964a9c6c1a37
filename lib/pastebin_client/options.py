"""Composable client options.

Every factory returns a callable that mutates a PastebinClient when applied.
Options that can be checked from their argument alone (url, session key,
dev key) are checked when the option is created; the error is raised only
when the option is applied, so an option is always inert until then.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable

import httpx

from .config_types import EXPIRE_VALUES, Visibility
from .encoding import join_url
from .errors import ConfigurationError
from .validators import key_ok

if TYPE_CHECKING:
    from .client import PastebinClient

Option = Callable[["PastebinClient"], None]


def _failing(message: str) -> Option:
    def option(c: "PastebinClient") -> None:
        raise ConfigurationError(message)

    return option


def apply_options(client: "PastebinClient", options: Iterable[Option]) -> None:
    """Apply in order, stopping at the first failure. Nothing is rolled back."""
    for option in options:
        option(client)


def set_transport(http_client: httpx.Client) -> Option:
    """Use the given httpx.Client for all requests.

    Its default headers and timeout apply to the requests sent through it; the
    library's own User-Agent is only set on clients it creates itself.
    The client is not closed by PastebinClient.close().
    """

    def option(c: "PastebinClient") -> None:
        c._use_http_client(http_client)

    return option


def set_url(url: str) -> Option:
    try:
        join_url(url, "")
    except ConfigurationError as e:
        return _failing(str(e))

    def option(c: "PastebinClient") -> None:
        c._state.base_url = url

    return option


def set_session_key(session_key: str) -> Option:
    if not key_ok(session_key):
        return _failing("supplied session key does not look like a valid key")

    def option(c: "PastebinClient") -> None:
        c._state.session_key = session_key

    return option


def set_username(username: str) -> Option:
    def option(c: "PastebinClient") -> None:
        c._state.username = username

    return option


def set_password(password: str) -> Option:
    def option(c: "PastebinClient") -> None:
        c._password = password

    return option


def set_dev_key(dev_key: str) -> Option:
    """Use a non-default api_dev_key. Rarely needed."""
    if not key_ok(dev_key):
        return _failing("supplied dev key does not look like a valid key")

    def option(c: "PastebinClient") -> None:
        c._state.dev_key = dev_key

    return option


def check_expire(expire: str) -> str:
    if expire not in EXPIRE_VALUES:
        valid = ", ".join(f"{code} ({label})" for code, label in EXPIRE_VALUES.items())
        raise ConfigurationError(f"expire value {expire!r} is not valid. Valid values are: {valid}")
    return expire


def check_visibility(visibility: Visibility | str | int) -> Visibility:
    try:
        return Visibility.parse(visibility)
    except ValueError:
        valid = ", ".join(f"{v.value} ({v.code})" for v in Visibility)
        raise ConfigurationError(
            f"visibility value {visibility!r} is not valid. Valid values are: {valid}"
        ) from None


def set_expire(expire: str) -> Option:
    def option(c: "PastebinClient") -> None:
        c._state.expire = check_expire(expire)

    return option


def set_visibility(visibility: Visibility | str | int) -> Option:
    def option(c: "PastebinClient") -> None:
        c._state.visibility = check_visibility(visibility)

    return option


def set_debug(enabled: bool = True) -> Option:
    """Log every outgoing request at DEBUG level."""

    def option(c: "PastebinClient") -> None:
        c._debug = bool(enabled)

    return option


def set_timeout(timeout_s: float) -> Option:
    """Timeout for the http client the library creates itself."""

    def option(c: "PastebinClient") -> None:
        if timeout_s <= 0:
            raise ConfigurationError(f"timeout must be positive, got {timeout_s!r}")
        c._use_timeout(float(timeout_s))

    return option
