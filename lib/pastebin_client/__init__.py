__version__ = "0.1.0"

from .client import PastebinClient
from .config_types import DEFAULT_DEV_KEY, DEFAULT_EXPIRE, DEFAULT_URL, EXPIRE_VALUES, ClientState, Visibility
from .errors import (
    ApiError,
    ConfigurationError,
    LoginFailed,
    MissingCredentials,
    NotLoggedIn,
    PastebinClientError,
    PersistenceError,
    PreconditionError,
    TransportError,
)
from .options import (
    set_debug,
    set_dev_key,
    set_expire,
    set_password,
    set_session_key,
    set_timeout,
    set_transport,
    set_url,
    set_username,
    set_visibility,
)
from .persistence import restore_client, save_client
from .validators import key_ok

__all__ = [
    "PastebinClient",
    "ClientState",
    "Visibility",
    "DEFAULT_DEV_KEY",
    "DEFAULT_EXPIRE",
    "DEFAULT_URL",
    "EXPIRE_VALUES",
    "ApiError",
    "ConfigurationError",
    "LoginFailed",
    "MissingCredentials",
    "NotLoggedIn",
    "PastebinClientError",
    "PersistenceError",
    "PreconditionError",
    "TransportError",
    "set_debug",
    "set_dev_key",
    "set_expire",
    "set_password",
    "set_session_key",
    "set_timeout",
    "set_transport",
    "set_url",
    "set_username",
    "set_visibility",
    "restore_client",
    "save_client",
    "key_ok",
]
