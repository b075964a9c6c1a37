from __future__ import annotations


class PastebinClientError(Exception):
    """Base client error."""


class ConfigurationError(PastebinClientError, ValueError):
    """Invalid option value. Never sent over the wire."""


class PreconditionError(PastebinClientError):
    """Checked before any request is built."""


class MissingCredentials(PreconditionError):
    """Login attempted without a username or password."""


class NotLoggedIn(PreconditionError):
    """Operation needs a session key and the client has none."""


class TransportError(PastebinClientError):
    """Transport/network layer error."""


class PersistenceError(PastebinClientError):
    """Persisted client record could not be decoded."""


class ApiError(PastebinClientError):
    def __init__(self, status_code: int, message: str, body: str | None = None, reason: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.reason = reason


class LoginFailed(ApiError):
    """Login returned a non-200 status or a body that is not a session key."""
