from __future__ import annotations

import httpx

from . import __version__
from .errors import TransportError

USER_AGENT = f"pastebin-client/{__version__}"
DEFAULT_TIMEOUT_S = 15.0


class Transport:
    """Executes prepared requests over an httpx.Client.

    A client passed in by the caller is used as-is and never closed here; one
    created by the transport itself is closed by close(). Either way the
    client's default headers and timeout apply to every request, unless the
    request already sets the same header.
    """

    def __init__(self, http_client: httpx.Client | None = None, *, timeout_s: float = DEFAULT_TIMEOUT_S):
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(
                timeout=timeout_s,
                headers={"User-Agent": USER_AGENT},
                follow_redirects=True,
            )
        self._client = http_client

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def send(self, request: httpx.Request) -> httpx.Response:
        # requests built outside the client do not pick up its defaults
        for key, value in self._client.headers.multi_items():
            request.headers.setdefault(key, value)
        request.extensions.setdefault("timeout", self._client.timeout.as_dict())
        try:
            r = self._client.send(request)
        except httpx.RequestError as e:
            raise TransportError(str(e)) from e
        return r
