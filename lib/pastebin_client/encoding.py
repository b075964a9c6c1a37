from __future__ import annotations

import posixpath
from typing import Mapping

import httpx

from .errors import ConfigurationError

Parameters = dict[str, str]


def _form_fields(parameters: Mapping[str, str | bytes]) -> dict[str, tuple[None, str | bytes]]:
    # no filename: httpx writes a plain form field
    return {name: (None, value) for name, value in parameters.items()}


def encode_parameters(parameters: Mapping[str, str | bytes]) -> tuple[httpx.SyncByteStream, str]:
    """Encode form fields as httpx's streaming multipart body plus its Content-Type.

    Fields are rendered while the stream is read, so an encoding failure is
    raised to whoever reads it.
    """
    if not parameters:
        raise ValueError("no form fields to encode")
    req = httpx.Request("POST", "/", files=_form_fields(parameters))
    return req.stream, req.headers["Content-Type"]


def join_url(base_url: str, endpoint: str) -> str:
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise ConfigurationError(f"invalid API url {base_url!r}: {e}") from e
    if not url.scheme or not url.host:
        raise ConfigurationError(f"invalid API url {base_url!r}: not an absolute url")

    path = posixpath.normpath(f"{url.path}/{endpoint}")
    path = "/" + path.lstrip("/")
    return str(url.copy_with(path=path))


def build_request(base_url: str, endpoint: str, parameters: Mapping[str, str | bytes]) -> httpx.Request:
    if not parameters:
        raise ValueError("no form fields to encode")
    return httpx.Request("POST", join_url(base_url, endpoint), files=_form_fields(parameters))


def dump_request(request: httpx.Request) -> str:
    """Render a request roughly as it goes on the wire. Buffers the body."""
    target = request.url.raw_path.decode("ascii")
    lines = [f"{request.method} {target} HTTP/1.1"]
    lines.extend(f"{key}: {value}" for key, value in request.headers.items())
    body = request.read().decode("utf-8", errors="replace")
    return "\r\n".join(lines) + "\r\n\r\n" + body
