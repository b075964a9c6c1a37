from __future__ import annotations

from email import policy
from email.parser import BytesParser

import httpx
import pytest


def parse_form(content_type: str, body: bytes) -> dict[str, str]:
    raw = b"Content-Type: " + content_type.encode("ascii") + b"\r\n\r\n" + body
    msg = BytesParser(policy=policy.HTTP).parsebytes(raw)
    assert msg.is_multipart()
    fields: dict[str, str] = {}
    for part in msg.iter_parts():
        name = part.get_param("name", header="content-disposition")
        fields[name] = part.get_payload(decode=True).decode("utf-8")
    return fields


class FakeApi:
    """Answers requests by endpoint name and records what was sent."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._replies: dict[str, httpx.Response] = {}
        self.error: Exception | None = None

    def reply(self, endpoint: str, status_code: int, text: str) -> None:
        self._replies[endpoint] = httpx.Response(status_code, text=text)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        endpoint = request.url.path.rsplit("/", 1)[-1]
        reply = self._replies.get(endpoint)
        if reply is None:
            return httpx.Response(404, text="no reply configured")
        return httpx.Response(reply.status_code, content=reply.content)

    def http_client(self, **kwargs) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self._handle), **kwargs)

    def form(self, index: int = -1) -> dict[str, str]:
        request = self.requests[index]
        return parse_form(request.headers["Content-Type"], request.content)


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def form_parser():
    return parse_form
