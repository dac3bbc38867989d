import json
from collections.abc import Callable
from dataclasses import dataclass, field

import httpx
import pytest


@dataclass
class RecordedHttp:
    """An httpx.Client backed by a MockTransport, plus every request it received."""

    client: httpx.Client
    requests: list[httpx.Request] = field(default_factory=list)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json_body(self) -> object:
        return json.loads(self.last_request.content)


@pytest.fixture()
def make_http() -> Callable[..., RecordedHttp]:
    """Build a recording HTTP client answering every request with one canned response."""

    def _make(
        status_code: int = 200,
        *,
        json_body: object = None,
        content: bytes = b"",
    ) -> RecordedHttp:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if json_body is not None:
                return httpx.Response(status_code, json=json_body)
            return httpx.Response(status_code, content=content)

        return RecordedHttp(
            client=httpx.Client(transport=httpx.MockTransport(handler)),
            requests=requests,
        )

    return _make
