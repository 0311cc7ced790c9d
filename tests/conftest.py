import json
from typing import Dict, List, Optional, Union

import pytest


class FakeTransport:
    """
    Stand-in for HttpTransport: records every call and answers from a queue.

    Queue entries are dicts (sent as JSON), bytes (sent as-is) or exceptions
    (raised).
    """

    def __init__(self, *responses):
        self.responses: List[Union[dict, bytes, Exception]] = list(responses)
        self.calls: List[dict] = []

    def queue(self, response):
        self.responses.append(response)

    def send(
        self,
        method: str,
        url: str,
        body: Optional[Union[str, bytes]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> bytes:
        self.calls.append({"method": method, "url": url, "body": body, "headers": headers})
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, bytes):
            return response
        return json.dumps(response).encode("utf-8")

    @property
    def last_call(self) -> dict:
        return self.calls[-1]


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def base_url():
    return "https://api.test/ob/api"
