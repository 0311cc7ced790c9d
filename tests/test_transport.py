import pytest
import requests

from stockfighter.api.transport import HttpTransport, Transport
from stockfighter.errors import TransportError


class _FakeResponse:
    def __init__(self, status_code=200, content=b'{"ok": true}'):
        self.status_code = status_code
        self.content = content

    @property
    def ok(self):
        return self.status_code < 400


@pytest.fixture
def captured(monkeypatch):
    """Patch Session.request; returns the list of captured calls and a response slot."""
    state = {"calls": [], "response": _FakeResponse(), "closed": 0}

    def fake_request(self, method, url, **kwargs):
        state["calls"].append({"method": method, "url": url, **kwargs})
        response = state["response"]
        if isinstance(response, Exception):
            raise response
        return response

    original_close = requests.Session.close

    def fake_close(self):
        state["closed"] += 1
        original_close(self)

    monkeypatch.setattr(requests.Session, "request", fake_request)
    monkeypatch.setattr(requests.Session, "close", fake_close)
    return state


def test_satisfies_transport_protocol():
    assert isinstance(HttpTransport(), Transport)


def test_get_returns_raw_body(captured):
    body = HttpTransport(timeout=3).send("GET", "https://api.test/ob/api/heartbeat")

    assert body == b'{"ok": true}'
    call = captured["calls"][0]
    assert call["method"] == "GET"
    assert call["data"] is None
    assert call["timeout"] == 3
    assert call["headers"]["Connection"] == "close"
    assert "Content-Type" not in call["headers"]


def test_post_sends_body_and_custom_header(captured):
    HttpTransport().send(
        "POST",
        "https://api.test/ob/api/venues/TESTEX/stocks/FOOBAR/orders",
        body='{"qty": 1}',
        headers={"X-Starfighter-Authorization": "secret"}
    )

    call = captured["calls"][0]
    assert call["data"] == b'{"qty": 1}'
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["headers"]["X-Starfighter-Authorization"] == "secret"


def test_connection_closed_after_each_call(captured):
    transport = HttpTransport()
    transport.send("GET", "https://api.test/a")
    transport.send("GET", "https://api.test/b")

    assert captured["closed"] == 2


def test_error_status_still_returns_body(captured):
    captured["response"] = _FakeResponse(404, b'{"ok": false, "error": "No venue exists with that id"}')

    body = HttpTransport().send("GET", "https://api.test/ob/api/venues/NOPEX/heartbeat")

    assert b"No venue exists" in body


@pytest.mark.parametrize("exc", [
    requests.exceptions.ConnectionError("refused"),
    requests.exceptions.Timeout("slow"),
    requests.exceptions.InvalidURL("bad url"),
])
def test_request_exceptions_become_transport_errors(captured, exc):
    captured["response"] = exc

    with pytest.raises(TransportError) as excinfo:
        HttpTransport().send("GET", "https://api.test/ob/api/heartbeat")

    assert excinfo.value.cause is exc
    assert captured["closed"] == 1
