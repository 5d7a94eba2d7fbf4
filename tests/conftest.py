import json

import pytest
import requests

from components.page import Page, render
from services import proxy_client
from services.store import Store

PROXY = "http://proxy.test"

CURIOSITY_PAYLOAD = {
    "photos": [
        {
            "img_src": "a.jpg",
            "earth_date": "2015-1-1",
            "rover": {
                "launch_date": "2011-1-1",
                "landing_date": "2012-1-1",
                "status": "active",
            },
        }
    ]
}


class FakeResponse:
    def __init__(self, payload=None, status_code=200, body=None):
        self.status_code = status_code
        if body is None:
            body = "" if payload is None else json.dumps(payload)
        self.text = body
        self.content = body.encode("utf-8")

    @property
    def ok(self):
        return self.status_code < 400

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return json.loads(self.text)


class FakeGet:
    """Stands in for requests.get; records calls and replays a response or error."""

    def __init__(self, response=None, error=None, on_call=None):
        self.response = response
        self.error = error
        self.on_call = on_call
        self.calls = []

    def __call__(self, url, params=None, **kwargs):
        self.calls.append({"url": url, "params": params, **kwargs})
        if self.on_call is not None:
            self.on_call()
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def proxy_url(monkeypatch):
    monkeypatch.setattr(proxy_client, "_proxy_url", lambda: PROXY)
    return PROXY


@pytest.fixture
def page():
    return Page()


@pytest.fixture
def store(page):
    s = Store(on_change=lambda state: render(page, state))
    render(page, s.state)
    return s
