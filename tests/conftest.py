from types import SimpleNamespace

import pytest
import requests


class FakeResponse:
    def __init__(self, body, status_code=200):
        self._body = body
        self.status_code = status_code

    @property
    def content(self):
        return self._body if isinstance(self._body, bytes) else self._body.encode("utf-8")

    @property
    def text(self):
        return self._body.decode("utf-8") if isinstance(self._body, bytes) else self._body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


@pytest.fixture
def fake_web(monkeypatch):
    """In-memory site: map URL -> body (str/bytes) or (body, status); unknown URLs fail to connect"""
    web = SimpleNamespace(pages={}, calls=[])

    def fake_get(url, *args, **kwargs):
        web.calls.append(url)
        if url not in web.pages:
            raise requests.ConnectionError(f"Failed to establish a new connection: {url}")
        page = web.pages[url]
        if isinstance(page, tuple):
            return FakeResponse(*page)
        return FakeResponse(page)

    monkeypatch.setattr(requests, "get", fake_get)
    return web
