"""Shared fixtures: fake Gemini clients and a fresh session state.

No test talks to the network; the SDK client is injected.
"""

import pytest

from src.untertitel_tool.ui.state import ensure_defaults_exist


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeModels:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, model, contents, **kwargs):
        self.calls.append({"model": model, "contents": contents, **kwargs})
        if self.error is not None:
            raise self.error
        return FakeResponse(self.text)


class FakeClient:
    def __init__(self, text=None, error=None):
        self.models = FakeModels(text=text, error=error)


@pytest.fixture()
def fake_client():
    return FakeClient(text="## Zusammenfassung\n\n**Hallo** Welt")


@pytest.fixture()
def failing_client():
    return FakeClient(error=ConnectionError("network down"))


@pytest.fixture()
def state():
    s = {}
    ensure_defaults_exist(s)
    return s
