import pytest

from proxy_core.models import ChatCompletionRequest


class FakeSender:
    """Records every outbound chat request and replies with a fixed text."""

    def __init__(self, reply="ok", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def __call__(self, request: ChatCompletionRequest, api_key: str) -> str:
        self.calls.append((request, api_key))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_sender():
    return FakeSender()


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("TYPHOON_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def make_sender():
    return FakeSender
