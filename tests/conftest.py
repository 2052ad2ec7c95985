import pytest
from fastapi.testclient import TestClient

from earthy_ai.config import Settings
from earthy_ai.live import CompletionFault, CompletionText, FaultKind
from earthy_ai.main import create_app


class FakeGateway:
    model = "fake-model"

    def __init__(self, result=None, error=None):
        self.result = result if result is not None else CompletionText("Happy to help.")
        self.error = error
        self.calls = []

    def complete(self, messages):
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return self.result


class FakeDispatcher:
    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def send(self, lead):
        if self.error is not None:
            raise self.error
        self.sent.append(lead)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def dispatcher():
    return FakeDispatcher()


@pytest.fixture
def make_client():
    def _make(gateway=None, dispatcher=None):
        app = create_app(
            settings=Settings(openai_api_key="test-key"),
            gateway=gateway or FakeGateway(),
            dispatcher=dispatcher,
        )
        return TestClient(app)

    return _make


@pytest.fixture
def fault():
    return CompletionFault(FaultKind.TRANSPORT, "ConnectionError: upstream said secret-detail-123")
