import sys
from pathlib import Path
from types import SimpleNamespace

# Ensure repository root is on sys.path so 'import backend' works
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Force pytest-anyio to use asyncio backend (avoid requiring 'trio')
import pytest

from backend.app.gateway.handle import Available, Unavailable
from backend.app.gateway.service import AIGateway


class FakeModels:
    """Stands in for ``client.aio.models``; records every call."""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    async def generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeClient:
    def __init__(self, text=None, error=None, close_error=None):
        self.models = FakeModels(text=text, error=error)
        self.close_error = close_error
        self.closed = 0
        self.aio = SimpleNamespace(models=self.models, aclose=self._aclose)

    async def _aclose(self):
        self.closed += 1
        if self.close_error is not None:
            raise self.close_error

    @property
    def calls(self):
        return self.models.calls


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def make_gateway():
    def _make(text=None, error=None):
        client = FakeClient(text=text, error=error)
        return AIGateway(Available(client)), client

    return _make


@pytest.fixture
def unavailable_gateway():
    return AIGateway(Unavailable("missing_api_key"))


@pytest.fixture
def make_client():
    return FakeClient
