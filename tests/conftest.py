from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Ensure project root is importable for tests
ROOT = str(Path(__file__).resolve().parent.parent)
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


from palindrome_api.app.core.config import Settings  # noqa: E402
from palindrome_api.app.main import create_app  # noqa: E402
from palindrome_api.app.store import InMemoryMessageStore  # noqa: E402


@pytest.fixture
def memory_store():
    return InMemoryMessageStore()


@pytest.fixture
def make_client(memory_store):
    """Build a TestClient around a fresh app; ``strict`` selects the palindrome mode."""
    from fastapi.testclient import TestClient

    def _make(strict: bool = True, store=None, raise_server_exceptions: bool = True):
        app = create_app(Settings(strict_palindrome=strict), store=store or memory_store)
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
