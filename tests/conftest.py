"""Shared pytest fixtures: isolated storage, a fake OpenAI client, a Flask client."""

from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List

import mongomock
import pytest

# Ensure the application package is importable during tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from promptforge import database, storage  # noqa: E402
from promptforge.models import User  # noqa: E402
from promptforge.services import openai_service  # noqa: E402
from promptforge.services.workspace_service import reset_workspaces  # noqa: E402
from promptforge.state import StateStore  # noqa: E402


class FakeResponses:
    """Stands in for ``client.responses``; replays queued outputs in order."""

    def __init__(self) -> None:
        self.queue: List[Any] = []
        self.calls: List[Dict[str, Any]] = []

    def create(self, **kwargs: Any):
        self.calls.append(kwargs)
        if not self.queue:
            raise AssertionError("Unexpected call to the AI service")
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return SimpleNamespace(output_text=item)


class FakeOpenAI:
    def __init__(self) -> None:
        self.responses = FakeResponses()

    def reply(self, *outputs: Any) -> "FakeOpenAI":
        self.responses.queue.extend(outputs)
        return self

    @property
    def calls(self) -> List[Dict[str, Any]]:
        return self.responses.calls


@pytest.fixture(autouse=True)
def isolated_storage(monkeypatch: pytest.MonkeyPatch):
    """Start every test with no stored records and no live workspaces."""
    monkeypatch.delenv("ENABLE_MONGODB", raising=False)
    storage.state_records.clear()
    reset_workspaces()
    yield
    storage.state_records.clear()
    reset_workspaces()


@pytest.fixture
def fake_openai(monkeypatch: pytest.MonkeyPatch) -> FakeOpenAI:
    """Route every AI gateway call to an in-process fake."""
    fake = FakeOpenAI()
    monkeypatch.setattr(openai_service, "get_openai_client", lambda: fake)
    return fake


@pytest.fixture
def mongo_db(monkeypatch: pytest.MonkeyPatch):
    """Provide an isolated in-memory MongoDB database for each test."""
    test_db_name = "test_prompt_forge"
    monkeypatch.setenv("ENABLE_MONGODB", "true")
    monkeypatch.setenv("MONGODB_DATABASE", test_db_name)

    client = mongomock.MongoClient()
    db = client[test_db_name]

    monkeypatch.setattr(database, "get_mongo_client", lambda: client)
    monkeypatch.setattr(database, "get_database", lambda: db)

    yield db

    client.drop_database(test_db_name)


@pytest.fixture
def store() -> StateStore:
    return StateStore()


@pytest.fixture
def logged_in_store(store: StateStore) -> StateStore:
    store.login(User(name="Demo", email="demo@x.com"))
    return store


@pytest.fixture
def app():
    from promptforge.main import create_app

    flask_app = create_app()
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def client_headers() -> Dict[str, str]:
    return {"X-Client-Id": "client_test-browser-1"}
