# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from todo_api.db.store import TodoStore, get_store
from todo_api.main import app


@pytest.fixture()
def store() -> TodoStore:
    return TodoStore()


@pytest.fixture()
def client(store: TodoStore):
    """TestClient bound to a fresh store instead of the process-wide one."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
