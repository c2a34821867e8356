import pytest
from pathlib import Path

from fastapi.testclient import TestClient

from dependencies import get_store
from main import app
from storage import JsonFileStore

@pytest.fixture
def todos_file(tmp_path) -> Path:
    """
    Path of a todos.json that starts out as an empty list.
    Every test gets its own file under pytest's tmp_path, so the
    project's real data/todos.json is never touched.
    """
    path = tmp_path / "data" / "todos.json"
    JsonFileStore(path).initialize()
    return path

@pytest.fixture
def store(todos_file) -> JsonFileStore:
    return JsonFileStore(todos_file)

@pytest.fixture
def api(store):
    """A TestClient whose /api/todos endpoint reads and writes the temporary store."""
    app.dependency_overrides[get_store] = lambda: store
    # No lifespan here: tests decide for themselves whether the file exists.
    yield TestClient(app)
    app.dependency_overrides.clear()
