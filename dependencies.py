# dependencies.py
import os
from pathlib import Path

from storage import JsonFileStore, TodoStore

TODOS_FILE = Path(os.getenv("TODOS_FILE", "data/todos.json"))

_store = JsonFileStore(TODOS_FILE)

def get_store() -> TodoStore:
    """
    Returns the store backing the todos endpoint.
    Tests and alternative backends swap it via app.dependency_overrides.
    """
    return _store
