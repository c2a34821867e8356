# client.py
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

import requests

from models import IdGenerator, Priority, Task

DEFAULT_BASE_URL = "http://127.0.0.1:8000"
TODOS_PATH = "/api/todos"


class SyncState(str, Enum):
    IDLE = "idle"
    SETTLED = "settled"
    ROLLED_BACK = "rolled_back"
    UNPERSISTED = "unpersisted"


class FailurePolicy(str, Enum):
    ROLLBACK = "rollback"
    KEEP = "keep"


@dataclass
class TaskDraft:
    """The values of the 'new task' form."""
    task: str = ""
    date: Optional[str] = None
    importance: Priority = Priority.NORMAL

    def reset(self):
        self.task = ""
        self.date = None
        self.importance = Priority.NORMAL


class TaskListClient:
    """
    Holds the task collection in memory and pushes the whole collection
    to the server after every change.

    Changes are applied locally before the save request is sent. When the
    save fails, `on_failure` decides what happens to the local copy:
    "rollback" restores the collection as it was before the change,
    "keep" leaves the change in place even though the server never saw it.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session=None,
        on_failure: FailurePolicy = FailurePolicy.ROLLBACK,
        retries: int = 0,
        id_generator: Optional[IdGenerator] = None,
    ):
        self.url = base_url.rstrip("/") + TODOS_PATH
        self.session = session or requests.Session()
        self.on_failure = FailurePolicy(on_failure)
        self.retries = retries
        self.ids = id_generator or IdGenerator()
        self.todos: List[Dict] = []
        self.loading = False
        self.last_sync = SyncState.IDLE

    # --- Loading ---

    def load(self) -> List[Dict]:
        self.loading = True
        try:
            response = self.session.get(self.url)
            response.raise_for_status()
            self.todos = response.json()
        except (requests.RequestException, ValueError) as e:
            print(f"Error fetching todos: {e}")
        finally:
            self.loading = False
        return self.todos

    # --- Mutations ---

    def create(self, draft: TaskDraft) -> Optional[Dict]:
        """Adds a task built from the draft. Does nothing without a date or description."""
        if not draft.date or not draft.task:
            return None
        new_todo = Task(
            id=self.ids.next_id(t.get("id") for t in self.todos if isinstance(t.get("id"), int)),
            task=draft.task,
            date=draft.date,
            importance=draft.importance or Priority.NORMAL,
            completed=False,
        ).model_dump(mode="json")
        if self._apply([*self.todos, new_todo]) == SyncState.ROLLED_BACK:
            # Keep the form filled in so the user can submit again.
            return None
        draft.reset()
        return new_todo

    def toggle_complete(self, todo_id: int) -> SyncState:
        new_todos = [
            {**todo, "completed": not todo.get("completed")} if todo.get("id") == todo_id else todo
            for todo in self.todos
        ]
        return self._apply(new_todos)

    def change_priority(self, todo_id: int, importance) -> SyncState:
        importance = Priority(importance).value
        new_todos = [
            {**todo, "importance": importance} if todo.get("id") == todo_id else todo
            for todo in self.todos
        ]
        return self._apply(new_todos)

    def delete(self, todo_id: int) -> SyncState:
        return self._apply([todo for todo in self.todos if todo.get("id") != todo_id])

    # --- Sync ---

    def _apply(self, new_todos: List[Dict]) -> SyncState:
        previous = self.todos
        self.todos = new_todos
        if self._save(new_todos):
            self.last_sync = SyncState.SETTLED
        elif self.on_failure == FailurePolicy.ROLLBACK:
            self.todos = previous
            self.last_sync = SyncState.ROLLED_BACK
        else:
            self.last_sync = SyncState.UNPERSISTED
        return self.last_sync

    def _save(self, todos: List[Dict]) -> bool:
        for attempt in range(self.retries + 1):
            try:
                response = self.session.post(self.url, json=todos)
                response.raise_for_status()
                return True
            except requests.RequestException as e:
                print(f"Error saving todos (attempt {attempt + 1}/{self.retries + 1}): {e}")
        return False
