# storage.py
import copy
import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, List


class StorageError(Exception):
    """Raised when the todo collection cannot be read or written."""


class TodoStore:
    """Read-all / replace-all access to the persisted todo collection."""

    def read_all(self) -> Any:
        raise NotImplementedError

    def replace_all(self, todos: Any) -> None:
        raise NotImplementedError

    def initialize(self) -> None:
        pass


class JsonFileStore(TodoStore):
    def __init__(self, path: Path):
        self.path = Path(path)

    def read_all(self) -> Any:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(str(e)) from e

    def replace_all(self, todos: Any) -> None:
        # Write to a sibling temp file, then swap it in so readers never
        # see a half-written file.
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                'w', encoding='utf-8', dir=self.path.parent,
                prefix=f".{self.path.name}.", suffix=".tmp", delete=False
            ) as f:
                tmp_name = f.name
                json.dump(todos, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(str(e)) from e

    def _file_mode(self) -> int:
        """Mode for the replacement file: the current file's, or the umask default for a new one."""
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def initialize(self) -> None:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.replace_all([])


class MemoryStore(TodoStore):
    def __init__(self, todos: List[Any] | None = None):
        self._todos = copy.deepcopy(todos) if todos is not None else []

    def read_all(self) -> Any:
        return copy.deepcopy(self._todos)

    def replace_all(self, todos: Any) -> None:
        self._todos = copy.deepcopy(todos)
