"""Todo Store — in-memory collection of todo records with auto-incrementing ids.

Invariants:
    - Ids start at 1 and grow by 1 per create(); never reused, even after remove()
    - list() preserves insertion order
    - Callers receive copies; no reference into the collection escapes
    - "Not found" is a normal result (None / False), never an exception
    - Collection is empty on every process start (no persistence)

Design Decisions:
    - Explicit object owned by the app factory instead of module-level state
      (the store's lifetime is the app's lifetime)
    - threading.Lock around every operation: async handlers never interleave
      inside an operation, but sync code run on a thread pool could
"""

import threading
from dataclasses import dataclass, replace

from app.core.domain_types import TodoId


class _Unset:
    """Sentinel for 'field not supplied' in partial updates."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


@dataclass
class Todo:
    """A titled, completable unit stored in memory."""
    id: TodoId
    title: str
    completed: bool = False


class TodoStore:
    """Linear-scan CRUD over a transient list."""

    def __init__(self):
        self._todos: list[Todo] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def list(self) -> list[Todo]:
        with self._lock:
            return [replace(t) for t in self._todos]

    def get(self, todo_id: int) -> Todo | None:
        with self._lock:
            todo = self._find(todo_id)
            return replace(todo) if todo else None

    def create(self, title: str) -> Todo:
        with self._lock:
            todo = Todo(id=TodoId(self._next_id), title=title, completed=False)
            self._next_id += 1
            self._todos.append(todo)
            return replace(todo)

    def update(
        self,
        todo_id: int,
        title: str | _Unset = UNSET,
        completed: bool | _Unset = UNSET,
    ) -> Todo | None:
        """Overwrite only the supplied fields. Returns None if id is unknown."""
        with self._lock:
            todo = self._find(todo_id)
            if todo is None:
                return None
            if not isinstance(title, _Unset):
                todo.title = title
            if not isinstance(completed, _Unset):
                todo.completed = completed
            return replace(todo)

    def remove(self, todo_id: int) -> bool:
        with self._lock:
            for index, todo in enumerate(self._todos):
                if todo.id == todo_id:
                    del self._todos[index]
                    return True
            return False

    def _find(self, todo_id: int) -> Todo | None:
        return next((t for t in self._todos if t.id == todo_id), None)
