"""In-memory todo storage shared by all request threads."""

import threading
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import List


class InvalidTitle(ValueError):
    """Raised when a todo is created without a usable title."""


@dataclass(frozen=True)
class Todo:
    id: str
    title: str
    done: bool = False

    def to_dict(self):
        return {'id': self.id, 'title': self.title, 'done': self.done}


class ReadWriteLock:
    """Many concurrent readers or a single writer.

    Waiting writers block new readers so a steady stream of page loads
    cannot starve a toggle.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self):
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self):
        with self._cond:
            self._writers_waiting += 1
            acquired = False
            try:
                while self._writer or self._readers:
                    self._cond.wait()
                acquired = True
            finally:
                self._writers_waiting -= 1
                if not acquired:
                    # Wake readers parked behind this abandoned writer
                    self._cond.notify_all()
            self._writer = True

    def release_write(self):
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self):
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self):
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class TodoStore:
    """Ordered collection of todos; insertion order is display order."""

    def __init__(self):
        self._todos: List[Todo] = []
        self._lock = ReadWriteLock()

    def __len__(self):
        with self._lock.read_locked():
            return len(self._todos)

    def list(self) -> List[Todo]:
        """Return a snapshot of every todo in creation order"""
        with self._lock.read_locked():
            return list(self._todos)

    def create(self, title: str) -> Todo:
        """Append a new, not-yet-done todo and return it"""
        if not isinstance(title, str) or title == "":
            raise InvalidTitle("title must be a non-empty string")

        todo = Todo(id=str(uuid.uuid4()), title=title)
        with self._lock.write_locked():
            self._todos.append(todo)
        return todo

    def set_done(self, todo_id: str, done: bool) -> bool:
        """Set the done flag of the matching todo.

        Returns False, leaving the store untouched, when no todo has that id.
        """
        with self._lock.write_locked():
            for i, todo in enumerate(self._todos):
                if todo.id == todo_id:
                    self._todos[i] = replace(todo, done=done)
                    return True
        return False
