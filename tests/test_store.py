import threading
import time
from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from todo_app.store import InvalidTitle, ReadWriteLock, TodoStore


class TestTodoStore:
    def test_starts_empty(self, store):
        assert store.list() == []
        assert len(store) == 0

    def test_create_appends_undone_todo(self, store):
        todo = store.create("Buy milk")
        assert todo.title == "Buy milk"
        assert todo.done is False
        assert todo.id
        assert [t.id for t in store.list()] == [todo.id]

    def test_ids_are_unique(self, store):
        ids = {store.create(f"item {i}").id for i in range(50)}
        assert len(ids) == 50

    def test_preserves_creation_order(self, store):
        for title in ("first", "second", "third"):
            store.create(title)
        assert [t.title for t in store.list()] == ["first", "second", "third"]

    def test_whitespace_title_is_kept_verbatim(self, store):
        assert store.create("   ").title == "   "

    @pytest.mark.parametrize("title", ["", None, 42])
    def test_rejects_unusable_title(self, store, title):
        with pytest.raises(InvalidTitle):
            store.create(title)
        assert len(store) == 0

    def test_set_done_updates_matching_todo(self, store):
        todo = store.create("Buy milk")
        assert store.set_done(todo.id, True) is True
        assert store.list()[0].done is True
        assert store.set_done(todo.id, False) is True
        assert store.list()[0].done is False

    def test_set_done_is_idempotent(self, store):
        todo = store.create("Buy milk")
        store.set_done(todo.id, True)
        first = store.list()
        store.set_done(todo.id, True)
        assert store.list() == first

    def test_set_done_unknown_id_is_noop(self, store):
        store.create("Buy milk")
        before = store.list()
        assert store.set_done("nonexistent", True) is False
        assert store.list() == before

    def test_list_returns_snapshot(self, store):
        todo = store.create("Buy milk")
        snapshot = store.list()
        snapshot.append(todo)
        store.set_done(todo.id, True)
        assert len(store) == 1
        assert snapshot[0].done is False
        assert store.list()[0].done is True

    def test_todo_id_is_read_only(self, store):
        todo = store.create("Buy milk")
        with pytest.raises(FrozenInstanceError):
            todo.id = "other"
        assert store.list()[0].id == todo.id

    def test_concurrent_creates_are_all_kept(self, store):
        def worker(n):
            for i in range(100):
                store.create(f"{n}-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        todos = store.list()
        assert len(todos) == 800
        assert len({t.id for t in todos}) == 800


class TestReadWriteLock:
    def test_readers_share_the_lock(self):
        lock = ReadWriteLock()
        inside = threading.Barrier(2, timeout=5)

        def reader():
            with lock.read_locked():
                inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)
        assert not any(t.is_alive() for t in threads)

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock()
        events = []
        lock.acquire_write()

        def reader():
            with lock.read_locked():
                events.append("read")

        t = threading.Thread(target=reader)
        t.start()
        t.join(timeout=0.2)
        assert events == []

        events.append("write-done")
        lock.release_write()
        t.join(timeout=5)
        assert events == ["write-done", "read"]

    def test_waiting_writer_goes_before_new_readers(self):
        lock = ReadWriteLock()
        order = []
        lock.acquire_read()

        def writer():
            with lock.write_locked():
                order.append("w")

        def reader():
            with lock.read_locked():
                order.append("r")

        w = threading.Thread(target=writer)
        w.start()
        for _ in range(500):
            if lock._writers_waiting:
                break
            time.sleep(0.01)
        assert lock._writers_waiting == 1

        r = threading.Thread(target=reader)
        r.start()
        r.join(timeout=0.2)
        assert r.is_alive()
        assert order == []

        lock.release_read()
        w.join(timeout=5)
        r.join(timeout=5)
        assert order == ["w", "r"]

    def test_abandoned_writer_wakes_waiters(self):
        lock = ReadWriteLock()
        lock.acquire_read()

        with patch.object(lock._cond, 'wait', side_effect=KeyboardInterrupt), \
                patch.object(lock._cond, 'notify_all', wraps=lock._cond.notify_all) as notify_all:
            with pytest.raises(KeyboardInterrupt):
                lock.acquire_write()

        notify_all.assert_called_once_with()
        assert lock._writers_waiting == 0

        # New readers are not held back by the abandoned writer
        done = threading.Event()

        def reader():
            with lock.read_locked():
                done.set()

        t = threading.Thread(target=reader)
        t.start()
        assert done.wait(timeout=5)
        t.join(timeout=5)
        lock.release_read()
