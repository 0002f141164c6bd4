import pytest

from todo_app import create_app
from todo_app.store import TodoStore


@pytest.fixture
def store():
    return TodoStore()


@pytest.fixture
def app(store):
    return create_app({'TESTING': True}, store=store)


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client
