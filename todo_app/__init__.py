"""Server-rendered todo list with partial-page updates."""

from flask import Flask

from .errors import register_error_handlers
from .render import Renderer
from .store import TodoStore
from .views import todos_bp

__version__ = "0.1.0"


def create_app(config=None, store=None):
    app = Flask(__name__)
    if config:
        app.config.update(config)

    app.extensions['todo_store'] = store if store is not None else TodoStore()
    app.extensions['todo_renderer'] = Renderer(app.jinja_env)

    app.register_blueprint(todos_bp)
    register_error_handlers(app)
    return app
