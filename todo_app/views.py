import logging

from flask import Blueprint, Response, current_app, jsonify, request

from .forms import parse_create_form, parse_update_form, require_form_content

logger = logging.getLogger(__name__)

todos_bp = Blueprint('todos', __name__)

HTML_MIMETYPE = 'text/html'


def _store():
    return current_app.extensions['todo_store']


def _renderer():
    return current_app.extensions['todo_renderer']


def _fragment():
    # Snapshot first so the lock is released before rendering
    todos = _store().list()
    return Response(_renderer().render_fragment(todos), mimetype=HTML_MIMETYPE)


@todos_bp.route('/', methods=['GET'])
def index():
    todos = _store().list()
    return Response(_renderer().render_page(todos), mimetype=HTML_MIMETYPE)


@todos_bp.route('/todos', methods=['GET'])
def list_todos():
    return jsonify([todo.to_dict() for todo in _store().list()])


@todos_bp.route('/create', methods=['POST'])
def create_todo():
    require_form_content()
    title = parse_create_form(request.form)
    todo = _store().create(title)
    logger.info(f"Created todo {todo.id}")
    return _fragment()


@todos_bp.route('/update', methods=['POST'])
def update_todo():
    require_form_content()
    todo_id, done = parse_update_form(request.form)
    if _store().set_done(todo_id, done):
        logger.info(f"Marked todo {todo_id} done={done}")
    else:
        logger.debug(f"Ignoring update for unknown todo {todo_id}")
    return _fragment()
