"""HTML rendering of the todo list.

Both templates are compiled once when the renderer is built, so a broken
template stops the app at startup instead of failing on every request.
"""

import logging

from jinja2 import Environment, TemplateSyntaxError

from . import config
from .templates import CONTENT_TEMPLATE, PAGE_TEMPLATE

logger = logging.getLogger(__name__)


class TemplateError(RuntimeError):
    """A bundled template could not be compiled."""


class Renderer:
    def __init__(self, env=None, content_source=CONTENT_TEMPLATE, page_source=PAGE_TEMPLATE):
        self.env = env if env is not None else Environment(autoescape=True)
        try:
            self._content = self.env.from_string(content_source)
            self._page = self.env.from_string(page_source)
        except TemplateSyntaxError as e:
            logger.error(f"Failed to compile template: {e}")
            raise TemplateError(str(e)) from e

    def render_fragment(self, todos):
        """Render the create form plus the current list"""
        return self._content.render(todos=list(todos))

    def render_page(self, todos, title=config.PAGE_TITLE):
        """Render the full document wrapping the fragment"""
        return self._page.render(
            todos=list(todos),
            title=title,
            content_template=self._content,
        )
