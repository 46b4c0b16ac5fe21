"""Jinja2 template rendering for entity generation.

Provides the ``TemplateRenderer`` class which renders template text against a
variable map.  A generator uses one renderer for three separate renders: the
output filename, the destination directory and the file content.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, TemplateError

from blacksmith.errors import RenderFailure

from .naming import Inflector, camel, pluralize, singularize, snake, studly


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 template text with entity variables.

    Rendering is side-effect free: the same text and variables always produce
    the same output.  Placeholders missing from the variable map render as
    empty text.
    """

    def __init__(self, inflector: Inflector | None = None) -> None:
        self.inflector = inflector
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["slugify"] = _slugify_filter
        self.env.filters["studly"] = studly
        self.env.filters["pascal_case"] = studly
        self.env.filters["snake_case"] = snake
        self.env.filters["camel_case"] = camel
        self.env.filters["plural"] = self._plural_filter
        self.env.filters["singular"] = self._singular_filter

    def render_string(self, template_string: str, context: Mapping[str, Any]) -> str:
        """Render *template_string* with the provided *context*.

        Raises:
            RenderFailure: The text is not a valid template or rendering
                failed (e.g. an attribute lookup on a missing variable).
        """
        try:
            template = self.env.from_string(template_string)
            return template.render(context)
        except TemplateError as exc:
            raise RenderFailure(f"Failed to render template: {exc}") from exc

    # -- Filters -----------------------------------------------------------

    def _plural_filter(self, value: str) -> str:
        return pluralize(str(value), self.inflector)

    def _singular_filter(self, value: str) -> str:
        return singularize(str(value), self.inflector)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _slugify_filter(value: str) -> str:
    """Convert a string to a URL/filename-safe slug."""
    slug = re.sub(r"[^a-z0-9]+", "-", str(value).lower().strip())
    return slug.strip("-")
