"""HTML form generator.

Adds a ``form_rows`` template variable with one label/element pair per field.
"""

from __future__ import annotations

from typing import Any

from blacksmith.parsers.fields import FieldDescriptor

from .generator import Generator
from .naming import snake


# Field type -> HTML input type.  ``text`` and ``boolean`` are handled
# separately because they are not plain ``<input>`` elements of a given type.
_INPUT_TYPES: dict[str, str] = {
    "integer": "number",
    "int": "number",
    "biginteger": "number",
    "float": "number",
    "decimal": "number",
    "date": "date",
    "datetime": "datetime-local",
    "timestamp": "datetime-local",
    "time": "time",
    "email": "email",
    "password": "password",
    "url": "url",
}


class FormGenerator(Generator):
    """Generates an HTML form for an entity's fields."""

    default_extension = ".html"

    def get_template_vars(self) -> dict[str, Any]:
        template_vars = super().get_template_vars()
        template_vars["form_rows"] = self.get_form_rows()
        return template_vars

    def get_form_rows(self) -> list[dict[str, str]]:
        """Return ``[{"label": ..., "element": ...}]`` in field order."""
        return [
            {"label": _label(name), "element": _element(name, field)}
            for name, field in self.field_data.items()
        ]


def _label(name: str) -> str:
    """``first_name`` -> ``<label for="first_name">First Name:</label>``."""
    text = " ".join(word.capitalize() for word in snake(name).split("_") if word)
    return f'<label for="{name}">{text}:</label>'


def _element(name: str, field: FieldDescriptor) -> str:
    field_type = field.type.lower()
    if field_type == "text":
        return f'<textarea name="{name}" id="{name}"></textarea>'
    if field_type in ("boolean", "bool"):
        return f'<input type="checkbox" name="{name}" id="{name}" value="1">'
    input_type = _INPUT_TYPES.get(field_type, "text")
    return f'<input type="{input_type}" name="{name}" id="{name}">'
