"""Field definition parsing.

Turns the raw ``--fields`` option into typed ``FieldDescriptor`` records.  The
format is a comma-separated list of ``name:type[:attribute...]`` entries::

    "title:string:unique, body:text:nullable, status:string:default(draft)"

A bare attribute (``unique``) is stored as ``True``; an attribute with a
parenthesised argument (``default(draft)``) stores the argument string.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field

from blacksmith.errors import FieldParseError


DEFAULT_FIELD_TYPE = "string"

_ATTRIBUTE_RE = re.compile(r"^(?P<key>[A-Za-z_][\w-]*)(?:\((?P<value>.*)\))?$")


class FieldDescriptor(BaseModel):
    """A single entity field: name, type tag and free-form attributes."""

    name: str = Field(..., min_length=1, description="Field name, e.g. 'title'")
    type: str = Field(default=DEFAULT_FIELD_TYPE, description="Type tag, e.g. 'string'")
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Auxiliary attributes passed through to templates untouched",
    )

    def as_template_data(self) -> dict[str, Any]:
        """Return the ``{"type": ..., **attributes}`` mapping templates see."""
        return {"type": self.type, **self.attributes}


class FieldParser:
    """Parses raw field definition strings into ``FieldDescriptor`` records."""

    def parse(self, raw: str) -> dict[str, FieldDescriptor]:
        """Parse *raw* into an insertion-ordered ``{name: descriptor}`` map.

        Raises:
            FieldParseError: An entry has an empty name or a malformed
                attribute.
        """
        fields: dict[str, FieldDescriptor] = {}
        for entry in raw.split(","):
            entry = entry.strip()
            if not entry:
                continue
            descriptor = self._parse_entry(entry)
            # Later definitions of the same field replace earlier ones.
            fields.pop(descriptor.name, None)
            fields[descriptor.name] = descriptor
        return fields

    def _parse_entry(self, entry: str) -> FieldDescriptor:
        name, _, rest = entry.partition(":")
        name = name.strip()
        if not name:
            raise FieldParseError(f"Field definition has no name: {entry!r}")

        parts = [part.strip() for part in rest.split(":")] if rest else []
        field_type = parts[0] if parts and parts[0] else DEFAULT_FIELD_TYPE

        attributes: dict[str, Any] = {}
        for token in parts[1:]:
            if not token:
                continue
            match = _ATTRIBUTE_RE.match(token)
            if match is None:
                raise FieldParseError(
                    f"Malformed attribute {token!r} in field definition {entry!r}"
                )
            value = match.group("value")
            attributes[match.group("key")] = True if value is None else value

        return FieldDescriptor(name=name, type=field_type, attributes=attributes)
