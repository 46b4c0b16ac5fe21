"""Template variable construction.

``build_template_vars`` produces the keys every template can rely on.
Specialised generators merge their own keys on top of this map.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any

from blacksmith.parsers.fields import FieldDescriptor

from .naming import (
    Inflector,
    join_base_path,
    join_namespace,
    pluralize,
    singularize,
    snake,
    studly,
)


def build_template_vars(
    entity: str,
    base: Sequence[str],
    field_data: Mapping[str, FieldDescriptor],
    *,
    namespace_separator: str = ".",
    inflector: Inflector | None = None,
    today: date | None = None,
) -> dict[str, Any]:
    """Return the required template variables for *entity*.

    Args:
        entity: Leaf entity name, e.g. ``"order"``.
        base: Base segments the entity lives under, e.g. ``("admin",)``.
        field_data: Parsed fields keyed by name.
        namespace_separator: Joins the studly-cased base segments into
            ``Namespace``.
        inflector: Pluralization policy; the default English rules if omitted.
        today: Date used for ``year``; the current date if omitted.

    Returns:
        ``Base``, ``Namespace``, ``Entity``, ``Entities``, ``collection``,
        ``instance``, ``fields`` and ``year``.
    """
    proper = studly(entity)
    snaked = snake(entity)
    return {
        "Base": join_base_path(base),
        "Namespace": join_namespace(base, namespace_separator),
        "Entity": proper,
        "Entities": pluralize(proper, inflector),
        "collection": pluralize(snaked, inflector),
        "instance": singularize(snaked, inflector),
        "fields": {name: field.as_template_data() for name, field in field_data.items()},
        "year": str((today or date.today()).year),
    }
