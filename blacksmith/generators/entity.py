"""Entity identifier decomposition.

``admin.orders`` names the entity ``orders`` inside the ``admin`` base; a plain
``orders`` is its own base.
"""

from __future__ import annotations

from dataclasses import dataclass

from blacksmith.errors import InvalidEntityIdentifier


ENTITY_SEPARATOR = "."


@dataclass(frozen=True)
class EntityPath:
    """A resolved entity identifier.

    ``base_segments`` is always a sequence: a single-element tuple holding the
    entity itself when the identifier had no separator.
    """

    base_segments: tuple[str, ...]
    leaf: str


def resolve_entity(raw: str, separator: str = ENTITY_SEPARATOR) -> EntityPath:
    """Split *raw* into base segments and the leaf entity name.

    Segment contents are not validated; only an empty leaf is rejected.

    Raises:
        InvalidEntityIdentifier: *raw* is empty or ends with *separator*, or
            *separator* itself is empty.
    """
    if not separator:
        raise InvalidEntityIdentifier("Entity separator must not be empty")

    if separator in raw:
        *base, leaf = raw.split(separator)
        base_segments = tuple(base)
    else:
        leaf = raw
        base_segments = (raw,)

    if not leaf:
        raise InvalidEntityIdentifier(f"Entity identifier {raw!r} has an empty entity name")

    return EntityPath(base_segments=base_segments, leaf=leaf)
