"""Command line option access for generators.

Generators only need two things from the command line: the raw field
definitions and whether existing files may be overwritten.  ``OptionReader``
exposes exactly that over either a plain mapping or an ``argparse.Namespace``.
"""

from __future__ import annotations

import argparse
from collections.abc import Mapping
from typing import Any


class OptionReader:
    """Reads the ``fields`` and ``force`` options supplied to a generator."""

    def __init__(self, options: Mapping[str, Any] | argparse.Namespace | None = None) -> None:
        if isinstance(options, argparse.Namespace):
            options = vars(options)
        self._options: dict[str, Any] = dict(options or {})

    def get_fields(self) -> str | None:
        """Return the raw field definition string, or ``None`` if not given."""
        fields = self._options.get("fields")
        if fields is None:
            return None
        fields = str(fields).strip()
        return fields or None

    def is_generation_forced(self) -> bool:
        """Whether existing destination files should be overwritten."""
        return bool(self._options.get("force", False))
