"""Command line option access."""

from blacksmith.console.options import OptionReader

__all__ = [
    "OptionReader",
]
