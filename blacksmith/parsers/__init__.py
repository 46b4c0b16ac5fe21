"""Parsers for raw generator input."""

from blacksmith.parsers.fields import FieldDescriptor, FieldParser

__all__ = [
    "FieldDescriptor",
    "FieldParser",
]
