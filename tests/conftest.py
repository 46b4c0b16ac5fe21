"""Shared pytest fixtures for the Blacksmith test suite.

Provides reusable fixtures for:
- Temporary output directories
- Source template files
- Option readers with and without field definitions
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from blacksmith.console.options import OptionReader


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory generated files are written under (auto-cleanup)."""
    out = tmp_path / "output"
    out.mkdir()
    yield out


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Directory holding source templates for a test."""
    templates = tmp_path / "templates"
    templates.mkdir()
    yield templates


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

ENTITY_TEMPLATE = textwrap.dedent("""\
    # {{ Namespace }} / {{ Base }}
    class {{ Entity }}:
        table = "{{ collection }}"
        label = "{{ Entities }}"
        single = "{{ instance }}"
    {% for name, field in fields.items() %}
        {{ name }}: {{ field.type }}
    {% endfor %}
""")


@pytest.fixture
def entity_template(template_dir: Path) -> Path:
    """A template referencing every required variable."""
    path = template_dir / "entity.py.j2"
    path.write_text(ENTITY_TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def write_template(template_dir: Path):
    """Factory writing a template with the given text and returning its path."""

    def _write(text: str, name: str = "custom.j2") -> Path:
        path = template_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@pytest.fixture
def no_options() -> OptionReader:
    """No fields, no force."""
    return OptionReader()


@pytest.fixture
def name_field_options() -> OptionReader:
    """A single ``name:string`` field, no force."""
    return OptionReader({"fields": "name:string"})


@pytest.fixture
def forced_options() -> OptionReader:
    """Force overwrite, no fields."""
    return OptionReader({"force": True})
