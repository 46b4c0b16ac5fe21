"""Blacksmith -- scaffold source files for a named entity from templates.

Quick usage::

    from blacksmith.generators import Generator

    generator = Generator()
    generator.make("admin.orders", "templates/model.py.j2", "app/models")
"""

__version__ = "0.1.0"
