"""Blacksmith generators -- render entity templates into source files.

Quick usage::

    from blacksmith.console import OptionReader
    from blacksmith.generators import FormGenerator

    generator = FormGenerator(option_reader=OptionReader({"fields": "name:string"}))
    generator.make("order", "templates/form.html.j2", "app/templates/{{ collection }}")
"""

from blacksmith.generators.entity import EntityPath, resolve_entity
from blacksmith.generators.form import FormGenerator
from blacksmith.generators.generator import Generator
from blacksmith.generators.naming import Inflector
from blacksmith.generators.registry import ARTIFACTS, Artifact, get_artifact, template_path
from blacksmith.generators.templates import TemplateRenderer
from blacksmith.generators.variables import build_template_vars
from blacksmith.generators.writer import IdempotentFileWriter

__all__ = [
    "ARTIFACTS",
    "Artifact",
    "EntityPath",
    "FormGenerator",
    "Generator",
    "IdempotentFileWriter",
    "Inflector",
    "TemplateRenderer",
    "build_template_vars",
    "get_artifact",
    "resolve_entity",
    "template_path",
]
