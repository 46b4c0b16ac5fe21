"""Entity generation orchestrator.

``Generator.make`` turns an entity identifier and a source template into one
written file:

1. Resolve the identifier into base segments and the entity name.
2. Parse field definitions supplied through the option reader.
3. Build the template variables.
4. Render the output filename, the destination directory and the template
   content as three separate renders against the same variables.
5. Write the result unless the destination exists (or overwrite is forced).

Specialised generators add template variables by overriding
:meth:`Generator.get_template_vars` and merging onto the parent's map.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any

from blacksmith.config import Config
from blacksmith.console.options import OptionReader
from blacksmith.errors import TemplateReadFailure
from blacksmith.filesystem import Filesystem
from blacksmith.parsers.fields import FieldDescriptor, FieldParser

from .entity import resolve_entity
from .naming import Inflector, join_base_path, join_namespace, studly
from .templates import TemplateRenderer
from .variables import build_template_vars
from .writer import IdempotentFileWriter


class Generator:
    """Renders a template for a named entity and writes it to disk.

    All collaborators are constructor arguments; any left out get a fresh
    default instance.  State describing the last ``make`` call (entity, base,
    field data, rendered content, destination, whether a write happened) is
    reset at the start of every call.
    """

    default_extension: str = ".py"

    def __init__(
        self,
        filesystem: Filesystem | None = None,
        renderer: TemplateRenderer | None = None,
        field_parser: FieldParser | None = None,
        option_reader: OptionReader | None = None,
        config: Config | None = None,
        inflector: Inflector | None = None,
    ) -> None:
        self.filesystem = filesystem or Filesystem()
        self.inflector = inflector
        self.renderer = renderer or TemplateRenderer(inflector)
        self.field_parser = field_parser or FieldParser()
        self.option_reader = option_reader or OptionReader()
        self.config = config or Config()
        self.writer = IdempotentFileWriter(self.filesystem)

        self.entity: str | None = None
        self.base: tuple[str, ...] = ()
        self.destination_file_name: str | None = None
        self._field_data: dict[str, FieldDescriptor] = {}
        self._parsed_template: str | None = None
        self._template_destination: Path | None = None
        self.written = False

    # -- Public API --------------------------------------------------------

    def make(
        self,
        entity: str,
        source_template: str | Path,
        destination_dir: str,
        file_name: str | None = None,
    ) -> bool:
        """Create and write out a rendered template.

        Args:
            entity: Entity identifier, optionally dotted (``"admin.orders"``).
            source_template: Path to the raw template file.
            destination_dir: Template for the directory to write into.  A
                relative result is placed under ``config.output_dir``.
            file_name: Template for the output filename (not a path).
                Defaults to the studly entity name plus
                :attr:`default_extension`.

        Returns:
            ``True`` if the file was written, ``False`` if it already existed
            and generation was not forced.
        """
        self._reset()

        resolved = resolve_entity(entity, self.config.entity_separator)
        self.base, self.entity = resolved.base_segments, resolved.leaf

        raw_fields = self.option_reader.get_fields()
        if raw_fields:
            self._field_data = self.field_parser.parse(raw_fields)

        template_vars = MappingProxyType(self.get_template_vars())
        raw_template = self.read_template(source_template)

        if file_name is not None:
            self.destination_file_name = self.renderer.render_string(file_name, template_vars)

        rendered_dir = self.renderer.render_string(destination_dir, template_vars)

        self._parsed_template = self.renderer.render_string(raw_template, template_vars)

        self._template_destination = (
            Path(self.config.output_dir) / rendered_dir / self.get_file_name()
        )

        self.written = self.writer.write(
            self._template_destination,
            self._parsed_template,
            force=self.option_reader.is_generation_forced(),
        )
        return self.written

    @property
    def parsed_template(self) -> str | None:
        """Text of the final rendered template."""
        return self._parsed_template

    @property
    def template_destination(self) -> Path | None:
        """Filesystem location the rendered template was (or would be) written to."""
        return self._template_destination

    @property
    def field_data(self) -> dict[str, FieldDescriptor]:
        """Parsed fields for the current entity."""
        return self._field_data

    # -- Template variables ------------------------------------------------

    def get_template_vars(self) -> dict[str, Any]:
        """Return the minimum template variables.

        Subclasses extend the result::

            def get_template_vars(self):
                return {**super().get_template_vars(), "rows": ...}
        """
        return build_template_vars(
            self.get_entity_name(),
            self.base,
            self.field_data,
            namespace_separator=self.config.namespace_separator,
            inflector=self.inflector,
        )

    def get_entity_name(self) -> str:
        """Name of the entity being generated."""
        return self.entity or ""

    def get_base_name(self) -> str:
        """Studly base segments joined with ``/``."""
        return join_base_path(self.base)

    def get_namespace(self) -> str:
        """Studly base segments joined with the configured namespace separator."""
        return join_namespace(self.base, self.config.namespace_separator)

    def get_file_name(self) -> str:
        """Name of the file that should be written."""
        if self.destination_file_name:
            return self.destination_file_name
        extension = self.config.default_extension or self.default_extension
        return f"{studly(self.get_entity_name())}{extension}"

    # -- Internal helpers --------------------------------------------------

    def read_template(self, source_template: str | Path) -> str:
        """Read the raw source template text.

        Raises:
            TemplateReadFailure: The file is missing or unreadable.
        """
        if not self.filesystem.exists(source_template):
            raise TemplateReadFailure(f"Template not found: {source_template}")
        try:
            return self.filesystem.get(source_template)
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateReadFailure(f"Could not read template {source_template}: {exc}") from exc

    def _reset(self) -> None:
        self.entity = None
        self.base = ()
        self.destination_file_name = None
        self._field_data = {}
        self._parsed_template = None
        self._template_destination = None
        self.written = False
