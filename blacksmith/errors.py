"""Exception hierarchy for entity generation.

Every failure raised by the generation pipeline derives from
``BlacksmithError`` so the command line can present them uniformly.  A skipped
write (destination exists, no force) is not an error: ``Generator.make``
simply returns ``False``.
"""

from __future__ import annotations


class BlacksmithError(Exception):
    """Base class for all generation errors."""


class InvalidEntityIdentifier(BlacksmithError):
    """The entity identifier decomposes to an empty entity name."""


class TemplateReadFailure(BlacksmithError):
    """The source template does not exist or cannot be read."""


class RenderFailure(BlacksmithError):
    """The template engine rejected the template text or its variables."""


class DirectoryCreationFailure(BlacksmithError):
    """The destination directory could not be created."""


class WriteFailure(BlacksmithError):
    """The rendered content could not be written to its destination."""


class FieldParseError(BlacksmithError):
    """A raw field definition string is malformed."""


class UnknownArtifact(BlacksmithError):
    """No built-in artifact is registered under the requested kind."""
