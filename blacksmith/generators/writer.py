"""Skip-if-exists file writing.

Repeated generation without ``force`` never clobbers earlier output.  The
existence check and the write are not atomic; runs that may target the same
destination must not overlap.
"""

from __future__ import annotations

from pathlib import Path

from blacksmith.errors import DirectoryCreationFailure, WriteFailure
from blacksmith.filesystem import Filesystem


class IdempotentFileWriter:
    """Writes rendered content unless the destination already exists."""

    def __init__(self, filesystem: Filesystem | None = None) -> None:
        self.filesystem = filesystem or Filesystem()

    def write(self, destination: str | Path, content: str, force: bool = False) -> bool:
        """Write *content* to *destination*.

        Missing parent directories are created first and are left in place
        even if the write then fails.

        Returns:
            ``True`` if the file was written, ``False`` if it already existed
            and *force* was not set.

        Raises:
            DirectoryCreationFailure: The parent directory could not be
                created.
            WriteFailure: The file could not be written.
        """
        destination = Path(destination)
        parent = destination.parent

        if not self.filesystem.exists(parent):
            try:
                self.filesystem.make_directory(parent)
            except OSError as exc:
                raise DirectoryCreationFailure(
                    f"Could not create directory {parent}: {exc}"
                ) from exc

        if self.filesystem.exists(destination) and not force:
            return False

        try:
            self.filesystem.put(destination, content)
        except OSError as exc:
            raise WriteFailure(f"Could not write {destination}: {exc}") from exc
        return True
