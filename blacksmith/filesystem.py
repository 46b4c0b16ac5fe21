"""File-system primitives used by the generators.

Wrapped in a class so generators receive it as a collaborator and tests can
substitute a mock.
"""

from __future__ import annotations

from pathlib import Path


class Filesystem:
    """Thin ``pathlib`` wrapper: existence checks, directories, read, write."""

    def exists(self, path: str | Path) -> bool:
        return Path(path).exists()

    def make_directory(self, path: str | Path) -> Path:
        """Create a directory (and parents) if it does not exist."""
        dir_path = Path(path)
        dir_path.mkdir(parents=True, exist_ok=True)
        return dir_path

    def get(self, path: str | Path) -> str:
        """Return the UTF-8 text content of *path*."""
        return Path(path).read_text(encoding="utf-8")

    def put(self, path: str | Path, content: str) -> int:
        """Write *content* to *path*, replacing it.  Returns characters written."""
        return Path(path).write_text(content, encoding="utf-8")
