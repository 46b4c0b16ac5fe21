"""Built-in artifact catalogue.

Each artifact pairs a generator class with a packaged template and the
destination directory / filename templates it is written to.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from blacksmith.errors import UnknownArtifact

from .form import FormGenerator
from .generator import Generator


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Dotted entities (admin.orders) get their base hierarchy as a subdirectory.
_BASE_DIR = "{% if Base != Entity %}/{{ Base|lower }}{% endif %}"


@dataclass(frozen=True)
class Artifact:
    """A kind of file Blacksmith knows how to generate."""

    name: str
    generator_class: type[Generator]
    template: str
    destination: str
    file_name: str | None = None
    description: str = ""


ARTIFACTS: dict[str, Artifact] = {
    "model": Artifact(
        name="model",
        generator_class=Generator,
        template="model.py.j2",
        destination="models" + _BASE_DIR,
        file_name="{{ instance }}.py",
        description="Dataclass model module",
    ),
    "form": Artifact(
        name="form",
        generator_class=FormGenerator,
        template="form.html.j2",
        destination="templates" + _BASE_DIR + "/{{ collection }}",
        file_name="form.html",
        description="HTML create/edit form",
    ),
    "view": Artifact(
        name="view",
        generator_class=Generator,
        template="view.html.j2",
        destination="templates" + _BASE_DIR + "/{{ collection }}",
        file_name="index.html",
        description="HTML list view",
    ),
}


def get_artifact(kind: str) -> Artifact:
    """Look up a built-in artifact by *kind* (case-insensitive).

    Raises:
        UnknownArtifact: No artifact is registered under *kind*.
    """
    try:
        return ARTIFACTS[kind.lower()]
    except KeyError:
        available = ", ".join(sorted(ARTIFACTS))
        raise UnknownArtifact(f"Unknown artifact {kind!r} (available: {available})") from None


def template_path(artifact: Artifact, template_dir: Path | None = None) -> Path:
    """Resolve the template for *artifact*.

    A same-named file in *template_dir* takes precedence over the packaged
    template.
    """
    if template_dir is not None:
        candidate = Path(template_dir) / artifact.template
        if candidate.is_file():
            return candidate
    return _DEFAULT_TEMPLATE_DIR / artifact.template
