"""Command line entry point for Blacksmith.

Examples::

    blacksmith list
    blacksmith generate model order --fields "name:string, total:decimal"
    blacksmith generate form admin.orders -o ./app --force
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from blacksmith.config import Config
from blacksmith.console.options import OptionReader
from blacksmith.errors import BlacksmithError
from blacksmith.generators.registry import ARTIFACTS, get_artifact, template_path
from blacksmith.utils import print_artifact_table, print_error, print_success, print_warning


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blacksmith",
        description="Blacksmith -- scaffold source files for a named entity",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  blacksmith generate model order --fields 'name:string'\n"
            "  blacksmith generate form admin.orders -o ./app --force\n"
        ),
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (default: read BLACKSMITH_* environment variables)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List the built-in artifacts")

    generate = subparsers.add_parser("generate", help="Generate an artifact for an entity")
    generate.add_argument("kind", help="Artifact kind, e.g. model, form, view")
    generate.add_argument("entity", help="Entity name, optionally dotted (admin.orders)")
    generate.add_argument(
        "--fields",
        default=None,
        help="Field definitions, e.g. 'title:string:unique, body:text'",
    )
    generate.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite the destination file if it already exists",
    )
    generate.add_argument(
        "--output", "-o",
        default=None,
        help="Output root directory (default: configured output_dir)",
    )
    generate.add_argument(
        "--template",
        default=None,
        help="Source template path (default: the artifact's template)",
    )
    generate.add_argument(
        "--destination",
        default=None,
        help="Destination directory template (default: the artifact's destination)",
    )
    generate.add_argument(
        "--filename",
        default=None,
        help="Output filename template (default: the artifact's filename)",
    )
    return parser


def load_config(path: str | None) -> Config:
    if path:
        return Config.load(Path(path))
    return Config.from_env()


def run_generate(args: argparse.Namespace, config: Config) -> int:
    artifact = get_artifact(args.kind)
    if args.output:
        config = config.model_copy(update={"output_dir": Path(args.output)})

    generator = artifact.generator_class(option_reader=OptionReader(args), config=config)
    source = Path(args.template) if args.template else template_path(artifact, config.template_dir)
    written = generator.make(
        args.entity,
        source,
        args.destination or artifact.destination,
        args.filename or artifact.file_name,
    )

    if written:
        print_success(f"Created {generator.template_destination}")
    else:
        print_warning(
            f"Skipped {generator.template_destination} (already exists, use --force to overwrite)"
        )
    return 0


def run_list() -> int:
    print_artifact_table(
        {name: artifact.description for name, artifact in sorted(ARTIFACTS.items())}
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``blacksmith``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        if args.command == "list":
            return run_list()
        return run_generate(args, config)
    # OSError / ValueError: unreadable or invalid configuration file.
    except (BlacksmithError, OSError, ValueError) as exc:
        print_error(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
