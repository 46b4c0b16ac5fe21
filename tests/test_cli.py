"""Tests for the ``blacksmith`` command line."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from blacksmith.cli import build_parser, main
from blacksmith.config import Config
from blacksmith.utils import console


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clean_env():
    """Keep BLACKSMITH_* variables from the outer environment out of the tests."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("BLACKSMITH_")}
    with patch.dict(os.environ, env, clear=True):
        yield


def run(argv: list[str]) -> tuple[int, str]:
    with console.capture() as capture:
        code = main(argv)
    return code, capture.get()


class TestParser:
    def test_generate_arguments(self):
        args = build_parser().parse_args(
            ["generate", "form", "admin.orders", "--fields", "name:string", "-f", "-o", "out"]
        )
        assert args.command == "generate"
        assert args.kind == "form"
        assert args.entity == "admin.orders"
        assert args.fields == "name:string"
        assert args.force is True
        assert args.output == "out"

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestGenerate:
    def test_generates_model(self, tmp_path: Path):
        code, output = run(["generate", "model", "order", "--fields", "name:string", "-o", str(tmp_path)])
        assert code == 0
        assert "Created" in output
        assert "class Order:" in (tmp_path / "models" / "order.py").read_text(encoding="utf-8")

    def test_second_run_skips(self, tmp_path: Path):
        run(["generate", "model", "order", "-o", str(tmp_path)])
        code, output = run(["generate", "model", "order", "-o", str(tmp_path)])
        assert code == 0
        assert "Skipped" in output

    def test_force_overwrites(self, tmp_path: Path):
        dest = tmp_path / "models" / "order.py"
        dest.parent.mkdir(parents=True)
        dest.write_text("old", encoding="utf-8")

        code, output = run(["generate", "model", "order", "-o", str(tmp_path), "--force"])

        assert code == 0
        assert "Created" in output
        assert dest.read_text(encoding="utf-8") != "old"

    def test_custom_template_destination_and_filename(self, tmp_path: Path):
        template = tmp_path / "custom.j2"
        template.write_text("{{ Namespace }}:{{ Entity }}", encoding="utf-8")

        code, _ = run([
            "generate", "model", "admin.orders",
            "-o", str(tmp_path),
            "--template", str(template),
            "--destination", "{{ Base|lower }}",
            "--filename", "{{ Entity }}.txt",
        ])

        assert code == 0
        assert (tmp_path / "admin" / "Orders.txt").read_text(encoding="utf-8") == "Admin:Orders"

    def test_namespaced_and_plain_entities_get_separate_files(self, tmp_path: Path):
        first, first_output = run(["generate", "model", "admin.orders", "-o", str(tmp_path)])
        second, second_output = run(["generate", "model", "orders", "-o", str(tmp_path)])

        assert (first, second) == (0, 0)
        assert "Created" in first_output
        assert "Created" in second_output
        assert sorted(p.relative_to(tmp_path).as_posix() for p in tmp_path.rglob("*.py")) == [
            "models/admin/order.py",
            "models/order.py",
        ]

    def test_absolute_destination_is_used_as_is(self, tmp_path: Path):
        target = tmp_path / "abs"

        code, output = run([
            "generate", "model", "order",
            "-o", str(tmp_path / "out"),
            "--destination", str(target),
        ])

        assert code == 0
        assert "Created" in output
        assert (target / "order.py").is_file()
        assert not (tmp_path / "out").exists()

    def test_output_dir_is_not_a_template(self, tmp_path: Path):
        out = tmp_path / "{{ Entity }}"

        code, _ = run(["generate", "model", "order", "-o", str(out)])

        assert code == 0
        assert (out / "models" / "order.py").is_file()

    def test_config_file(self, tmp_path: Path):
        config_path = Config(output_dir=tmp_path / "app").save(tmp_path / "blacksmith.json")

        code, _ = run(["--config", str(config_path), "generate", "view", "order"])

        assert code == 0
        assert (tmp_path / "app" / "templates" / "orders" / "index.html").is_file()

    def test_user_template_dir(self, tmp_path: Path):
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "model.py.j2").write_text("custom {{ Entity }}", encoding="utf-8")

        with patch.dict(os.environ, {"BLACKSMITH_TEMPLATE_DIR": str(templates)}):
            code, _ = run(["generate", "model", "order", "-o", str(tmp_path / "out")])

        assert code == 0
        assert (tmp_path / "out" / "models" / "order.py").read_text(encoding="utf-8") == "custom Order"


class TestErrors:
    def test_unknown_artifact(self, tmp_path: Path):
        code, output = run(["generate", "controller", "order", "-o", str(tmp_path)])
        assert code == 1
        assert "Unknown artifact" in output

    def test_invalid_entity(self, tmp_path: Path):
        code, output = run(["generate", "model", "admin.", "-o", str(tmp_path)])
        assert code == 1
        assert "empty entity name" in output

    def test_missing_template(self, tmp_path: Path):
        code, output = run([
            "generate", "model", "order",
            "-o", str(tmp_path),
            "--template", str(tmp_path / "missing.j2"),
        ])
        assert code == 1
        assert "Template not found" in output

    def test_bad_fields(self, tmp_path: Path):
        code, _ = run(["generate", "model", "order", "-o", str(tmp_path), "--fields", ":string"])
        assert code == 1

    def test_missing_config_file(self, tmp_path: Path):
        code, _ = run(["--config", str(tmp_path / "missing.json"), "list"])
        assert code == 1


class TestList:
    def test_lists_artifacts(self):
        code, output = run(["list"])
        assert code == 0
        assert "Artifact" in output
        assert "Description" in output
        for kind in ("model", "form", "view"):
            assert kind in output
