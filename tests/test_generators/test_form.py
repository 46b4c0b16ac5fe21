"""Tests for the HTML form generator."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from blacksmith.console.options import OptionReader
from blacksmith.generators.form import FormGenerator
from blacksmith.generators.generator import Generator
from blacksmith.parsers.fields import FieldDescriptor


pytestmark = pytest.mark.unit


def test_parent_class():
    assert isinstance(FormGenerator(), Generator)


def test_default_extension():
    assert FormGenerator.default_extension == ".html"


class TestGetTemplateVars:
    def test_form_rows_added_to_required_vars(self):
        generator = FormGenerator()
        field_data = {"name": FieldDescriptor(name="name", type="string")}

        with patch.object(FormGenerator, "get_entity_name", return_value="Order"), \
                patch.object(FormGenerator, "field_data", field_data):
            template_vars = generator.get_template_vars()

        assert template_vars["Entity"] == "Order"
        assert template_vars["Entities"] == "Orders"
        assert template_vars["collection"] == "orders"
        assert template_vars["instance"] == "order"
        assert template_vars["fields"] == {"name": {"type": "string"}}
        assert template_vars["form_rows"] == [
            {
                "label": '<label for="name">Name:</label>',
                "element": '<input type="text" name="name" id="name">',
            }
        ]

    def test_no_fields_no_rows(self):
        assert FormGenerator().get_template_vars()["form_rows"] == []


class TestFormRows:
    @pytest.mark.parametrize(
        ("field_type", "element"),
        [
            ("text", '<textarea name="f" id="f"></textarea>'),
            ("boolean", '<input type="checkbox" name="f" id="f" value="1">'),
            ("integer", '<input type="number" name="f" id="f">'),
            ("decimal", '<input type="number" name="f" id="f">'),
            ("date", '<input type="date" name="f" id="f">'),
            ("datetime", '<input type="datetime-local" name="f" id="f">'),
            ("email", '<input type="email" name="f" id="f">'),
            ("password", '<input type="password" name="f" id="f">'),
            ("String", '<input type="text" name="f" id="f">'),
            ("uuid", '<input type="text" name="f" id="f">'),
        ],
    )
    def test_element_by_type(self, field_type, element, tmp_path):
        template = tmp_path / "form.j2"
        template.write_text("{% for row in form_rows %}{{ row.element }}{% endfor %}", encoding="utf-8")
        generator = FormGenerator(option_reader=OptionReader({"fields": f"f:{field_type}"}))

        generator.make("order", template, str(tmp_path / "out"))

        assert generator.parsed_template == element

    def test_label_humanises_name(self, tmp_path):
        template = tmp_path / "form.j2"
        template.write_text("{% for row in form_rows %}{{ row.label }}{% endfor %}", encoding="utf-8")
        generator = FormGenerator(option_reader=OptionReader({"fields": "first_name:string"}))

        generator.make("user", template, str(tmp_path / "out"))

        assert generator.parsed_template == '<label for="first_name">First Name:</label>'

    def test_rows_follow_field_order(self, tmp_path):
        template = tmp_path / "form.j2"
        template.write_text("x", encoding="utf-8")
        generator = FormGenerator(option_reader=OptionReader({"fields": "b:string, a:text"}))

        generator.make("order", template, str(tmp_path / "out"))

        labels = [row["label"] for row in generator.get_form_rows()]
        assert labels == ['<label for="b">B:</label>', '<label for="a">A:</label>']
        assert generator.template_destination.name == "Order.html"
