"""Tests for CLI output formatters."""
import json

import yaml

from design_patterns.cli.formatters import format_demos_list, format_demos_table, format_output

DEMOS = [
    {"name": "singleton", "category": "creational", "title": "Singleton"},
    {"name": "observer", "category": "behavioral", "title": "Observer"},
]


def test_json_format():
    assert json.loads(format_output({"demos": DEMOS}, "json")) == {"demos": DEMOS}


def test_yaml_format():
    assert yaml.safe_load(format_output({"demos": DEMOS}, "yaml")) == {"demos": DEMOS}


def test_list_format():
    assert format_output({"demos": DEMOS}, "list") == (
        "creational/singleton - Singleton\nbehavioral/observer - Observer"
    )


def test_table_contains_every_demo():
    table = format_demos_table(DEMOS)

    assert "Category" in table
    assert "singleton" in table
    assert "Observer" in table


def test_empty_catalogue():
    assert format_demos_table([]) == "No demos registered."
    assert format_demos_list([]) == "No demos registered."


def test_table_format_falls_back_to_json_for_other_data():
    assert json.loads(format_output({"other": 1}, "table")) == {"other": 1}
