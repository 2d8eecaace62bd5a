"""Tests for CLI argument parsing and dispatch."""
import pytest

from design_patterns.cli.main import execute, parse_args
from design_patterns.config.schemas import AppConfig, DemoConfig
from design_patterns.demos import register_all_demos
from design_patterns.demos.registry import DemoRegistry


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])

        assert args.demo is None
        assert args.category is None
        assert args.list is False
        assert args.format == "table"

    def test_repeatable_filters(self):
        args = parse_args(["--demo", "state", "--demo", "observer", "--category", "structural"])

        assert args.demo == ["state", "observer"]
        assert args.category == ["structural"]

    def test_unknown_category_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            parse_args(["--category", "concurrency"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out


class TestExecute:
    def setup_method(self):
        self.registry = register_all_demos(DemoRegistry())
        self.app_config = AppConfig(demo=DemoConfig(show_banner=False, separator="~"))

    def test_demo_selection_wins_over_category(self, sink):
        args = parse_args(["--demo", "command", "--category", "creational"])

        executed = execute(args, self.registry, self.app_config, sink)

        assert executed == ["command"]
        assert sink.lines == ["Light is ON", "Light is OFF", "~"]

    def test_categories_run_in_given_order(self, sink):
        args = parse_args(["--category", "structural", "--category", "creational"])

        executed = execute(args, self.registry, self.app_config, sink)

        assert executed[0] == "adapter"
        assert executed[-1] == "prototype"
        assert len(executed) == 12
