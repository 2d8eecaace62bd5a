"""Tests for DemoRegistry."""

import pytest

from design_patterns.config.schemas import DemoConfig, PatternCategory
from design_patterns.demos import register_all_demos
from design_patterns.demos.registry import DemoRegistry, get_demo_registry, parse_category
from design_patterns.domain.core.exceptions import CategoryNotFoundError, DemoNotFoundError

CREATIONAL = ["singleton", "factory_method", "abstract_factory", "builder", "prototype"]
STRUCTURAL = ["adapter", "bridge", "composite", "decorator", "facade", "flyweight", "proxy"]
BEHAVIORAL = [
    "chain_of_responsibility",
    "command",
    "iterator",
    "mediator",
    "memento",
    "observer",
    "state",
    "strategy",
    "template_method",
    "visitor",
]


class TestDemoRegistry:
    """Test registration and lookup."""

    def setup_method(self):
        self.registry = DemoRegistry()

    def _hello(self, output):
        output.emit("hello")

    def test_singleton_access(self):
        assert get_demo_registry() is DemoRegistry.get_instance()
        assert get_demo_registry() is not self.registry

    def test_register_and_lookup(self):
        self.registry.register_demo("hello", PatternCategory.BEHAVIORAL, "Hello", self._hello)

        assert self.registry.is_demo_registered("hello")
        registration = self.registry.get_registration("hello")
        assert registration.header == "Design Patterns - Behavioral: Hello demo"
        assert registration.to_dict() == {"name": "hello", "category": "behavioral", "title": "Hello"}

    def test_duplicate_registration_rejected(self):
        self.registry.register_demo("hello", PatternCategory.BEHAVIORAL, "Hello", self._hello)

        with pytest.raises(ValueError, match="already registered"):
            self.registry.register_demo("hello", PatternCategory.CREATIONAL, "Again", self._hello)

    def test_unknown_demo_raises(self):
        self.registry.register_demo("hello", PatternCategory.BEHAVIORAL, "Hello", self._hello)

        with pytest.raises(DemoNotFoundError) as exc_info:
            self.registry.get_registration("missing")

        assert exc_info.value.demo_name == "missing"
        assert exc_info.value.available == ["hello"]

    def test_run_demo_frames_output(self, sink):
        self.registry.register_demo("hello", PatternCategory.BEHAVIORAL, "Hello", self._hello)

        self.registry.run_demo("hello", sink, DemoConfig(separator="==="))

        assert sink.lines == ["Design Patterns - Behavioral: Hello demo", "hello", "==="]

    def test_run_demo_without_banner(self, sink):
        self.registry.register_demo("hello", PatternCategory.BEHAVIORAL, "Hello", self._hello)

        self.registry.run_demo("hello", sink, DemoConfig(show_banner=False, separator="-"))

        assert sink.lines == ["hello", "-"]

    def test_clear_registrations(self):
        self.registry.register_demo("hello", PatternCategory.BEHAVIORAL, "Hello", self._hello)
        self.registry.clear_registrations()

        assert self.registry.get_demo_names() == []


class TestCatalogue:
    """Test the full catalogue as registered by the category modules."""

    def setup_method(self):
        self.registry = register_all_demos(DemoRegistry())

    def test_every_pattern_registered_in_catalogue_order(self):
        assert self.registry.get_demo_names(PatternCategory.CREATIONAL) == CREATIONAL
        assert self.registry.get_demo_names(PatternCategory.STRUCTURAL) == STRUCTURAL
        assert self.registry.get_demo_names(PatternCategory.BEHAVIORAL) == BEHAVIORAL

    def test_register_all_is_idempotent(self):
        register_all_demos(self.registry)

        assert len(self.registry.get_demo_names()) == 22

    def test_run_all_follows_category_order(self, sink):
        executed = self.registry.run_all(sink)

        assert executed == CREATIONAL + STRUCTURAL + BEHAVIORAL
        assert sink.lines[0] == "Design Patterns - Creational: Singleton demo"
        assert sink.lines.count("-" * 44) == 22

    def test_run_all_respects_configured_categories(self, sink):
        executed = self.registry.run_all(sink, DemoConfig(categories="behavioral,creational"))

        assert executed == BEHAVIORAL + CREATIONAL

    def test_run_category(self, sink):
        assert self.registry.run_category(PatternCategory.STRUCTURAL, sink) == STRUCTURAL


class TestParseCategory:
    def test_case_insensitive(self):
        assert parse_category(" Structural ") == PatternCategory.STRUCTURAL

    def test_unknown_category(self):
        with pytest.raises(CategoryNotFoundError) as exc_info:
            parse_category("concurrency")

        assert exc_info.value.available == ["creational", "structural", "behavioral"]
