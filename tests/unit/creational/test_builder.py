"""Tests for the sandwich builder."""
import pytest
from pydantic import ValidationError

from design_patterns.creational.builder import Sandwich, SandwichBuilder


class TestSandwichBuilder:
    def test_defaults(self, sink):
        sandwich = SandwichBuilder(sink).build()

        assert sandwich.bread == "White"
        assert sandwich.meat == "None"
        assert sandwich.veggies == ()
        assert sandwich.toasted is False

    def test_fluent_configuration(self):
        sandwich = (
            Sandwich.create()
            .set_bread("Italian Herb & Cheese")
            .add_meat("Roast Beef")
            .add_veggie("Pickles")
            .add_veggie("Onions")
            .set_toasted(True)
            .build()
        )

        assert sandwich.bread == "Italian Herb & Cheese"
        assert sandwich.meat == "Roast Beef"
        assert sandwich.veggies == ("Pickles", "Onions")
        assert sandwich.toasted is True

    def test_plain_sandwich_warns(self, sink):
        sandwich = Sandwich.create(sink).build()

        assert sandwich.is_plain()
        assert sink.lines == ["Warning: Building a very plain sandwich!"]

    def test_non_plain_sandwich_does_not_warn(self, sink):
        Sandwich.create(sink).add_veggie("Lettuce").build()

        assert sink.lines == []

    def test_built_products_are_independent(self):
        builder = Sandwich.create().add_meat("Turkey").add_veggie("Lettuce")
        first = builder.build()
        builder.add_veggie("Tomato")
        second = builder.build()

        assert first.veggies == ("Lettuce",)
        assert second.veggies == ("Lettuce", "Tomato")

    def test_product_is_immutable(self):
        sandwich = Sandwich.create().add_meat("Turkey").build()

        with pytest.raises(ValidationError):
            sandwich.meat = "Ham"

    def test_describe(self, sink):
        sandwich = Sandwich.create().set_bread("Wheat").add_meat("Turkey").add_veggie("Lettuce").add_veggie("Tomato").set_toasted().build()

        sandwich.describe(sink)

        assert sink.lines == [
            "--- Final Sandwich ---",
            "Bread: Wheat (TOASTED)",
            "Meat: Turkey",
            "Veggies: Lettuce, Tomato",
            "----------------------",
        ]

    def test_describe_without_veggies(self, sink):
        Sandwich.create().add_meat("Ham").build().describe(sink)

        assert "Veggies: None" in sink.lines
