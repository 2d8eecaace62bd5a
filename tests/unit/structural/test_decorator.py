"""Tests for coffee decorators."""
import pytest

from design_patterns.structural.decorator import MilkDecorator, SimpleCoffee, SugarDecorator


class TestCoffeeDecorators:
    def test_simple_coffee(self):
        coffee = SimpleCoffee()

        assert coffee.description == "Simple Coffee"
        assert coffee.cost == 5.0

    def test_milk_then_sugar(self):
        with_milk = MilkDecorator(SimpleCoffee())
        with_both = SugarDecorator(with_milk)

        assert with_milk.cost == pytest.approx(7.0)
        assert with_milk.description == "Simple Coffee, Milk"
        assert with_both.cost == pytest.approx(7.5)
        assert with_both.description == "Simple Coffee, Milk, Sugar"

    def test_wrap_order_changes_description(self):
        coffee = MilkDecorator(SugarDecorator(SimpleCoffee()))

        assert coffee.description == "Simple Coffee, Sugar, Milk"
        assert coffee.cost == pytest.approx(7.5)

    def test_same_decorator_applied_twice_is_additive(self):
        coffee = MilkDecorator(MilkDecorator(SimpleCoffee()))

        assert coffee.description == "Simple Coffee, Milk, Milk"
        assert coffee.cost == pytest.approx(9.0)

    def test_shared_base_in_independent_chains(self):
        base = SimpleCoffee()
        milk_chain = MilkDecorator(base)
        sugar_chain = SugarDecorator(base)

        assert milk_chain.wrapped is sugar_chain.wrapped
        assert milk_chain.cost == pytest.approx(7.0)
        assert sugar_chain.cost == pytest.approx(5.5)
