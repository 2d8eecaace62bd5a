"""Decorator - coffee add-ons wrapping a component to extend description and cost."""

from abc import ABC, abstractmethod


class Coffee(ABC):
    """Component interface."""

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    @abstractmethod
    def cost(self) -> float:
        pass


class SimpleCoffee(Coffee):
    @property
    def description(self) -> str:
        return "Simple Coffee"

    @property
    def cost(self) -> float:
        return 5.0


class CoffeeDecorator(Coffee):
    """
    Base decorator delegating to the wrapped coffee.

    The wrapped component is shared, not owned: one base coffee can sit under
    several independent decorator chains.
    """

    def __init__(self, coffee: Coffee):
        self._wrapped = coffee

    @property
    def wrapped(self) -> Coffee:
        return self._wrapped

    @property
    def description(self) -> str:
        return self._wrapped.description

    @property
    def cost(self) -> float:
        return self._wrapped.cost


class MilkDecorator(CoffeeDecorator):
    @property
    def description(self) -> str:
        return f"{self._wrapped.description}, Milk"

    @property
    def cost(self) -> float:
        return self._wrapped.cost + 2.0


class SugarDecorator(CoffeeDecorator):
    @property
    def description(self) -> str:
        return f"{self._wrapped.description}, Sugar"

    @property
    def cost(self) -> float:
        return self._wrapped.cost + 0.5
