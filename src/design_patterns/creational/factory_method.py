"""Factory Method - subclasses decide which product a creator builds."""

from abc import ABC, abstractmethod
from typing import Optional

from design_patterns.infrastructure.output import OutputSink, resolve_sink


class Product(ABC):
    """Product interface for the Factory Method pattern."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._output = resolve_sink(output)

    @property
    @abstractmethod
    def name(self) -> str:
        """Return product name."""
        pass

    def use(self) -> None:
        """Example operation provided by the product."""
        self._output.emit(f"Using {self.name}")


class ConcreteProductA(Product):
    @property
    def name(self) -> str:
        return "ConcreteProductA"


class ConcreteProductB(Product):
    @property
    def name(self) -> str:
        return "ConcreteProductB"


class ConcreteProductC(Product):
    @property
    def name(self) -> str:
        return "ConcreteProductC"


class Creator(ABC):
    """
    Declares the factory method.

    ``create_object_and_use`` is the concrete operation that relies on the
    factory method without knowing which product class comes back.
    """

    def __init__(self, output: Optional[OutputSink] = None):
        self._output = output

    @abstractmethod
    def factory_method(self) -> Product:
        """Produce a product."""
        pass

    def create_object_and_use(self) -> Product:
        """Build a product through the factory method and use it."""
        product = self.factory_method()
        product.use()
        return product


class ConcreteCreatorA(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductA(self._output)


class ConcreteCreatorB(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductB(self._output)


class ConcreteCreatorC(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductC(self._output)
