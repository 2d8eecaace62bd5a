"""Abstract Factory - families of related products behind one factory interface.

``ConcreteFactory1`` builds ``ProductX1``/``ProductY1`` and ``ConcreteFactory2``
builds ``ProductX2``/``ProductY2``; client code only sees the abstract types.
"""

from abc import ABC, abstractmethod
from typing import Optional

from design_patterns.infrastructure.output import OutputSink, resolve_sink


class AbstractProductX(ABC):
    """Abstract product X."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._output = resolve_sink(output)

    @property
    @abstractmethod
    def name(self) -> str:
        """Return product name."""
        pass

    def use(self) -> None:
        """Example operation."""
        self._output.emit(f"Using {self.name}")


class AbstractProductY(ABC):
    """Abstract product Y, which collaborates with a product X of the same family."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._output = resolve_sink(output)

    @property
    @abstractmethod
    def name(self) -> str:
        """Return product name."""
        pass

    def interact_with(self, x: AbstractProductX) -> str:
        """Collaborate with a product X and report the interaction."""
        message = f"{self.name} interacts with {x.name}"
        self._output.emit(message)
        return message


class ProductX1(AbstractProductX):
    @property
    def name(self) -> str:
        return "ProductX1"


class ProductY1(AbstractProductY):
    @property
    def name(self) -> str:
        return "ProductY1"


class ProductX2(AbstractProductX):
    @property
    def name(self) -> str:
        return "ProductX2"


class ProductY2(AbstractProductY):
    @property
    def name(self) -> str:
        return "ProductY2"


class AbstractFactory(ABC):
    """Declares one creation method per product type."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._output = output

    @abstractmethod
    def create_product_x(self) -> AbstractProductX:
        pass

    @abstractmethod
    def create_product_y(self) -> AbstractProductY:
        pass


class ConcreteFactory1(AbstractFactory):
    """Produces Family1 products."""

    def create_product_x(self) -> AbstractProductX:
        return ProductX1(self._output)

    def create_product_y(self) -> AbstractProductY:
        return ProductY1(self._output)


class ConcreteFactory2(AbstractFactory):
    """Produces Family2 products."""

    def create_product_x(self) -> AbstractProductX:
        return ProductX2(self._output)

    def create_product_y(self) -> AbstractProductY:
        return ProductY2(self._output)
