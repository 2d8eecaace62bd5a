"""Creational patterns: ways of constructing objects while hiding concrete types."""

from .abstract_factory import (
    AbstractFactory,
    AbstractProductX,
    AbstractProductY,
    ConcreteFactory1,
    ConcreteFactory2,
    ProductX1,
    ProductX2,
    ProductY1,
    ProductY2,
)
from .builder import Sandwich, SandwichBuilder
from .factory_method import (
    ConcreteCreatorA,
    ConcreteCreatorB,
    ConcreteCreatorC,
    ConcreteProductA,
    ConcreteProductB,
    ConcreteProductC,
    Creator,
    Product,
)
from .prototype import GameCharacter, Prototype
from .singleton import Singleton

__all__ = [
    "Singleton",
    "Product",
    "ConcreteProductA",
    "ConcreteProductB",
    "ConcreteProductC",
    "Creator",
    "ConcreteCreatorA",
    "ConcreteCreatorB",
    "ConcreteCreatorC",
    "AbstractFactory",
    "AbstractProductX",
    "AbstractProductY",
    "ConcreteFactory1",
    "ConcreteFactory2",
    "ProductX1",
    "ProductX2",
    "ProductY1",
    "ProductY2",
    "Sandwich",
    "SandwichBuilder",
    "Prototype",
    "GameCharacter",
]
