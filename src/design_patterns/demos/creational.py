"""Demo routines for the creational patterns."""

from typing import Optional

from design_patterns.config.schemas.base_config import PatternCategory
from design_patterns.creational import (
    ConcreteCreatorA,
    ConcreteCreatorB,
    ConcreteCreatorC,
    ConcreteFactory1,
    ConcreteFactory2,
    GameCharacter,
    Sandwich,
    Singleton,
)
from design_patterns.demos.registry import DemoRegistry, get_demo_registry
from design_patterns.infrastructure.output import OutputSink


def demo_singleton(output: OutputSink) -> None:
    Singleton.get_instance().do_something(output)


def demo_factory_method(output: OutputSink) -> None:
    creators = [ConcreteCreatorA(output), ConcreteCreatorB(output), ConcreteCreatorC(output)]
    products = [creator.factory_method() for creator in creators]
    for product in products:
        product.use()


def demo_abstract_factory(output: OutputSink) -> None:
    for factory in (ConcreteFactory1(output), ConcreteFactory2(output)):
        x = factory.create_product_x()
        y = factory.create_product_y()
        x.use()
        y.interact_with(x)


def demo_builder(output: OutputSink) -> None:
    lunch_sub = (
        Sandwich.create(output)
        .set_bread("Wheat")
        .add_meat("Turkey")
        .add_veggie("Lettuce")
        .build()
    )
    lunch_sub.describe(output)

    custom_sub = (
        Sandwich.create(output)
        .set_bread("Italian Herb & Cheese")
        .add_meat("Roast Beef")
        .add_veggie("Pickles")
        .add_veggie("Onions")
        .set_toasted(True)
        .build()
    )
    custom_sub.describe(output)


def demo_prototype(output: OutputSink) -> None:
    character = GameCharacter("Jamie", 5, output)
    character.describe()
    character.fill_array(7)
    character.describe()

    first_clone = character.clone()
    first_clone.describe()

    character.set_name("Jack")
    for index, value in enumerate((99, 100, 101, 102)):
        character.update_array(index, value)
    character.describe()
    # The earlier clone keeps its own buffer
    first_clone.describe()

    second_clone = character.clone()
    second_clone.describe()


def register_creational_demos(registry: Optional[DemoRegistry] = None) -> None:
    """Register the creational demos in catalogue order."""
    registry = registry or get_demo_registry()
    category = PatternCategory.CREATIONAL
    registry.register_demo("singleton", category, "Singleton", demo_singleton)
    registry.register_demo("factory_method", category, "Factory Method", demo_factory_method)
    registry.register_demo("abstract_factory", category, "Abstract Factory", demo_abstract_factory)
    registry.register_demo("builder", category, "Builder", demo_builder)
    registry.register_demo("prototype", category, "Prototype", demo_prototype)
