"""Demo routines for the structural patterns."""

from typing import Optional

from design_patterns.config.schemas.base_config import PatternCategory
from design_patterns.demos.registry import DemoRegistry, get_demo_registry
from design_patterns.infrastructure.output import OutputSink
from design_patterns.structural import (
    BlueColor,
    Circle,
    Client,
    ComplexObject,
    DashedBorder,
    FileDownloaderFacade,
    MilkDecorator,
    Monster,
    MonsterFactory,
    RedColor,
    SerialAdapter,
    ServiceProxy,
    SharedMemoryAdapter,
    SimpleCoffee,
    SimpleData,
    SolidBorder,
    Square,
    SugarDecorator,
    Triangle,
    UDPAdapter,
)


def demo_adapter(output: OutputSink) -> None:
    client = Client(UDPAdapter(output))
    client.send_message("Hello via UDP!")
    client.change_adapter(SerialAdapter(output))
    client.send_message("Hello via Serial!")
    client.change_adapter(SharedMemoryAdapter(output))
    client.send_message("Hello via Shared Memory!")


def demo_bridge(output: OutputSink) -> None:
    shapes = [
        Circle(RedColor(), SolidBorder(), output),
        Square(BlueColor(), DashedBorder(), output),
        Triangle(RedColor(), DashedBorder(), output),
    ]
    for shape in shapes:
        shape.draw()


def demo_composite(output: OutputSink) -> None:
    header = ComplexObject("HeaderSection", output)
    header.add(SimpleData(42, output)).add(SimpleData(99, output))

    root = ComplexObject("RootDocument", output)
    root.add(SimpleData(1001, output))
    root.add(header)
    root.add(SimpleData(2025, output))

    data = root.serialize()
    output.emit(f"Total size of the entire serialized object graph: {len(data)} bytes.")


def demo_decorator(output: OutputSink) -> None:
    coffee = SimpleCoffee()
    with_milk = MilkDecorator(coffee)
    with_milk_and_sugar = SugarDecorator(with_milk)
    # Same base under a second, independent chain
    just_sugar = SugarDecorator(coffee)
    for item in (coffee, with_milk, with_milk_and_sugar, just_sugar):
        output.emit(f"{item.description} costs {item.cost:.2f}")


def demo_facade(output: OutputSink) -> None:
    FileDownloaderFacade(output).download("https://example.com/report.txt", "/tmp/report.txt")


def demo_flyweight(output: OutputSink) -> None:
    factory = MonsterFactory()
    monsters = [
        Monster(10, 20, factory.get_type("Orc", "orc_texture.png", 100), output),
        Monster(30, 40, factory.get_type("Orc", "orc_texture.png", 100), output),
        Monster(50, 60, factory.get_type("Goblin", "goblin_texture.png", 60), output),
        Monster(70, 80, factory.get_type("Orc", "orc_texture.png", 100), output),
    ]
    for monster in monsters:
        monster.draw()
    output.emit(f"{len(monsters)} monsters share {factory.type_count} monster types")


def demo_proxy(output: OutputSink) -> None:
    ServiceProxy(has_access=False, output=output).perform_action()
    ServiceProxy(has_access=True, output=output).perform_action()


def register_structural_demos(registry: Optional[DemoRegistry] = None) -> None:
    """Register the structural demos in catalogue order."""
    registry = registry or get_demo_registry()
    category = PatternCategory.STRUCTURAL
    registry.register_demo("adapter", category, "Adapter", demo_adapter)
    registry.register_demo("bridge", category, "Bridge", demo_bridge)
    registry.register_demo("composite", category, "Composite", demo_composite)
    registry.register_demo("decorator", category, "Decorator", demo_decorator)
    registry.register_demo("facade", category, "Facade", demo_facade)
    registry.register_demo("flyweight", category, "Flyweight", demo_flyweight)
    registry.register_demo("proxy", category, "Proxy", demo_proxy)
