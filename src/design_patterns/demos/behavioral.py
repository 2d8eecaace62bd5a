"""Demo routines for the behavioral patterns."""

from typing import Optional

from design_patterns.behavioral import (
    AreaCalculator,
    BubbleSort,
    Button,
    Caretaker,
    CircleShape,
    ConcreteObserver,
    CSVProcessor,
    Dialog,
    FibonacciRange,
    JSONProcessor,
    Light,
    MinLength,
    NoSpaces,
    NotEmpty,
    Originator,
    PerimeterCalculator,
    QuickSort,
    RectangleShape,
    RedState,
    RemoteControl,
    Sorter,
    Subject,
    TextBox,
    TrafficLight,
    TurnOffCommand,
    TurnOnCommand,
    ValidatorChain,
    XMLProcessor,
)
from design_patterns.config.schemas.base_config import PatternCategory
from design_patterns.demos.registry import DemoRegistry, get_demo_registry
from design_patterns.infrastructure.output import OutputSink


def demo_chain_of_responsibility(output: OutputSink) -> None:
    chain = ValidatorChain()
    chain.add(NotEmpty(output)).add(MinLength(5, output)).add(NoSpaces(output))

    for candidate in ("TestStr", "", "a b"):
        if chain.validate(candidate):
            output.emit("Validation Success")


def demo_command(output: OutputSink) -> None:
    light = Light(output)
    remote = RemoteControl()
    remote.add_command(TurnOnCommand(light))
    remote.add_command(TurnOffCommand(light))

    remote.press_button(0)
    remote.press_button(1)
    # No command on this button
    remote.press_button(5)


def demo_iterator(output: OutputSink) -> None:
    output.emit(" ".join(str(number) for number in FibonacciRange()))


def demo_mediator(output: OutputSink) -> None:
    dialog = Dialog()
    button = Button(dialog)
    text_box = TextBox(dialog, output)
    dialog.set_button(button)
    dialog.set_text_box(text_box)
    button.click()


def demo_memento(output: OutputSink) -> None:
    originator = Originator(output)
    caretaker = Caretaker()

    originator.set_state(1)
    caretaker.add_memento(originator.save())
    originator.set_state(2)
    caretaker.add_memento(originator.save())
    originator.set_state(3)

    originator.restore(caretaker.get_memento(0))
    originator.restore(caretaker.get_memento(1))
    # Out of range, ignored
    originator.restore(caretaker.get_memento(10))


def demo_observer(output: OutputSink) -> None:
    subject = Subject()
    first = ConcreteObserver("Observer1", output)
    second = ConcreteObserver("Observer2", output)

    subject.attach(first)
    subject.attach(second)
    subject.set_state(10)
    subject.set_state(20)

    subject.detach(first)
    subject.set_state(30)


def demo_state(output: OutputSink) -> None:
    light = TrafficLight(RedState(), output)
    for _ in range(4):
        light.request()


def demo_strategy(output: OutputSink) -> None:
    sorter = Sorter(BubbleSort(), output)
    sorter.sort([5, 3, 8, 1, 2])

    sorter.set_strategy(QuickSort())
    sorter.sort([9, 4, 7, 1, 3, 6])


def demo_template_method(output: OutputSink) -> None:
    for processor in (CSVProcessor(output), JSONProcessor(output), XMLProcessor(output)):
        processor.process()


def demo_visitor(output: OutputSink) -> None:
    shapes = [CircleShape(), RectangleShape()]
    for visitor in (AreaCalculator(output), PerimeterCalculator(output)):
        for shape in shapes:
            shape.accept(visitor)


def register_behavioral_demos(registry: Optional[DemoRegistry] = None) -> None:
    """Register the behavioral demos in catalogue order."""
    registry = registry or get_demo_registry()
    category = PatternCategory.BEHAVIORAL
    registry.register_demo(
        "chain_of_responsibility", category, "Chain of Responsibility", demo_chain_of_responsibility
    )
    registry.register_demo("command", category, "Command", demo_command)
    registry.register_demo("iterator", category, "Iterator", demo_iterator)
    registry.register_demo("mediator", category, "Mediator", demo_mediator)
    registry.register_demo("memento", category, "Memento", demo_memento)
    registry.register_demo("observer", category, "Observer", demo_observer)
    registry.register_demo("state", category, "State", demo_state)
    registry.register_demo("strategy", category, "Strategy", demo_strategy)
    registry.register_demo("template_method", category, "Template Method", demo_template_method)
    registry.register_demo("visitor", category, "Visitor", demo_visitor)
