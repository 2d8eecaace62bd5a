"""Behavioral patterns: distributing responsibility and algorithmic variation across objects."""

from .chain_of_responsibility import MinLength, NoSpaces, NotEmpty, Validator, ValidatorChain
from .command import Command, Light, RemoteControl, TurnOffCommand, TurnOnCommand
from .iterator import FibonacciIterator, FibonacciRange
from .mediator import Button, Colleague, Dialog, Mediator, TextBox
from .memento import Caretaker, Memento, Originator
from .observer import ConcreteObserver, Observer, Subject
from .state import GreenState, RedState, TrafficLight, TrafficLightState, YellowState
from .strategy import BubbleSort, QuickSort, Sorter, SortStrategy
from .template_method import CSVProcessor, DataProcessor, JSONProcessor, XMLProcessor
from .visitor import (
    AreaCalculator,
    CircleShape,
    PerimeterCalculator,
    RectangleShape,
    Shape,
    ShapeVisitor,
)

__all__ = [
    "Validator",
    "NotEmpty",
    "MinLength",
    "NoSpaces",
    "ValidatorChain",
    "Command",
    "Light",
    "TurnOnCommand",
    "TurnOffCommand",
    "RemoteControl",
    "FibonacciIterator",
    "FibonacciRange",
    "Mediator",
    "Colleague",
    "Button",
    "TextBox",
    "Dialog",
    "Memento",
    "Originator",
    "Caretaker",
    "Observer",
    "Subject",
    "ConcreteObserver",
    "TrafficLightState",
    "RedState",
    "GreenState",
    "YellowState",
    "TrafficLight",
    "SortStrategy",
    "BubbleSort",
    "QuickSort",
    "Sorter",
    "DataProcessor",
    "CSVProcessor",
    "JSONProcessor",
    "XMLProcessor",
    "Shape",
    "CircleShape",
    "RectangleShape",
    "ShapeVisitor",
    "AreaCalculator",
    "PerimeterCalculator",
]
