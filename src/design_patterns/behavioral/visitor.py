"""Visitor - operations over a closed set of shapes via double dispatch."""

from abc import ABC, abstractmethod
from typing import Optional

from design_patterns.infrastructure.output import OutputSink, resolve_sink

# Approximation kept so the printed areas stay short
PI = 3.14


class ShapeVisitor(ABC):
    """One method per element variant."""

    @abstractmethod
    def visit_circle(self, circle: "CircleShape") -> float:
        pass

    @abstractmethod
    def visit_rectangle(self, rectangle: "RectangleShape") -> float:
        pass


class Shape(ABC):
    @abstractmethod
    def accept(self, visitor: ShapeVisitor) -> float:
        pass


class CircleShape(Shape):
    def __init__(self, radius: float = 5):
        self.radius = radius

    def accept(self, visitor: ShapeVisitor) -> float:
        return visitor.visit_circle(self)


class RectangleShape(Shape):
    def __init__(self, width: float = 3, height: float = 4):
        self.width = width
        self.height = height

    def accept(self, visitor: ShapeVisitor) -> float:
        return visitor.visit_rectangle(self)


class AreaCalculator(ShapeVisitor):
    def __init__(self, output: Optional[OutputSink] = None):
        self._output = resolve_sink(output)

    def visit_circle(self, circle: CircleShape) -> float:
        area = PI * circle.radius * circle.radius
        self._output.emit(f"Circle area: {area:g}")
        return area

    def visit_rectangle(self, rectangle: RectangleShape) -> float:
        area = rectangle.width * rectangle.height
        self._output.emit(f"Rectangle area: {area:g}")
        return area


class PerimeterCalculator(ShapeVisitor):
    """A second operation added without touching the shape classes."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._output = resolve_sink(output)

    def visit_circle(self, circle: CircleShape) -> float:
        perimeter = 2 * PI * circle.radius
        self._output.emit(f"Circle perimeter: {perimeter:g}")
        return perimeter

    def visit_rectangle(self, rectangle: RectangleShape) -> float:
        perimeter = 2 * (rectangle.width + rectangle.height)
        self._output.emit(f"Rectangle perimeter: {perimeter:g}")
        return perimeter
