"""Bridge - shapes decoupled from two independent implementor hierarchies (color, border)."""

from abc import ABC, abstractmethod
from typing import Optional

from design_patterns.infrastructure.output import OutputSink, resolve_sink


class ColorImplementor(ABC):
    """Implementor interface for color."""

    @abstractmethod
    def apply_color(self) -> str:
        pass


class RedColor(ColorImplementor):
    def apply_color(self) -> str:
        return "applied Red"


class BlueColor(ColorImplementor):
    def apply_color(self) -> str:
        return "applied Blue"


class BorderImplementor(ABC):
    """Implementor interface for border style."""

    @abstractmethod
    def apply_border(self) -> str:
        pass


class SolidBorder(BorderImplementor):
    def apply_border(self) -> str:
        return "with Solid Border"


class DashedBorder(BorderImplementor):
    def apply_border(self) -> str:
        return "with Dashed Border"


class ShapeAbstraction(ABC):
    """
    Abstraction side of the bridge.

    Holds one implementor of each hierarchy; refined shapes only supply their
    name, and drawing delegates the color and border wording to the implementors.
    """

    def __init__(
        self,
        color: ColorImplementor,
        border: BorderImplementor,
        output: Optional[OutputSink] = None,
    ):
        self._color = color
        self._border = border
        self._output = output

    @abstractmethod
    def render(self) -> str:
        """Describe the drawing without emitting it."""
        pass

    def draw(self) -> str:
        line = self.render()
        resolve_sink(self._output).emit(line)
        return line

    def _render_with(self, shape_name: str) -> str:
        return f"Drawing {shape_name}, {self._color.apply_color()}, {self._border.apply_border()}"


class Circle(ShapeAbstraction):
    def render(self) -> str:
        return self._render_with("Circle")


class Square(ShapeAbstraction):
    def render(self) -> str:
        return self._render_with("Square")


class Triangle(ShapeAbstraction):
    def render(self) -> str:
        return self._render_with("Triangle")
