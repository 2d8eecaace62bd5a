"""Builder - a fluent builder assembling an immutable ``Sandwich``."""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.infrastructure.output import OutputSink, resolve_sink

DEFAULT_BREAD = "White"
NO_MEAT = "None"


class Sandwich(BaseModel):
    """Immutable product; obtain one through ``Sandwich.create()...build()``."""

    model_config = ConfigDict(frozen=True)

    bread: str = DEFAULT_BREAD
    meat: str = NO_MEAT
    veggies: Tuple[str, ...] = Field(default_factory=tuple)
    toasted: bool = False

    @classmethod
    def create(cls, output: Optional[OutputSink] = None) -> "SandwichBuilder":
        """Convenience factory returning a default-initialised builder."""
        return SandwichBuilder(output)

    def is_plain(self) -> bool:
        """A sandwich with neither meat nor veggies."""
        return self.meat == NO_MEAT and not self.veggies

    def describe(self, output: Optional[OutputSink] = None) -> List[str]:
        """Emit a human readable description of the assembled sandwich."""
        lines = [
            "--- Final Sandwich ---",
            f"Bread: {self.bread}{' (TOASTED)' if self.toasted else ''}",
            f"Meat: {self.meat}",
            f"Veggies: {', '.join(self.veggies) if self.veggies else 'None'}",
            "----------------------",
        ]
        sink = resolve_sink(output)
        for line in lines:
            sink.emit(line)
        return lines


class SandwichBuilder:
    """
    Holds the ingredients while a sandwich is being assembled.

    Every setter returns the builder so calls can be chained. ``build()``
    snapshots the current ingredients, so the builder can keep going and
    build further, independent sandwiches.
    """

    def __init__(self, output: Optional[OutputSink] = None):
        self._bread = DEFAULT_BREAD
        self._meat = NO_MEAT
        self._veggies: List[str] = []
        self._toasted = False
        self._output = output
        self._logger = get_logger(__name__)

    def set_bread(self, bread: str) -> "SandwichBuilder":
        self._bread = bread
        return self

    def add_meat(self, meat: str) -> "SandwichBuilder":
        self._meat = meat
        return self

    def add_veggie(self, veggie: str) -> "SandwichBuilder":
        """Add one vegetable; repeated calls append."""
        self._veggies.append(veggie)
        return self

    def set_toasted(self, toasted: bool = True) -> "SandwichBuilder":
        self._toasted = toasted
        return self

    def build(self) -> Sandwich:
        """Build the final sandwich, warning about an unusually plain one."""
        sandwich = Sandwich(
            bread=self._bread,
            meat=self._meat,
            veggies=tuple(self._veggies),
            toasted=self._toasted,
        )
        if sandwich.is_plain():
            self._logger.warning("Building a very plain sandwich", bread=sandwich.bread)
            resolve_sink(self._output).emit("Warning: Building a very plain sandwich!")
        return sandwich
