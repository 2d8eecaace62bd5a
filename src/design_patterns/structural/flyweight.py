"""Flyweight - monsters share immutable type data through a caching factory."""

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.infrastructure.output import OutputSink, resolve_sink


class MonsterType(BaseModel):
    """Intrinsic, shared state."""

    model_config = ConfigDict(frozen=True)

    name: str
    texture: str
    base_health: int


class MonsterFactory:
    """Hands out one ``MonsterType`` per (name, texture) pair."""

    def __init__(self):
        self._types: Dict[Tuple[str, str], MonsterType] = {}
        self._logger = get_logger(__name__)

    def get_type(self, name: str, texture: str, base_health: int) -> MonsterType:
        """
        Return the cached type for ``(name, texture)``, creating it on first request.

        ``base_health`` only applies when the type is created; later requests
        for the same key get the cached instance unchanged.
        """
        key = (name, texture)
        monster_type = self._types.get(key)
        if monster_type is None:
            monster_type = MonsterType(name=name, texture=texture, base_health=base_health)
            self._types[key] = monster_type
            self._logger.debug("Created monster type", name=name, texture=texture)
        return monster_type

    @property
    def type_count(self) -> int:
        return len(self._types)


class Monster:
    """Extrinsic state (position) plus a reference to a shared type."""

    def __init__(self, x: int, y: int, monster_type: MonsterType, output: Optional[OutputSink] = None):
        self.x = x
        self.y = y
        self.type = monster_type
        self._output = output

    def draw(self) -> str:
        line = f"Draw {self.type.name} {self.type.texture} at ({self.x},{self.y})"
        resolve_sink(self._output).emit(line)
        return line
