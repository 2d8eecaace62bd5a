"""Command - requests wrapped as objects so a remote control can invoke them."""

from abc import ABC, abstractmethod
from typing import List, Optional

from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.infrastructure.output import OutputSink, resolve_sink


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass


class Light:
    """Receiver."""

    def __init__(self, output: Optional[OutputSink] = None):
        self.is_on = False
        self._output = resolve_sink(output)

    def turn_on(self) -> None:
        self.is_on = True
        self._output.emit("Light is ON")

    def turn_off(self) -> None:
        self.is_on = False
        self._output.emit("Light is OFF")


class TurnOnCommand(Command):
    def __init__(self, light: Light):
        self._light = light

    def execute(self) -> None:
        self._light.turn_on()


class TurnOffCommand(Command):
    def __init__(self, light: Light):
        self._light = light

    def execute(self) -> None:
        self._light.turn_off()


class RemoteControl:
    """Invoker: one button per added command, indexed from zero."""

    def __init__(self):
        self._commands: List[Command] = []
        self._logger = get_logger(__name__)

    def add_command(self, command: Command) -> int:
        """Add a command and return the index of its button."""
        self._commands.append(command)
        return len(self._commands) - 1

    @property
    def button_count(self) -> int:
        return len(self._commands)

    def press_button(self, index: int) -> bool:
        """Execute the command on ``index``. Unknown buttons are ignored."""
        if 0 <= index < len(self._commands):
            self._commands[index].execute()
            return True
        self._logger.debug("Ignoring press on unknown button", index=index)
        return False
