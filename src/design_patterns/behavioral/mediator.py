"""Mediator - a dialog coordinating widgets that never reference each other."""

from abc import ABC, abstractmethod
from typing import Optional

from design_patterns.infrastructure.output import OutputSink, resolve_sink


class Colleague:
    """Base for widgets; each one only knows its mediator."""

    def __init__(self, mediator: "Mediator"):
        self.mediator = mediator


class Mediator(ABC):
    @abstractmethod
    def notify(self, sender: Colleague, event: str) -> None:
        pass


class Button(Colleague):
    def click(self) -> None:
        self.mediator.notify(self, "click")


class TextBox(Colleague):
    def __init__(self, mediator: Mediator, output: Optional[OutputSink] = None):
        super().__init__(mediator)
        self.text = ""
        self._output = resolve_sink(output)

    def set_text(self, text: str) -> None:
        self.text = text
        self._output.emit(f"TextBox: {text}")


class Dialog(Mediator):
    """Routes a button click to the text box; every other event is ignored."""

    def __init__(self):
        self._button: Optional[Button] = None
        self._text_box: Optional[TextBox] = None

    def set_button(self, button: Button) -> None:
        self._button = button

    def set_text_box(self, text_box: TextBox) -> None:
        self._text_box = text_box

    def notify(self, sender: Colleague, event: str) -> None:
        if sender is self._button and event == "click" and self._text_box is not None:
            self._text_box.set_text("Button was clicked!")
