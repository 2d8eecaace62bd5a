"""Template Method - a fixed read/process/save skeleton with overridable steps."""

from abc import ABC, abstractmethod
from typing import Optional

from design_patterns.infrastructure.output import OutputSink, resolve_sink


class DataProcessor(ABC):
    """
    ``process()`` is the template: it always runs ``read_data``,
    ``process_data`` and ``save_data`` in that order. The first two steps are
    mandatory; ``save_data`` has a default subclasses may override.
    """

    def __init__(self, output: Optional[OutputSink] = None):
        self._output = resolve_sink(output)

    def process(self) -> None:
        self.read_data()
        self.process_data()
        self.save_data()

    @abstractmethod
    def read_data(self) -> None:
        pass

    @abstractmethod
    def process_data(self) -> None:
        pass

    def save_data(self) -> None:
        self._output.emit("Saving to file")


class CSVProcessor(DataProcessor):
    def read_data(self) -> None:
        self._output.emit("Reading CSV data")

    def process_data(self) -> None:
        self._output.emit("Processing CSV data")


class JSONProcessor(DataProcessor):
    def read_data(self) -> None:
        self._output.emit("Reading JSON data")

    def process_data(self) -> None:
        self._output.emit("Processing JSON data")


class XMLProcessor(DataProcessor):
    def read_data(self) -> None:
        self._output.emit("Reading XML data")

    def process_data(self) -> None:
        self._output.emit("Processing XML data")

    def save_data(self) -> None:
        self._output.emit("Saving to database")
