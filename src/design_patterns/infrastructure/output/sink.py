"""Output sink port and adapters.

Every example emits its human readable lines through an ``OutputSink`` so the
console is just one adapter; tests inject a ``RecordingSink`` and assert on
the captured lines.
"""
import sys
import threading
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO


class OutputSink(ABC):
    """Port for line oriented example output."""

    @abstractmethod
    def emit(self, message: str) -> None:
        """Emit a single line of output."""
        pass


class ConsoleSink(OutputSink):
    """Writes lines to a text stream, stdout unless another stream is given."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per call so redirected stdout (pytest capsys, contextlib) is honoured
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, message: str) -> None:
        stream = self.stream
        stream.write(f"{message}\n")
        stream.flush()


class RecordingSink(OutputSink):
    """Keeps every emitted line in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def emit(self, message: str) -> None:
        self.lines.append(message)

    def clear(self) -> None:
        """Forget all recorded lines."""
        self.lines.clear()

    @property
    def text(self) -> str:
        """All recorded lines joined with newlines."""
        return "\n".join(self.lines)


_default_sink: Optional[ConsoleSink] = None
_default_lock = threading.Lock()


def get_default_sink() -> OutputSink:
    """Get the shared console sink used when no sink is injected."""
    global _default_sink
    if _default_sink is None:
        with _default_lock:
            if _default_sink is None:
                _default_sink = ConsoleSink()
    return _default_sink


def resolve_sink(output: Optional[OutputSink]) -> OutputSink:
    """Return the injected sink or the shared console sink."""
    return output if output is not None else get_default_sink()
