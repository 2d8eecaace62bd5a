"""Tests for the output sinks."""

import io

from design_patterns.infrastructure.output import (
    ConsoleSink,
    RecordingSink,
    get_default_sink,
    resolve_sink,
)


class TestConsoleSink:
    def test_writes_lines_to_given_stream(self):
        stream = io.StringIO()
        sink = ConsoleSink(stream)

        sink.emit("first")
        sink.emit("second")

        assert stream.getvalue() == "first\nsecond\n"

    def test_defaults_to_current_stdout(self, capsys):
        ConsoleSink().emit("hello")

        assert capsys.readouterr().out == "hello\n"


class TestRecordingSink:
    def test_records_and_clears(self):
        sink = RecordingSink()
        sink.emit("a")
        sink.emit("b")

        assert sink.lines == ["a", "b"]
        assert sink.text == "a\nb"

        sink.clear()
        assert sink.lines == []


def test_resolve_sink_prefers_injected_sink():
    injected = RecordingSink()

    assert resolve_sink(injected) is injected
    assert resolve_sink(None) is get_default_sink()
    assert isinstance(get_default_sink(), ConsoleSink)
