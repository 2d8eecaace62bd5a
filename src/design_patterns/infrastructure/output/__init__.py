"""Output sinks that demo routines and pattern examples write to."""

from .sink import ConsoleSink, OutputSink, RecordingSink, get_default_sink, resolve_sink

__all__ = ["OutputSink", "ConsoleSink", "RecordingSink", "get_default_sink", "resolve_sink"]
