"""Infrastructure layer - logging, output sinks and shared pattern helpers."""
