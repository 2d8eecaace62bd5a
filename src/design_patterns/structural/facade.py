"""Facade - one download call hiding an HTTP client, a file writer and an activity log."""

from typing import Optional

from design_patterns.infrastructure.output import OutputSink, resolve_sink


class HttpClient:
    def get(self, url: str) -> str:
        return f"SERVER DATA from {url}"


class FileWriter:
    def __init__(self, output: Optional[OutputSink] = None):
        self._output = resolve_sink(output)

    def write(self, path: str, data: str) -> None:
        self._output.emit(f"Writing to {path}: {data}")


class ActivityLog:
    """User-facing progress messages, prefixed like a log."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._output = resolve_sink(output)

    def info(self, msg: str) -> None:
        self._output.emit(f"[INFO] {msg}")


class FileDownloaderFacade:
    """Single entry point for downloading a URL to a local path."""

    def __init__(self, output: Optional[OutputSink] = None):
        self._http = HttpClient()
        self._file_writer = FileWriter(output)
        self._activity = ActivityLog(output)

    def download(self, url: str, save_path: str) -> str:
        """Fetch ``url``, save it to ``save_path`` and return the data."""
        self._activity.info("Starting download")

        data = self._http.get(url)
        self._activity.info(f"Downloaded {len(data)} bytes")

        self._file_writer.write(save_path, data)
        self._activity.info("File saved")
        return data
