"""Append-only sinks for human-readable progress lines."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import Protocol


class LineSink(Protocol):
    def append(self, line: str) -> None:
        """Record one line of progress text."""


class FileLineSink:
    """Write one line per call to a file, truncating it on open."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = self._path.open("w", encoding="utf-8")

    @property
    def path(self) -> Path:
        return self._path

    def append(self, line: str) -> None:
        self._handle.write(line)
        self._handle.write("\n")
        self._handle.flush()

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()

    def __enter__(self) -> "FileLineSink":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class MemoryLineSink:
    def __init__(self) -> None:
        self.lines: list[str] = []

    def append(self, line: str) -> None:
        self.lines.append(line)
