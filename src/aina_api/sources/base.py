"""
sources/base.py — Abstract base class for the static data readers.

Each concrete source must implement:
  extract()    — read the raw file (or embedded data) into memory
  transform()  — turn the raw structure into a list of domain models,
                 dropping malformed records

The run() method orchestrates extract → transform and handles
timing/logging. Services call run() rather than the individual methods.
Nothing is memoized: every call re-reads the source.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Generic, TypeVar

import structlog

log = structlog.get_logger(__name__)

T = TypeVar("T")


class SourceNotFoundError(FileNotFoundError):
    """The configured source file does not exist."""


class SourceFormatError(ValueError):
    """The source file exists but does not have the expected structure."""


class SchemaDriftError(SourceFormatError):
    """A tabular file's header no longer matches the expected column map."""

    def __init__(self, path: Path, drifted: dict[int, tuple[str, str | None]]) -> None:
        self.path = path
        self.drifted = drifted
        described = ", ".join(
            f"column {idx}: expected {expected!r}, found {found!r}"
            for idx, (expected, found) in sorted(drifted.items())
        )
        super().__init__(f"Schema drift in {path.name}: {described}")


class StaticSource(ABC, Generic[T]):
    """Abstract base for file-backed dashboard data sources."""

    # Override in subclass; used for logging
    name: str = "unknown"

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        self._log = log.bind(source_name=self.name)

    @abstractmethod
    def extract(self) -> Any:
        """Read the raw source. Raises SourceNotFoundError / SourceFormatError."""
        ...

    @abstractmethod
    def transform(self, raw: Any) -> list[T]:
        """Convert raw data into models, skipping records that fail to parse."""
        ...

    def check(self) -> None:
        """Verify the source is readable and well-formed without transforming it."""
        self.extract()

    def run(self) -> list[T]:
        """
        Extract + transform with timing and structured logging.

        Raises:
            Any exception from extract() or transform() after logging it.
        """
        run_log = self._log.bind(path=str(self.path) if self.path else None)
        t0 = time.monotonic()
        try:
            raw = self.extract()
            result = self.transform(raw)
        except Exception as exc:
            run_log.error(
                "source_read_failed",
                error=str(exc),
                duration_ms=int((time.monotonic() - t0) * 1000),
            )
            raise
        run_log.info(
            "source_read_complete",
            records=len(result),
            duration_ms=int((time.monotonic() - t0) * 1000),
        )
        return result

    def _require_file(self) -> Path:
        if self.path is None or not self.path.is_file():
            raise SourceNotFoundError(f"{self.name} file not found: {self.path}")
        return self.path
