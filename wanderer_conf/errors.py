"""Exceptions raised by the config bootstrapper."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class BootstrapError(Exception):
    """Base class for every failure reported to the operator."""


class NotFoundError(BootstrapError, FileNotFoundError):
    """A template or config file (or its directory) does not exist."""

    def __init__(self, path: Path, what: str = "file") -> None:
        self.path = Path(path)
        super().__init__(f"{what} not found: {self.path}")


class NotWritableError(BootstrapError, PermissionError):
    """The destination cannot be written."""

    def __init__(self, path: Path, reason: str = "permission denied") -> None:
        self.path = Path(path)
        super().__init__(f"cannot write {self.path}: {reason}")


class NotReadableError(BootstrapError, OSError):
    """The config file exists but cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"cannot read {self.path}: {reason}")


class PatternNotFoundError(BootstrapError, LookupError):
    """No line starts with ``KEY=``."""

    def __init__(self, key: str, path: Optional[Path] = None) -> None:
        self.key = key
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"no line starting with '{key}='{where}")


class DuplicateKeyError(BootstrapError, ValueError):
    """More than one line starts with ``KEY=``."""

    def __init__(self, key: str, count: int, path: Optional[Path] = None) -> None:
        self.key = key
        self.count = count
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"'{key}=' appears {count} times{where}; expected at most once")
