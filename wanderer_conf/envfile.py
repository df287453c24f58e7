"""
Line-preserving reader and writer for flat ``KEY=VALUE`` files.

The file is handled as raw bytes so that lines the tooling does not touch are
written back exactly as they were read, line endings included.
"""
from __future__ import annotations

import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import (
    DuplicateKeyError,
    NotFoundError,
    NotReadableError,
    NotWritableError,
    PatternNotFoundError,
)

ENCODING = "utf-8"


def _split_ending(line: bytes) -> tuple[bytes, bytes]:
    if line.endswith(b"\r\n"):
        return line[:-2], b"\r\n"
    if line.endswith((b"\n", b"\r")):
        return line[:-1], line[-1:]
    return line, b""


@dataclass(frozen=True)
class EnvFile:
    """Immutable snapshot of a config file's lines (each keeps its own ending)."""

    lines: tuple[bytes, ...] = ()
    path: Optional[Path] = None

    @classmethod
    def parse(cls, data: bytes, path: Optional[Path] = None) -> "EnvFile":
        return cls(tuple(data.splitlines(keepends=True)), path)

    @classmethod
    def load(cls, path: Path) -> "EnvFile":
        """Read ``path``; raises NotFoundError when it does not exist."""
        path = Path(path)
        try:
            data = path.read_bytes()
        except FileNotFoundError as exc:
            raise NotFoundError(path, "config file") from exc
        except IsADirectoryError as exc:
            raise NotReadableError(path, "is a directory") from exc
        except PermissionError as exc:
            raise NotReadableError(path, "permission denied") from exc
        return cls.parse(data, path)

    def __len__(self) -> int:
        return len(self.lines)

    def find(self, key: str) -> list[int]:
        """Indexes of the lines that start with ``key=``."""
        prefix = f"{key}=".encode(ENCODING)
        return [index for index, line in enumerate(self.lines) if line.startswith(prefix)]

    def get(self, key: str) -> Optional[str]:
        """
        Value of the first ``key=`` line, or None when the key is absent.

        Bytes that are not valid UTF-8 survive as surrogate escapes.
        """
        matches = self.find(key)
        if not matches:
            return None
        content, _ = _split_ending(self.lines[matches[0]])
        return content.decode(ENCODING, errors="surrogateescape").partition("=")[2]

    def replace(self, key: str, value: str) -> "EnvFile":
        """Return a copy with the single ``key=`` line rewritten to ``key=value``."""
        matches = self.find(key)
        if not matches:
            raise PatternNotFoundError(key, self.path)
        if len(matches) > 1:
            raise DuplicateKeyError(key, len(matches), self.path)

        index = matches[0]
        _, ending = _split_ending(self.lines[index])
        new_line = f"{key}={value}".encode(ENCODING) + ending
        lines = self.lines[:index] + (new_line,) + self.lines[index + 1 :]
        return EnvFile(lines, self.path)

    def dump(self) -> bytes:
        return b"".join(self.lines)

    def save(self, path: Optional[Path] = None) -> Path:
        """Write to a sibling temp file, then rename it over the target."""
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("EnvFile has no path to save to")
        if target.is_dir():
            raise NotWritableError(target, "is a directory")

        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
        except PermissionError as exc:
            raise NotWritableError(target) from exc
        except FileNotFoundError as exc:
            raise NotFoundError(target.parent, "directory") from exc

        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(self.dump())
            if target.exists():
                shutil.copymode(target, tmp_name)
            os.replace(tmp_name, target)
        except PermissionError as exc:
            os.unlink(tmp_name)
            raise NotWritableError(target) from exc
        except BaseException:
            os.unlink(tmp_name)
            raise
        return target
