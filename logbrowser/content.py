"""Immutable line store for the file being viewed.

Loads a file once at startup and splits it into display lines.
Nothing in the viewer mutates the store after construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Decode ``path`` as UTF-8, replacing only the invalid bytes.

    A leading byte order mark is dropped. ``OSError`` propagates to the caller.
    """
    return path.read_bytes().decode("utf-8-sig", errors="replace")


def split_lines(text: str) -> tuple[str, ...]:
    """Split ``text`` on ``\\n`` boundaries.

    One trailing ``\\r`` per line is dropped. A final line without terminator is
    kept, and empty input yields no lines.
    """
    if not text:
        return ()
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return tuple(part[:-1] if part.endswith("\r") else part for part in parts)


@dataclass(frozen=True)
class ContentStore:
    """Ordered, read-only sequence of lines."""

    lines: tuple[str, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> ContentStore:
        return cls(lines=split_lines(text))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def load(path: Path) -> ContentStore:
    """Load ``path`` into a ``ContentStore``; raises ``OSError`` on failure."""
    store = ContentStore.from_text(read_text(path))
    logger.debug("loaded %s: %d lines", path, store.line_count)
    return store
