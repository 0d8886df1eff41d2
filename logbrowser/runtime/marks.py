"""Mark ring: saved viewport offsets with a cyclic cursor.

This module has no UI concerns. Marks live only for the current session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .viewport import Coords

logger = logging.getLogger(__name__)

NO_MARK = -1


@dataclass(frozen=True)
class Mark:
    """Snapshot of a viewport offset; ``note`` is reserved and always empty."""

    coords: Coords
    note: str = ""


class MarkRing:
    """Append-only marks with next/previous cursor semantics.

    ``current`` is ``NO_MARK`` until the first mark is set, and a valid index
    afterwards. Cycling on an empty ring is a no-op.
    """

    def __init__(self) -> None:
        self.marks: list[Mark] = []
        self.current = NO_MARK

    def __len__(self) -> int:
        return len(self.marks)

    def set_mark(self, offset: Coords) -> Mark:
        """Append a mark for ``offset`` and advance the cursor once."""
        mark = Mark(coords=Coords(offset.x, offset.y))
        self.marks.append(mark)
        self.next()
        logger.debug("mark %d set at %s (cursor=%d)", len(self.marks) - 1, mark.coords, self.current)
        return mark

    def next(self) -> None:
        if not self.marks:
            return
        self.current += 1
        if self.current >= len(self.marks):
            self.current = 0

    def previous(self) -> None:
        if not self.marks:
            return
        self.current -= 1
        if self.current < 0:
            self.current = len(self.marks) - 1

    def recall(self) -> Mark | None:
        """Return the mark under the cursor, or ``None`` when none is selected."""
        if self.current == NO_MARK:
            return None
        return self.marks[self.current]
