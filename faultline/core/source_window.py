"""Extraction of a few lines of source around a target line."""

from __future__ import annotations

import io
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, NamedTuple, Optional, Tuple

# Lines shown on each side of the target line.
CONTEXT_LINES = 3


class SourceLine(NamedTuple):
    """A line of source text (without its terminator) and its 1-based number."""

    text: str
    number: int


@dataclass(frozen=True)
class SourceWindow:
    """The target line with up to ``context`` lines on either side."""

    before: Tuple[SourceLine, ...]
    current: SourceLine
    after: Tuple[SourceLine, ...]

    @property
    def lines(self) -> Tuple[SourceLine, ...]:
        return (*self.before, self.current, *self.after)

    @property
    def gutter_width(self) -> int:
        """Digits needed for the largest line number at or below the target.

        Lines before the target always have smaller numbers, so they never
        widen the gutter.
        """
        largest = max(line.number for line in (self.current, *self.after))
        return len(str(largest))


def extract_window(
    source_text: Optional[str],
    line_number: Optional[int],
    context: int = CONTEXT_LINES,
) -> Optional[SourceWindow]:
    """Return the lines around ``line_number``, or ``None`` if there are none.

    The text is scanned once, front to back, keeping only the last
    ``context`` lines seen; the scan stops as soon as ``context`` lines after
    the target have been read. ``None`` is returned when the text is missing
    or empty, or when ``line_number`` is missing or outside ``1..line count``.
    """
    if not source_text or line_number is None or line_number < 1 or context < 0:
        return None

    before: Deque[SourceLine] = deque(maxlen=context)
    current: Optional[SourceLine] = None
    after: List[SourceLine] = []

    for number, raw in enumerate(io.StringIO(source_text), start=1):
        line = SourceLine(raw.rstrip("\r\n"), number)
        if number < line_number:
            before.append(line)
        elif number == line_number:
            current = line
        else:
            after.append(line)
        if current is not None and len(after) >= context:
            break

    if current is None:
        return None
    return SourceWindow(tuple(before), current, tuple(after))


__all__ = ["CONTEXT_LINES", "SourceLine", "SourceWindow", "extract_window"]
