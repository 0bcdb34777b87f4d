"""
Character interval bookkeeping for overlapping lexical patterns.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """Half-open character range `[start, end)` within a line."""

    start: int
    end: int

    def overlaps(self, other: Span) -> bool:
        return self.start < other.end and other.start < self.end


class SpanSet:
    """
    A set of consumed spans with an overlap query.

    Spans are kept sorted by start so `overlaps()` can stop early.
    """

    def __init__(self) -> None:
        self._spans: list[Span] = []

    def __len__(self) -> int:
        return len(self._spans)

    def __iter__(self):
        return iter(self._spans)

    def add(self, start: int, end: int) -> None:
        if end <= start:
            return
        bisect.insort(self._spans, Span(start, end))

    def overlaps(self, start: int, end: int) -> bool:
        if end <= start:
            return False
        probe = Span(start, end)
        for span in self._spans:
            if span.start >= end:
                break
            if span.overlaps(probe):
                return True
        return False
