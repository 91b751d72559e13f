"""Split a line into contiguous, non-overlapping colored segments."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Collection, Iterable
from dataclasses import dataclass

from hl.core.color import OVERLAP, RESET
from hl.core.matcher import Span


@dataclass(frozen=True)
class Segment:
    """A maximal run of characters sharing one resolved color.

    Attributes:
        start: Start position in the line
        end: End position in the line (exclusive)
        color: Resolved color, including ``reset`` and ``overlap``
    """

    start: int
    end: int
    color: str

    def __len__(self) -> int:
        return self.end - self.start

    def as_span(self) -> Span:
        """Convert to a span carrying the resolved color."""
        return Span(self.start, self.end, self.color)

    def __str__(self) -> str:
        return f"({self.start}, {self.end}, {self.color})"


def resolve_color(colors: Collection[str]) -> str:
    """Resolve the distinct colors covering a position to one color."""
    if not colors:
        return RESET
    if len(colors) == 1:
        return next(iter(colors))
    return OVERLAP


def segment_line(length: int, spans: Iterable[Span]) -> list[Segment]:
    """Partition ``[0, length)`` into segments.

    Sweeps the span boundaries left to right with a per-color counter of open
    spans. Spans of the same color are counted once per position, so only
    distinct colors can produce an overlap.

    Args:
        length: Length of the line
        spans: Matched spans, in any order

    Returns:
        Segments in left-to-right order covering every position exactly
        once. A zero-length line has no segments.
    """
    if length <= 0:
        return []

    deltas: dict[int, Counter[str]] = defaultdict(Counter)
    boundaries = {0, length}

    for span in spans:
        start = max(span.start, 0)
        end = min(span.end, length)
        if start >= end:
            continue
        deltas[start][span.color] += 1
        deltas[end][span.color] -= 1
        boundaries.update((start, end))

    ordered = sorted(boundaries)
    active: Counter[str] = Counter()
    segments: list[Segment] = []

    for start, end in zip(ordered, ordered[1:]):
        for color, delta in deltas.get(start, {}).items():
            active[color] += delta
            if active[color] == 0:
                del active[color]

        color = resolve_color(active.keys())

        # Coalesce with the previous run when the color does not change
        if segments and segments[-1].color == color:
            segments[-1] = Segment(segments[-1].start, end, color)
        else:
            segments.append(Segment(start, end, color))

    return segments
