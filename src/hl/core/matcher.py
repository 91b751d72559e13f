"""Regex-based span matching for a single line."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from hl.core.color import DEFAULT_PALETTE, Palette
from hl.exceptions import PatternError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Span:
    """A matched character range of a line.

    Attributes:
        start: Start position in the line
        end: End position in the line (exclusive)
        color: Color of the binding that produced the match
    """

    start: int
    end: int
    color: str

    def contains(self, position: int) -> bool:
        """Check if the span covers a character position."""
        return self.start <= position < self.end

    def __len__(self) -> int:
        return self.end - self.start


@dataclass
class PatternBinding:
    """A color and the compiled patterns that paint it."""

    color: str
    patterns: list[re.Pattern[str]] = field(default_factory=list)


class Matcher:
    """Finds every occurrence of every bound pattern in a line."""

    def __init__(
        self,
        bindings: Iterable[tuple[str, str]] = (),
        palette: Palette = DEFAULT_PALETTE,
        ignore_case: bool = False,
    ) -> None:
        """Initialize matcher and compile all patterns.

        Args:
            bindings: (color, pattern) pairs in the order they were given
            palette: Color table the colors must belong to
            ignore_case: Compile patterns case-insensitively

        Raises:
            UnknownColorError: If a color is not bindable in the palette
            PatternError: If a pattern fails to compile
        """
        self.palette = palette
        self.flags = re.IGNORECASE if ignore_case else 0
        self._bindings: dict[str, PatternBinding] = {}

        for color, pattern in bindings:
            self.add(color, pattern)

    def add(self, color: str, pattern: str) -> None:
        """Bind one more pattern to a color."""
        self.palette.check_bindable(color)

        try:
            compiled = re.compile(pattern, self.flags)
        except re.error as e:
            raise PatternError(f"Invalid pattern {pattern!r}: {e}") from e

        if color not in self._bindings:
            self._bindings[color] = PatternBinding(color)
        self._bindings[color].patterns.append(compiled)
        logger.debug("Bound %r to %s", pattern, color)

    @property
    def bindings(self) -> list[PatternBinding]:
        """Pattern bindings, one per color, in first-bound order."""
        return list(self._bindings.values())

    def find_spans(self, line: str) -> list[Span]:
        """Find all matches of all patterns in a line.

        Args:
            line: Line text without its terminator

        Returns:
            Spans sorted by start position. Empty matches are skipped since
            they cover no character.
        """
        spans: list[Span] = []

        for binding in self._bindings.values():
            for pattern in binding.patterns:
                for match in pattern.finditer(line):
                    start, end = match.span()
                    if start < end:
                        spans.append(Span(start, end, binding.color))

        spans.sort(key=lambda s: s.start)
        return spans
