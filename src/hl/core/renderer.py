"""Render segments as ANSI-colored text."""

from __future__ import annotations

from collections.abc import Iterable

from hl.core.color import DEFAULT_PALETTE, Palette
from hl.core.segmenter import Segment


class Renderer:
    """Wraps each segment of a line in its color escape and a reset."""

    def __init__(self, palette: Palette = DEFAULT_PALETTE, color: bool = True) -> None:
        """Initialize the renderer.

        Args:
            palette: Color table used for escape sequences
            color: Emit escape sequences; when False only the text is written
        """
        self.palette = palette
        self.color = color

    def render(self, line: str, segments: Iterable[Segment]) -> str:
        """Render one line, without its terminator.

        Args:
            line: Original line text
            segments: Gapless segments covering the line, in order

        Returns:
            The colored line
        """
        if not self.color:
            return "".join(line[s.start : s.end] for s in segments)

        parts: list[str] = []
        for segment in segments:
            parts.append(self.palette[segment.color])
            parts.append(line[segment.start : segment.end])
            parts.append(self.palette.reset)

        return "".join(parts)
