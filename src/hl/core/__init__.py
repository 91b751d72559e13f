"""Core functionality: color table, matcher, segmenter, renderer and driver."""

from hl.core.color import DEFAULT_PALETTE, OVERLAP, RESET, Palette, Style
from hl.core.driver import highlight_line, highlight_stream
from hl.core.matcher import Matcher, PatternBinding, Span
from hl.core.renderer import Renderer
from hl.core.segmenter import Segment, resolve_color, segment_line

__all__ = [
    "DEFAULT_PALETTE",
    "OVERLAP",
    "RESET",
    "Palette",
    "Style",
    "Matcher",
    "PatternBinding",
    "Span",
    "Segment",
    "resolve_color",
    "segment_line",
    "Renderer",
    "highlight_line",
    "highlight_stream",
]
