"""Line driver: read, match, segment and render until end of input."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from hl.core.renderer import Renderer
from hl.core.segmenter import segment_line
from hl.exceptions import StreamReadError

if TYPE_CHECKING:
    from hl.core.matcher import Matcher

logger = logging.getLogger(__name__)


def highlight_line(line: str, matcher: Matcher, renderer: Renderer) -> str:
    """Highlight a single line that has no terminator."""
    spans = matcher.find_spans(line)
    segments = segment_line(len(line), spans)
    return renderer.render(line, segments)


def strip_newline(line: str) -> str:
    """Remove exactly one trailing newline, if present."""
    if line.endswith("\n"):
        return line[:-1]
    return line


def highlight_stream(
    source: TextIO,
    output: TextIO,
    matcher: Matcher,
    renderer: Renderer,
) -> int:
    """Highlight every line of ``source`` onto ``output``.

    Each rendered line is followed by a single newline, including a final
    input line that had none.

    Args:
        source: Input stream, read line by line
        output: Output stream
        matcher: Matcher holding the pattern bindings
        renderer: Renderer for the segments

    Returns:
        Number of lines processed

    Raises:
        StreamReadError: If reading fails before end of input
    """
    count = 0
    lines = iter(source)

    while True:
        try:
            line = next(lines)
        except StopIteration:
            break
        except (OSError, UnicodeError) as e:
            raise StreamReadError(f"Error reading input: {e}") from e

        output.write(highlight_line(strip_newline(line), matcher, renderer))
        output.write("\n")
        count += 1

    logger.debug("Processed %d lines", count)
    return count
