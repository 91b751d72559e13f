"""Tests for the line driver."""

import io

import pytest

from hl.core.color import DEFAULT_PALETTE
from hl.core.driver import highlight_line, highlight_stream, strip_newline
from hl.core.matcher import Matcher
from hl.core.renderer import Renderer
from hl.exceptions import StreamReadError

BLUE = DEFAULT_PALETTE["blue"]
OVERLAP = DEFAULT_PALETTE["overlap"]
RED = DEFAULT_PALETTE["red"]
RESET = DEFAULT_PALETTE["reset"]


class TestStripNewline:
    """Tests for strip_newline."""

    def test_strips_one_newline(self):
        assert strip_newline("abc\n") == "abc"
        assert strip_newline("abc\n\n") == "abc\n"

    def test_no_newline(self):
        assert strip_newline("abc") == "abc"
        assert strip_newline("") == ""


class TestHighlightLine:
    """Tests for highlight_line."""

    def test_overlap_example(self, red_blue_matcher, renderer):
        """Test red=abc blue=cde on abcdef."""
        result = highlight_line("abcdef", red_blue_matcher, renderer)

        assert result == f"{RED}ab{RESET}{OVERLAP}c{RESET}{BLUE}de{RESET}{RESET}f{RESET}"

    def test_no_bindings(self, renderer):
        """Test that a line is wrapped once in reset codes."""
        assert highlight_line("hello", Matcher(), renderer) == f"{RESET}hello{RESET}"


class TestHighlightStream:
    """Tests for highlight_stream."""

    def test_lines_in_order(self, red_blue_matcher, renderer):
        """Test that each input line gives one output line."""
        source = io.StringIO("abc\nxyz\n")
        output = io.StringIO()

        count = highlight_stream(source, output, red_blue_matcher, renderer)

        assert count == 2
        assert output.getvalue() == f"{RED}abc{RESET}\n{RESET}xyz{RESET}\n"

    def test_last_line_without_newline(self, renderer):
        """Test that a final unterminated line is still processed."""
        source = io.StringIO("one\ntwo")
        output = io.StringIO()

        count = highlight_stream(source, output, Matcher([("red", "two")]), renderer)

        assert count == 2
        assert output.getvalue() == f"{RESET}one{RESET}\n{RED}two{RESET}\n"

    def test_empty_lines(self, renderer):
        """Test that empty lines become bare newlines."""
        output = io.StringIO()

        highlight_stream(io.StringIO("\n\n"), output, Matcher(), renderer)

        assert output.getvalue() == "\n\n"

    def test_empty_input(self, renderer):
        """Test that end of input right away is success."""
        output = io.StringIO()

        assert highlight_stream(io.StringIO(""), output, Matcher(), renderer) == 0
        assert output.getvalue() == ""

    def test_read_error(self, renderer):
        """Test that an I/O failure aborts with StreamReadError."""

        def failing_source():
            yield "first\n"
            raise OSError("device went away")

        output = io.StringIO()

        with pytest.raises(StreamReadError) as exc_info:
            highlight_stream(failing_source(), output, Matcher(), renderer)

        assert "device went away" in str(exc_info.value)
        assert output.getvalue() == f"{RESET}first{RESET}\n"
