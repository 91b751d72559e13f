"""Error types raised by hl.

Every error condition the command line reports derives from
:class:`HlError`, so the CLI can print a one-line diagnostic instead of a
traceback.

Hierarchy
---------
HlError
├── ArgumentError
├── UnknownColorError
├── PatternError
├── ConfigError
├── InputOpenError
└── StreamReadError
"""

from __future__ import annotations


class HlError(Exception):
    """Base exception for all hl errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional guidance printed below the error message."""


# --- Configuration-time errors ---------------------------------------------

class ArgumentError(HlError):
    """Raised for a malformed argument that is not the final one."""


class UnknownColorError(HlError):
    """Raised when a binding names a color missing from the color table."""


class PatternError(HlError):
    """Raised when a pattern is not a valid regular expression."""


class ConfigError(HlError):
    """Raised when the configuration file cannot be parsed or validated."""


class InputOpenError(HlError):
    """Raised when the input file cannot be opened."""


# --- Runtime errors --------------------------------------------------------

class StreamReadError(HlError):
    """Raised when reading the input fails before end of input."""
