"""hl - colorize regular expression matches in text streams."""

__version__ = "0.1.0"
