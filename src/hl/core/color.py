"""ANSI color table used for highlighting."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from hl.exceptions import UnknownColorError

# Standard ANSI color names
COLORS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}

# Text attributes
ATTRIBUTES = {
    "bold": 1,
    "underline": 4,
}

# Pseudo-colors: unstyled text and text claimed by more than one color
RESET = "reset"
OVERLAP = "overlap"


@dataclass(frozen=True)
class Style:
    """Display style of one color table entry.

    Attributes:
        fg: Foreground color index (0-7) or None for the terminal default
        bold: Bold attribute
        underline: Underline attribute
    """

    fg: int | None = None
    bold: bool = False
    underline: bool = False

    def to_ansi(self) -> str:
        """Convert to ANSI escape sequence."""
        codes: list[int] = []

        if self.fg is not None:
            codes.append(30 + self.fg)

        if self.bold:
            codes.append(ATTRIBUTES["bold"])
        if self.underline:
            codes.append(ATTRIBUTES["underline"])

        # An empty style resets every attribute
        if not codes:
            codes.append(0)

        return f"\033[{';'.join(str(c) for c in codes)}m"


class Palette(Mapping[str, str]):
    """Immutable mapping of color names to escape sequences.

    The palette always contains the eight standard colors plus the ``reset``
    and ``overlap`` pseudo-colors. Only the standard colors may be bound to
    patterns.
    """

    def __init__(self, styles: Mapping[str, Style]) -> None:
        if RESET not in styles or OVERLAP not in styles:
            raise ValueError("palette requires 'reset' and 'overlap' entries")
        self._escapes = MappingProxyType({name: style.to_ansi() for name, style in styles.items()})

    @classmethod
    def default(cls) -> Palette:
        """Build the standard palette."""
        styles = {name: Style(fg=index) for name, index in COLORS.items()}
        styles[RESET] = Style()
        styles[OVERLAP] = Style(fg=COLORS["white"], bold=True, underline=True)
        return cls(styles)

    def __getitem__(self, name: str) -> str:
        return self._escapes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._escapes)

    def __len__(self) -> int:
        return len(self._escapes)

    @property
    def reset(self) -> str:
        """Escape sequence that clears all styling."""
        return self._escapes[RESET]

    @property
    def bindable(self) -> list[str]:
        """Names that patterns may be bound to."""
        return [name for name in self._escapes if name not in (RESET, OVERLAP)]

    def check_bindable(self, name: str) -> str:
        """Return ``name`` if patterns may be bound to it.

        Raises:
            UnknownColorError: If the name is not a bindable color. Names are
                case-sensitive.
        """
        if name not in self._escapes or name in (RESET, OVERLAP):
            raise UnknownColorError(
                f"Unrecognized color {name!r}",
                hint=f"Valid colors: {', '.join(self.bindable)}",
            )
        return name


DEFAULT_PALETTE = Palette.default()
