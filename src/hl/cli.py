"""Command-line interface for hl."""

from __future__ import annotations

import argparse
import io
import logging
import os
import re
import sys
from pathlib import Path
from typing import TextIO

from hl import __version__
from hl.config.loader import load_config
from hl.core.color import DEFAULT_PALETTE
from hl.core.driver import highlight_stream
from hl.core.matcher import Matcher
from hl.core.renderer import Renderer
from hl.exceptions import ArgumentError, HlError, InputOpenError

logger = logging.getLogger(__name__)

BINDING_RE = re.compile(r"-(\w+)=(.*)", re.DOTALL)

ENCODING = "utf-8"
ERRORS = "surrogateescape"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def parse_args(args: list[str] | None = None) -> tuple[argparse.Namespace, list[str]]:
    """Parse command-line arguments.

    Options are handled by argparse. Everything it does not recognize is
    left, in order, for :func:`parse_bindings`.

    Args:
        args: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed options and the remaining binding/file arguments
    """
    parser = argparse.ArgumentParser(
        prog="hl",
        usage="%(prog)s [options] [-COLOR=PATTERN ...] [FILE]",
        description="Highlight regular expression matches in colors",
        epilog=f"Colors: {', '.join(DEFAULT_PALETTE.bindable)}. "
        "Example: tail -f app.log | hl -red=ERROR -yellow=WARN",
        allow_abbrev=False,
    )

    # Only long options here: a short one such as -c would swallow -cyan=...
    parser.add_argument(
        "--config",
        type=Path,
        metavar="FILE",
        help="Configuration file path (default: ~/.config/hl/config.yaml)",
    )

    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Match all patterns case-insensitively",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colors",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debugging information to stderr",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_known_args(args)


def parse_bindings(args: list[str]) -> tuple[list[tuple[str, str]], Path | None]:
    """Split arguments into color bindings and an optional input file.

    Args:
        args: Arguments of the form -COLOR=PATTERN, optionally followed by a
            file path

    Returns:
        (color, pattern) pairs in argument order, and the file path or None

    Raises:
        ArgumentError: If a non-final argument is not a binding
    """
    bindings: list[tuple[str, str]] = []
    path: Path | None = None

    for i, arg in enumerate(args):
        match = BINDING_RE.fullmatch(arg)

        if match is None:
            if i != len(args) - 1:
                raise ArgumentError(
                    f"Invalid argument {arg!r}",
                    hint="Bindings look like -COLOR=PATTERN; the input file must come last",
                )
            path = Path(arg)
            break

        logger.debug("Parts: %s", match.groups())
        bindings.append((match.group(1), match.group(2)))

    return bindings, path


def open_input(path: Path) -> TextIO:
    """Open the input file for reading.

    Lines end at ``\\n`` only and undecodable bytes are kept as surrogates,
    so every byte of the file reaches the output unchanged.
    """
    try:
        return open(path, encoding=ENCODING, errors=ERRORS, newline="\n")
    except OSError as e:
        raise InputOpenError(f"Cannot open {path}: {e.strerror or e}") from e


def prepare_stdio() -> None:
    """Give stdin and stdout the same byte-preserving decoding as files."""
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(encoding=ENCODING, errors=ERRORS, newline="\n")
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding=ENCODING, errors=ERRORS)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def run(parsed: argparse.Namespace, extra: list[str]) -> int:
    """Set up from the parsed arguments and highlight the input."""
    config = load_config(parsed.config)
    bindings, path = parse_bindings(extra)

    matcher = Matcher(
        config.binding_pairs() + bindings,
        ignore_case=parsed.ignore_case or config.ignore_case,
    )
    renderer = Renderer(color=config.color and not parsed.no_color)
    prepare_stdio()

    if path is None:
        logger.debug("Reading standard input")
        highlight_stream(sys.stdin, sys.stdout, matcher, renderer)
    else:
        logger.debug("Reading %s", path)
        with open_input(path) as source:
            highlight_stream(source, sys.stdout, matcher, renderer)

    sys.stdout.flush()
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    parsed, extra = parse_args(args)
    configure_logging(parsed.verbose)

    try:
        return run(parsed, extra)

    except HlError as e:
        print(f"hl: error: {e}", file=sys.stderr)
        if e.hint:
            print(e.hint, file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED
    except BrokenPipeError:
        # Reader went away (e.g. `| head`); silence the flush at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
