"""Command line entry point for decomment.

Usage:
    decomment PATH [--verbose]
    python -m decomment PATH

Reads PATH as UTF-8 (line endings untouched), strips its comments and
writes the result to stdout as UTF-8 bytes with no trailing newline added.
Arguments after PATH are ignored; put ``--`` before a path that starts
with ``-``. A missing argument or an unreadable file is reported on
stderr with exit status 1.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from decomment import __version__, strip_comments
from decomment.errors import DecommentError, SourceReadError, UsageError
from decomment.utils.logger import configure_stderr_logging, get_logger

logger = get_logger(__name__)

MISSING_PATH_MESSAGE = "Please specify a source file as the first argument."


def read_source(path: str) -> str:
    """Read a source file fully, without newline translation.

    Raises:
        SourceReadError: If the file cannot be opened or is not valid UTF-8
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise SourceReadError(path, str(e)) from e
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"{path}: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decomment",
        description="Strip // and /* */ comments from a source file",
    )
    # Optional here so a missing path gets our own message and exit status
    parser.add_argument("path", nargs="?", help="Source file to strip")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(path: str | None) -> str:
    """Read path and return its stripped contents.

    Raises:
        UsageError: If no path was given
        SourceReadError: If the file cannot be read
    """
    if path is None:
        raise UsageError(MISSING_PATH_MESSAGE)

    source = read_source(path)
    logger.debug("Read %d characters from %s", len(source), path)
    result = strip_comments(source)
    logger.debug("Wrote %d characters", len(result))
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    # Arguments after the path are ignored
    args, extra = build_parser().parse_known_args(argv)
    if args.verbose:
        configure_stderr_logging()
    if extra:
        logger.debug("Ignoring extra arguments: %s", extra)

    try:
        result = run(args.path)
    except DecommentError as e:
        sys.stderr.write(f"{e}\n")
        return 1

    # Bytes, so the text layer can neither re-encode nor translate newlines
    sys.stdout.buffer.write(result.encode("utf-8"))
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
