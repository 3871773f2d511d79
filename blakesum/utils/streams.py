"""Input streams: named files and standard input, read whole."""

import sys
from pathlib import Path
from typing import BinaryIO, Iterator, Sequence

from blakesum.models.manifest import StreamItem
from blakesum.utils.logging import logger

STDIN_PATH = "-"


def read_stdin(stdin: BinaryIO | None = None) -> bytes:
    """Read standard input (or the given binary stream) to the end."""
    stream = stdin if stdin is not None else sys.stdin.buffer
    return stream.read()


def read_file(path: str) -> bytes:
    """Read a named file fully; "-" is an ordinary file name here."""
    content = Path(path).read_bytes()
    logger.debug(f"Read {len(content)} bytes from {path}")
    return content


def read_path(path: str, stdin: BinaryIO | None = None) -> bytes:
    """Read one input fully.

    Args:
        path: File path, or "-" for standard input.
        stdin: Binary stream standing in for standard input.

    Returns:
        Complete content.

    Raises:
        OSError: If the file does not exist or cannot be read.
    """
    if path != STDIN_PATH:
        return read_file(path)
    content = read_stdin(stdin)
    logger.debug(f"Read {len(content)} bytes from standard input")
    return content


def open_streams(
    paths: Sequence[str],
    stdin: BinaryIO | None = None,
) -> Iterator[StreamItem]:
    """Yield inputs in command-line order.

    An empty path list means standard input only. Each input is read
    only when the consumer asks for it, so a read error surfaces after
    the preceding items have been handled; it is not caught here.

    Args:
        paths: Positional arguments; "-" denotes standard input.
        stdin: Binary stream standing in for standard input.

    Yields:
        StreamItem per input.
    """
    if not paths:
        yield StreamItem(STDIN_PATH, read_path(STDIN_PATH, stdin))
        return

    for path in paths:
        yield StreamItem(path, read_path(path, stdin))
