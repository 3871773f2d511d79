"""Digest mode: hash each input and report it."""

from typing import BinaryIO, Callable

from blakesum.cli.config import RunConfig
from blakesum.hashing.hasher import Hasher
from blakesum.models.manifest import ManifestEntry
from blakesum.utils.logging import logger
from blakesum.utils.streams import open_streams


def format_report_line(hex_digest: str, path: str) -> str:
    """Render one ``<hex> *<path>`` line (no newline)."""
    return ManifestEntry(saved_digest=hex_digest, path=path).to_line()


def print_digests(
    config: RunConfig,
    emit: Callable[[str], None],
    stdin: BinaryIO | None = None,
    hasher: Hasher | None = None,
) -> int:
    """Hash every input of a run in order and emit one line per input.

    Each line is emitted before the next input is read. A read error
    propagates after the lines for the preceding inputs were emitted.

    Args:
        config: Run configuration.
        emit: Receives each report line.
        stdin: Binary stream standing in for standard input.
        hasher: Hasher to use; built from the configuration if omitted.

    Returns:
        Number of lines emitted.
    """
    hasher = hasher or Hasher(config.algorithm, config.salt)
    count = 0

    for item in open_streams(config.paths, stdin):
        emit(format_report_line(hasher.digest(item.content), item.path))
        count += 1

    logger.debug(f"Hashed {count} input(s) with {config.algorithm}")
    return count
