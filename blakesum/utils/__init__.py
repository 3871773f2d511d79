"""Utility modules for logging and input streams."""

from blakesum.utils.logging import logger, setup_logging
from blakesum.utils.streams import STDIN_PATH, open_streams, read_file, read_path

__all__ = [
    "logger",
    "setup_logging",
    "STDIN_PATH",
    "open_streams",
    "read_file",
    "read_path",
]
