"""Hex rendering of digest words."""

from typing import Iterable


def format_digest(words: Iterable[int], word_bits: int) -> str:
    """Render digest words as one lowercase hex string.

    Each word is zero padded to ``word_bits // 4`` characters and the
    words are concatenated in order with no separator.

    Args:
        words: Unsigned integers of ``word_bits`` width.
        word_bits: Word width, 32 or 64.

    Returns:
        Hex digest string.
    """
    width = word_bits // 4
    return "".join(f"{word:0{width}x}" for word in words)
