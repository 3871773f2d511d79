"""Digest computation bound to one algorithm and salt."""

from typing import Sequence

from blakesum.hashing.formatter import format_digest
from blakesum.hashing.primitive import blake_hash
from blakesum.hashing.registry import Algorithm
from blakesum.utils.logging import logger


class Hasher:
    """Applies one BLAKE variant with a fixed salt to byte content.

    The salt components are cast to the variant's word width once, at
    construction, so every file of a run is hashed with the same words.
    """

    def __init__(self, algorithm: Algorithm, salt: Sequence[int] = (0, 0, 0, 0)) -> None:
        """Initialize hasher.

        Args:
            algorithm: BLAKE variant to use.
            salt: Four non-negative integers.
        """
        self.algorithm = algorithm
        self.descriptor = algorithm.descriptor
        self.salt_words = cast_salt(salt, self.descriptor.word_bits)
        logger.debug(f"Using {algorithm} with salt {self.salt_words}")

    def digest(self, content: bytes) -> str:
        """Compute the hex digest of content.

        Args:
            content: Complete byte content.

        Returns:
            Lowercase hex digest.
        """
        words = blake_hash(self.descriptor, self.salt_words, content)
        return format_digest(words, self.descriptor.word_bits)


def cast_salt(salt: Sequence[int], word_bits: int) -> tuple[int, ...]:
    """Reduce salt components to unsigned words of ``word_bits`` width."""
    mask = (1 << word_bits) - 1
    return tuple(component & mask for component in salt)


def digest(algorithm: Algorithm, salt: Sequence[int], content: bytes) -> str:
    """Compute a hex digest without keeping a Hasher around."""
    return Hasher(algorithm, salt).digest(content)
