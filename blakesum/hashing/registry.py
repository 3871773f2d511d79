"""Supported BLAKE variants and their word layouts."""

from dataclasses import dataclass
from enum import Enum

from blakesum.errors import ConfigError


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """Word layout of one BLAKE variant."""

    bits: int
    word_bits: int  # 32 or 64
    word_count: int  # digest words

    @property
    def hex_length(self) -> int:
        """Length of the hex digest in characters."""
        return self.word_count * (self.word_bits // 4)

    @property
    def block_bytes(self) -> int:
        """Size of one compression block in bytes."""
        return self.word_bits * 2

    @property
    def rounds(self) -> int:
        """Number of rounds of the compression function."""
        return 14 if self.word_bits == 32 else 16

    @property
    def mask(self) -> int:
        return (1 << self.word_bits) - 1


class Algorithm(Enum):
    """Closed set of BLAKE variants, each carrying its descriptor."""

    BLAKE224 = AlgorithmDescriptor(bits=224, word_bits=32, word_count=7)
    BLAKE256 = AlgorithmDescriptor(bits=256, word_bits=32, word_count=8)
    BLAKE384 = AlgorithmDescriptor(bits=384, word_bits=64, word_count=6)
    BLAKE512 = AlgorithmDescriptor(bits=512, word_bits=64, word_count=8)

    @property
    def descriptor(self) -> AlgorithmDescriptor:
        return self.value

    @property
    def bits(self) -> int:
        return self.value.bits

    def __str__(self) -> str:
        return f"BLAKE-{self.value.bits}"


_BY_BITS = {algorithm.bits: algorithm for algorithm in Algorithm}


def available_sizes() -> list[int]:
    """Return the selectable digest sizes in bits, ascending."""
    return sorted(_BY_BITS)


def resolve(bits: int) -> Algorithm:
    """Look up the algorithm for a digest size.

    Args:
        bits: Requested digest size in bits.

    Returns:
        Matching Algorithm.

    Raises:
        ConfigError: If no BLAKE variant has that size.
    """
    try:
        return _BY_BITS[bits]
    except (KeyError, TypeError):
        sizes = ", ".join(str(size) for size in available_sizes())
        raise ConfigError(
            f"unavailable algorithm size: {bits} (choose one of {sizes})"
        ) from None
