"""BLAKE hash function, SHA-3 round 3 parameters.

Implements the four BLAKE variants over whole-byte messages with a
caller-supplied salt of four words:

    BLAKE-224 / BLAKE-256: 32-bit words, 64-byte blocks, 14 rounds
    BLAKE-384 / BLAKE-512: 64-bit words, 128-byte blocks, 16 rounds

Reference: J.-P. Aumasson, L. Henzen, W. Meier, R. C.-W. Phan,
"SHA-3 proposal BLAKE", version 1.3.
"""

import struct
from typing import Sequence

from blakesum.hashing.registry import AlgorithmDescriptor

IV224 = (
    0xC1059ED8, 0x367CD507, 0x3070DD17, 0xF70E5939,
    0xFFC00B31, 0x68581511, 0x64F98FA7, 0xBEFA4FA4,
)

IV256 = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

IV384 = (
    0xCBBB9D5DC1059ED8, 0x629A292A367CD507,
    0x9159015A3070DD17, 0x152FECD8F70E5939,
    0x67332667FFC00B31, 0x8EB44A8768581511,
    0xDB0C2E0D64F98FA7, 0x47B5481DBEFA4FA4,
)

IV512 = (
    0x6A09E667F3BCC908, 0xBB67AE8584CAA73B,
    0x3C6EF372FE94F82B, 0xA54FF53A5F1D36F1,
    0x510E527FADE682D1, 0x9B05688C2B3E6C1F,
    0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179,
)

# Digits of pi
C32 = (
    0x243F6A88, 0x85A308D3, 0x13198A2E, 0x03707344,
    0xA4093822, 0x299F31D0, 0x082EFA98, 0xEC4E6C89,
    0x452821E6, 0x38D01377, 0xBE5466CF, 0x34E90C6C,
    0xC0AC29B7, 0xC97C50DD, 0x3F84D5B5, 0xB5470917,
)

C64 = (
    0x243F6A8885A308D3, 0x13198A2E03707344,
    0xA4093822299F31D0, 0x082EFA98EC4E6C89,
    0x452821E638D01377, 0xBE5466CF34E90C6C,
    0xC0AC29B7C97C50DD, 0x3F84D5B5B5470917,
    0x9216D5D98979FB1B, 0xD1310BA698DFB5AC,
    0x2FFD72DBD01ADFB7, 0xB8E1AFED6A267E96,
    0xBA7C9045F12C7F99, 0x24A19947B3916CF7,
    0x0801F2E2858EFC16, 0x636920D871574E69,
)

SIGMA = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
    (12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11),
    (13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10),
    (6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5),
    (10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0),
)

# Column step then diagonal step, as (a, b, c, d) state indices
_STEPS = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)

_IVS = {224: IV224, 256: IV256, 384: IV384, 512: IV512}
_CONSTANTS = {32: C32, 64: C64}
_ROTATIONS = {32: (16, 12, 8, 7), 64: (32, 25, 16, 11)}
_BLOCK_FORMATS = {32: ">16L", 64: ">16Q"}


def pad_message(message: bytes, descriptor: AlgorithmDescriptor) -> bytes:
    """Append BLAKE padding and the big-endian bit length to a message.

    The padding is a 1 bit, zeros, then a final bit that is 1 for
    BLAKE-256/512 and 0 for BLAKE-224/384, followed by the message
    length in bits as a two-word integer.
    """
    block_bytes = descriptor.block_bytes
    length_bytes = descriptor.word_bits // 4
    marker = 0x01 if descriptor.bits in (256, 512) else 0x00

    pad_len = (block_bytes - length_bytes - len(message) - 1) % block_bytes + 1
    if pad_len == 1:
        padding = bytes([0x80 | marker])
    else:
        padding = b"\x80" + b"\x00" * (pad_len - 2) + bytes([marker])

    bit_length = len(message) * 8
    return message + padding + bit_length.to_bytes(length_bytes, "big")


def _compress(
    chain: list[int],
    block: Sequence[int],
    salt: Sequence[int],
    counter: int,
    descriptor: AlgorithmDescriptor,
) -> list[int]:
    word_bits = descriptor.word_bits
    mask = descriptor.mask
    constants = _CONSTANTS[word_bits]
    r1, r2, r3, r4 = _ROTATIONS[word_bits]

    def rotr(x: int, n: int) -> int:
        return ((x >> n) | (x << (word_bits - n))) & mask

    t_low = counter & mask
    t_high = (counter >> word_bits) & mask
    v = list(chain) + [
        salt[0] ^ constants[0],
        salt[1] ^ constants[1],
        salt[2] ^ constants[2],
        salt[3] ^ constants[3],
        t_low ^ constants[4],
        t_low ^ constants[5],
        t_high ^ constants[6],
        t_high ^ constants[7],
    ]

    for round_index in range(descriptor.rounds):
        sigma = SIGMA[round_index % 10]
        for i, (a, b, c, d) in enumerate(_STEPS):
            x = sigma[2 * i]
            y = sigma[2 * i + 1]

            va = (v[a] + v[b] + (block[x] ^ constants[y])) & mask
            vd = rotr(v[d] ^ va, r1)
            vc = (v[c] + vd) & mask
            vb = rotr(v[b] ^ vc, r2)

            va = (va + vb + (block[y] ^ constants[x])) & mask
            vd = rotr(vd ^ va, r3)
            vc = (vc + vd) & mask
            vb = rotr(vb ^ vc, r4)

            v[a], v[b], v[c], v[d] = va, vb, vc, vd

    return [chain[i] ^ salt[i % 4] ^ v[i] ^ v[i + 8] for i in range(8)]


def blake_hash(
    descriptor: AlgorithmDescriptor,
    salt: Sequence[int],
    message: bytes,
) -> list[int]:
    """Hash a message with one BLAKE variant.

    Args:
        descriptor: Variant to use.
        salt: Four unsigned words of ``descriptor.word_bits`` width.
        message: Complete message.

    Returns:
        ``descriptor.word_count`` digest words.

    Raises:
        ValueError: If the salt is malformed or the message length does
            not fit the variant's bit counter.
    """
    mask = descriptor.mask
    if len(salt) != 4 or any(not 0 <= word <= mask for word in salt):
        raise ValueError(f"salt must be four {descriptor.word_bits}-bit words")

    bit_length = len(message) * 8
    if bit_length >> (2 * descriptor.word_bits):
        raise ValueError(f"message too long for BLAKE-{descriptor.bits}")

    block_bytes = descriptor.block_bytes
    block_format = _BLOCK_FORMATS[descriptor.word_bits]
    padded = pad_message(message, descriptor)
    chain = list(_IVS[descriptor.bits])

    for offset in range(0, len(padded), block_bytes):
        # Blocks holding only padding are compressed with a zero counter
        if offset < len(message):
            counter = min(bit_length, (offset + block_bytes) * 8)
        else:
            counter = 0
        block = struct.unpack(block_format, padded[offset : offset + block_bytes])
        chain = _compress(chain, block, salt, counter, descriptor)

    return chain[: descriptor.word_count]
