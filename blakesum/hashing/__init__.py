"""BLAKE algorithm registry, primitive and digest helpers."""

from blakesum.hashing.formatter import format_digest
from blakesum.hashing.hasher import Hasher, digest
from blakesum.hashing.registry import Algorithm, AlgorithmDescriptor, available_sizes, resolve

__all__ = [
    "Algorithm",
    "AlgorithmDescriptor",
    "Hasher",
    "available_sizes",
    "digest",
    "format_digest",
    "resolve",
]
