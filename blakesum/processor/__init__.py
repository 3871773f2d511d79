"""Digest printing and manifest verification."""

from blakesum.processor.manifest import digests_match, iter_manifest_lines, parse_manifest_line
from blakesum.processor.printer import print_digests
from blakesum.processor.verifier import ManifestVerifier, verify_manifests

__all__ = [
    "ManifestVerifier",
    "digests_match",
    "iter_manifest_lines",
    "parse_manifest_line",
    "print_digests",
    "verify_manifests",
]
