"""Data models for hashing and manifest verification."""

from blakesum.models.manifest import (
    SEPARATOR,
    ManifestEntry,
    StreamItem,
    Verdict,
    VerificationSummary,
)

__all__ = ["SEPARATOR", "StreamItem", "ManifestEntry", "Verdict", "VerificationSummary"]
