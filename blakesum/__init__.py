"""BLAKE digest utility: hash files and verify saved digest manifests."""

__version__ = "1.0.0"
