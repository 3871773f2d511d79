"""Data models for hashing and manifest verification."""

from dataclasses import dataclass

# Separator between digest and path in a report/manifest line
SEPARATOR = " *"


@dataclass(frozen=True)
class StreamItem:
    """Fully read input: a file path (or "-" for stdin) and its bytes."""

    path: str
    content: bytes


@dataclass(frozen=True)
class ManifestEntry:
    """One parsed ``<digest> *<path>`` manifest line."""

    saved_digest: str
    path: str
    source: str = "-"  # manifest the line came from
    line_number: int = 0

    def to_line(self) -> str:
        """Render the entry back in manifest form."""
        return f"{self.saved_digest}{SEPARATOR}{self.path}"


@dataclass(frozen=True)
class Verdict:
    """Outcome of checking one manifest entry."""

    path: str
    ok: bool

    def __str__(self) -> str:
        """Report line for this verdict."""
        return f"{self.path}: {'OK' if self.ok else 'FAILED'}"


@dataclass
class VerificationSummary:
    """Counters accumulated over a check run."""

    checked: int = 0
    failed: int = 0
    skipped: int = 0  # malformed lines ignored in lenient mode

    @property
    def passed(self) -> int:
        return self.checked - self.failed

    def record(self, verdict: Verdict) -> None:
        """Count one verdict."""
        self.checked += 1
        if not verdict.ok:
            self.failed += 1
