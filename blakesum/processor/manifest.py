"""Parsing of ``<digest> *<path>`` manifest lines."""

from typing import Iterator, Union

from blakesum.errors import ManifestFormatError
from blakesum.models.manifest import SEPARATOR, ManifestEntry

ParseResult = Union[ManifestEntry, ManifestFormatError]


def parse_manifest_line(line: str, source: str = "-", line_number: int = 0) -> ParseResult:
    """Split one manifest line into digest and path.

    The line must split on " *" into exactly two fields. A violation is
    returned, not raised, so the caller decides whether it is fatal.

    Args:
        line: Manifest line without its newline.
        source: Manifest the line came from.
        line_number: 1-based line number within the manifest.

    Returns:
        ManifestEntry, or ManifestFormatError for a malformed line.
    """
    fields = line.split(SEPARATOR)
    if len(fields) != 2:
        return ManifestFormatError(source, line_number, line)

    saved_digest, path = fields
    return ManifestEntry(
        saved_digest=saved_digest,
        path=path,
        source=source,
        line_number=line_number,
    )


def iter_manifest_lines(text: str, source: str = "-") -> Iterator[ParseResult]:
    """Parse every line of a manifest, in order.

    Lines are separated by "\\n"; a trailing "\\r" is dropped so CRLF
    manifests parse the same as LF ones. Only the empty tail after the
    final newline is not a line; blank lines elsewhere are malformed.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    for line_number, line in enumerate(lines, start=1):
        yield parse_manifest_line(line.removesuffix("\r"), source, line_number)


def digests_match(saved: str, computed: str) -> bool:
    """Exact, case-sensitive comparison; digests of different lengths never match."""
    return len(saved) == len(computed) and saved == computed
