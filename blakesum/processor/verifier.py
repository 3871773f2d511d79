"""Check mode: verify files listed in digest manifests."""

from typing import BinaryIO, Callable

from blakesum.cli.config import RunConfig
from blakesum.errors import ManifestDecodeError, ManifestFormatError
from blakesum.hashing.hasher import Hasher
from blakesum.models.manifest import ManifestEntry, Verdict, VerificationSummary
from blakesum.processor.manifest import digests_match, iter_manifest_lines
from blakesum.utils.logging import logger
from blakesum.utils.streams import open_streams, read_file


class ManifestVerifier:
    """Re-hashes the files named in manifests and compares digests.

    Every manifest line produces one verdict line through ``emit``. A
    mismatch is reported as FAILED and processing continues; unreadable
    files and (in strict mode) malformed lines abort the run.
    """

    def __init__(
        self,
        config: RunConfig,
        emit: Callable[[str], None],
        hasher: Hasher | None = None,
    ) -> None:
        """Initialize verifier.

        Args:
            config: Run configuration.
            emit: Receives each verdict line.
            hasher: Hasher to use; built from the configuration if omitted.
        """
        self.config = config
        self.emit = emit
        self.hasher = hasher or Hasher(config.algorithm, config.salt)
        self.summary = VerificationSummary()

    def check_entry(self, entry: ManifestEntry) -> Verdict:
        """Hash the file an entry names and compare with its saved digest.

        Raises:
            OSError: If the file cannot be read.
        """
        computed = self.hasher.digest(read_file(entry.path))
        verdict = Verdict(entry.path, digests_match(entry.saved_digest, computed))
        if not verdict.ok:
            logger.debug(
                f"{entry.source}:{entry.line_number}: {entry.path} "
                f"expected {entry.saved_digest}, got {computed}"
            )
        return verdict

    def check_manifest(self, text: str, source: str = "-") -> None:
        """Verify every line of one manifest's text.

        Raises:
            ManifestFormatError: For a malformed line in strict mode.
            OSError: If a listed file cannot be read.
        """
        for result in iter_manifest_lines(text, source):
            if isinstance(result, ManifestFormatError):
                if self.config.strict:
                    raise result
                logger.warning(f"Skipping {result}")
                self.summary.skipped += 1
                continue

            verdict = self.check_entry(result)
            self.summary.record(verdict)
            self.emit(str(verdict))

    def run(self, stdin: BinaryIO | None = None) -> VerificationSummary:
        """Verify all manifests of the run, in order.

        Args:
            stdin: Binary stream standing in for standard input.

        Returns:
            Summary of verdicts.
        """
        for item in open_streams(self.config.paths, stdin):
            try:
                text = item.content.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ManifestDecodeError(item.path, str(e)) from e
            logger.debug(f"Checking manifest {item.path}")
            self.check_manifest(text, item.path)

        if self.summary.failed:
            logger.warning(
                f"WARNING: {self.summary.failed} computed checksum(s) did NOT match"
            )
        if self.summary.skipped:
            logger.warning(
                f"WARNING: {self.summary.skipped} line(s) are improperly formatted"
            )
        return self.summary


def verify_manifests(
    config: RunConfig,
    emit: Callable[[str], None],
    stdin: BinaryIO | None = None,
    hasher: Hasher | None = None,
) -> VerificationSummary:
    """Run check mode over the configured manifests."""
    return ManifestVerifier(config, emit, hasher).run(stdin)
