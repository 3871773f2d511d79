"""Exception types raised by blakesum."""


class BlakesumError(Exception):
    """Base class for errors reported by the command line."""


class ConfigError(BlakesumError):
    """Invalid run configuration (algorithm size, salt or config file)."""


class ManifestFormatError(BlakesumError):
    """A manifest line that is not of the form ``<digest> *<path>``."""

    def __init__(self, source: str, line_number: int, line: str) -> None:
        self.source = source
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"{source}:{line_number}: improperly formatted manifest line: {line!r}"
        )


class ManifestDecodeError(BlakesumError):
    """A manifest that is not valid UTF-8 text."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        super().__init__(f"{source}: manifest is not valid UTF-8 ({reason})")
