"""Configuration loading and validation."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Sequence

import yaml

from blakesum.errors import ConfigError
from blakesum.hashing.registry import Algorithm, resolve

DEFAULT_ALGORITHM = 256
DEFAULT_SALT = (0, 0, 0, 0)
DEFAULT_CONFIG_PATHS = ["blakesum.yaml", "blakesum.yml", ".blakesum.yaml"]


class Mode(Enum):
    """What a run does with its inputs."""

    PRINT = "print"  # hash inputs, emit "<hex> *<path>"
    CHECK = "check"  # read inputs as manifests, emit "<path>: OK|FAILED"


@dataclass
class DefaultsConfig:
    """Defaults for options not given on the command line."""

    algorithm: int = DEFAULT_ALGORITHM
    salt: list[int] = field(default_factory=lambda: list(DEFAULT_SALT))
    strict: bool = True


@dataclass
class LoggingConfig:
    """Logging options."""

    level: str = "WARNING"
    file: Path | None = None


@dataclass
class Config:
    """Complete file configuration."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


@dataclass(frozen=True)
class RunConfig:
    """Validated, immutable configuration of one run.

    Built once by ``build_run_config`` and passed explicitly to the
    printer or verifier; nothing downstream re-validates it.
    """

    mode: Mode
    algorithm: Algorithm
    salt: tuple[int, int, int, int]
    paths: tuple[str, ...] = ()
    strict: bool = True


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to YAML config file. Defaults to the first
            existing file in DEFAULT_CONFIG_PATHS.

    Returns:
        Loaded Config object (built-in defaults if there is no file).

    Raises:
        ConfigError: If an explicitly given file is missing or any file
            is not valid YAML.
    """
    if config_path is None:
        for default_path in DEFAULT_CONFIG_PATHS:
            if Path(default_path).exists():
                config_path = Path(default_path)
                break
        else:
            return Config()
    elif not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot load config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    return _parse_config(data)


def _parse_config(data: dict[str, Any]) -> Config:
    """Parse configuration dictionary into Config object.

    Args:
        data: Raw configuration dictionary.

    Returns:
        Config object.
    """
    config = Config()

    # Defaults section
    if "defaults" in data:
        defaults_data = data["defaults"] or {}
        config.defaults = DefaultsConfig(
            algorithm=defaults_data.get("algorithm", DEFAULT_ALGORITHM),
            salt=_coerce_salt(defaults_data.get("salt", list(DEFAULT_SALT))),
            strict=_coerce_strict(defaults_data.get("strict", True)),
        )

    # Logging section
    if "logging" in data:
        logging_data = data["logging"] or {}
        log_file = logging_data.get("file")
        config.logging = LoggingConfig(
            level=str(logging_data.get("level", "WARNING")),
            file=Path(log_file) if log_file else None,
        )

    return config


def _coerce_salt(value: Any) -> list[int]:
    """Accept a salt written either as a YAML list or as "a,b,c,d"."""
    if isinstance(value, str):
        return list(parse_salt(value))
    if not isinstance(value, list) or not all(
        isinstance(v, int) and not isinstance(v, bool) for v in value
    ):
        raise ConfigError(f"salt must be a list of four integers, got {value!r}")
    return value


def _coerce_strict(value: Any) -> bool:
    """Accept only a YAML boolean for the manifest policy."""
    if not isinstance(value, bool):
        raise ConfigError(f"strict must be true or false, got {value!r}")
    return value


def parse_salt(text: str) -> tuple[int, ...]:
    """Parse the comma-separated salt form used on the command line.

    Only the syntax is checked here; the component count and signs are
    validated by ``build_run_config``.

    Args:
        text: e.g. "1,2,3,4".

    Returns:
        Integer components in order.

    Raises:
        ConfigError: If a component is empty or not an integer.
    """
    components = []
    for part in text.split(","):
        part = part.strip()
        try:
            components.append(int(part))
        except ValueError:
            raise ConfigError(
                f"invalid salt {text!r}: expected four comma-separated integers"
            ) from None
    return tuple(components)


def build_run_config(
    mode: Mode,
    algorithm_bits: int,
    salt: Sequence[int],
    paths: Sequence[str] = (),
    strict: bool = True,
) -> RunConfig:
    """Validate raw option values into a RunConfig.

    Args:
        mode: Print or check.
        algorithm_bits: Digest size in bits.
        salt: Salt components.
        paths: Positional arguments, in order.
        strict: Abort on malformed manifest lines instead of skipping them.

    Returns:
        Immutable RunConfig.

    Raises:
        ConfigError: If the algorithm size is unavailable or the salt is
            not exactly four non-negative integers.
    """
    algorithm = resolve(algorithm_bits)

    salt = tuple(salt)
    if len(salt) != 4 or any(component < 0 for component in salt):
        raise ConfigError(
            f"invalid salt {','.join(str(c) for c in salt)}: "
            "please specify a salt of four non-negative integers"
        )

    return RunConfig(
        mode=mode,
        algorithm=algorithm,
        salt=salt,  # type: ignore[arg-type]
        paths=tuple(paths),
        strict=strict,
    )

