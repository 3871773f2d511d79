"""CLI commands using Typer."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from blakesum import __version__
from blakesum.cli.config import Mode, RunConfig, build_run_config, load_config, parse_salt
from blakesum.cli.output import RichOutput
from blakesum.errors import ConfigError, ManifestDecodeError, ManifestFormatError
from blakesum.hashing.registry import available_sizes
from blakesum.processor.printer import print_digests
from blakesum.processor.verifier import verify_manifests
from blakesum.utils.logging import close_logging, setup_logging

PROG_NAME = "blakesum"

# Exit statuses
EXIT_OK = 0
EXIT_FAILURE = 1  # unreadable input, malformed manifest
EXIT_CONFIG = 2  # invalid options or config file

app = typer.Typer(
    name=PROG_NAME,
    help="Print or check BLAKE (224/256/384/512-bit) digests.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console(stderr=True)
output = RichOutput(console)


def version_callback(value: bool) -> None:
    """Print the version to stderr and exit."""
    if value:
        output.print_version(PROG_NAME, __version__)
        raise typer.Exit(EXIT_OK)


def get_run_config(
    paths: list[str],
    check: bool,
    algorithm: Optional[int],
    salt: Optional[str],
    strict: Optional[bool],
    config_path: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
) -> RunConfig:
    """Merge config file defaults with command-line options and validate.

    Command-line values win over the config file. Also configures
    logging from the file and the logging options.

    Raises:
        ConfigError: If the config file or any option is invalid.
    """
    file_config = load_config(config_path)
    setup_logging(
        level=file_config.logging.level,
        log_file=log_file or file_config.logging.file,
        verbose=verbose,
    )

    defaults = file_config.defaults
    return build_run_config(
        mode=Mode.CHECK if check else Mode.PRINT,
        algorithm_bits=algorithm if algorithm is not None else defaults.algorithm,
        salt=parse_salt(salt) if salt is not None else defaults.salt,
        paths=paths,
        strict=strict if strict is not None else defaults.strict,
    )


@app.command()
def main(
    paths: Optional[List[str]] = typer.Argument(
        None,
        metavar="FILE...",
        help="Files to hash (or manifests to check); '-' or no FILE reads standard input",
        show_default=False,
    ),
    algorithm: Optional[int] = typer.Option(
        None,
        "--algorithm",
        "-a",
        metavar="BITS",
        help=f"{', '.join(str(s) for s in available_sizes())} (default: 256)",
        show_default=False,
    ),
    check: bool = typer.Option(
        False,
        "--check",
        "-c",
        help="Check saved hashes",
    ),
    salt: Optional[str] = typer.Option(
        None,
        "--salt",
        "-s",
        metavar="SALT",
        help="Non-negative integer salt, as four words (default: 0,0,0,0)",
        show_default=False,
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--lenient",
        help="Abort on an improperly formatted manifest line, or skip it (default: strict)",
        show_default=False,
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log debug information to stderr",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write a debug log to this file",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Display version and exit",
    ),
) -> None:
    """Print or check BLAKE digests of files.

    Without --check, prints one "<digest> *<file>" line per FILE. With
    --check, reads such lines from each FILE and reports "<file>: OK" or
    "<file>: FAILED" for every listed file.
    """
    try:
        config = get_run_config(
            paths or [], check, algorithm, salt, strict, config_path, verbose, log_file
        )
    except ConfigError as e:
        output.print_error(str(e))
        close_logging()
        raise typer.Exit(EXIT_CONFIG)
    except OSError as e:
        output.print_error("Cannot open log file", str(e))
        close_logging()
        raise typer.Exit(EXIT_CONFIG)

    try:
        if config.mode is Mode.CHECK:
            summary = verify_manifests(config, typer.echo)
            if verbose:
                output.print_summary(summary)
        else:
            print_digests(config, typer.echo)

    except OSError as e:
        if e.filename is None:
            output.print_error("I/O error", str(e))
        else:
            output.print_error(f"Cannot read {e.filename}", e.strerror or str(e))
        raise typer.Exit(EXIT_FAILURE)

    except (ManifestFormatError, ManifestDecodeError) as e:
        output.print_error(str(e))
        raise typer.Exit(EXIT_FAILURE)

    finally:
        close_logging()


if __name__ == "__main__":
    app()
