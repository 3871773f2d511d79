"""Allow ``python -m blakesum``."""

from blakesum.cli.commands import app

app(prog_name="blakesum")
