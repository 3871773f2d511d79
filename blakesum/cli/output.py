"""Rich console output for diagnostics.

Report lines belong to stdout and are written unstyled by the commands;
everything rendered here goes to the console's stream (stderr).
"""

from rich.console import Console
from rich.markup import escape

from blakesum.models.manifest import VerificationSummary


class RichOutput:
    """Rich console output formatting."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize with Rich console.

        Args:
            console: Rich Console instance, stderr by default.
        """
        self.console = console or Console(stderr=True)

    def print_error(self, message: str, details: str | None = None) -> None:
        """Display error message.

        Args:
            message: Error message.
            details: Optional additional details.
        """
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
        if details:
            self.console.print(f"[dim]{escape(details)}[/dim]", highlight=False)

    def print_version(self, prog_name: str, version: str) -> None:
        """Display program version."""
        self.console.print(f"{prog_name} version {version}", highlight=False)

    def print_summary(self, summary: VerificationSummary) -> None:
        """Display check-mode totals.

        Args:
            summary: Counters of the finished run.
        """
        status_color = "green" if summary.failed == 0 else "yellow"
        self.console.print(
            f"[bold]Checked:[/bold] {summary.checked}  "
            f"[bold]OK:[/bold] [{status_color}]{summary.passed}[/{status_color}]  "
            f"[bold]Failed:[/bold] [red]{summary.failed}[/red]  "
            f"[bold]Skipped:[/bold] {summary.skipped}",
            highlight=False,
        )
