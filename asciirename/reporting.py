"""Console reporting of rename outcomes."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from asciirename.models.rename import OperationOutcome, OperationState, RenameSummary


def _quoted(path: Path | None) -> str:
    return f'"{escape(str(path))}"'


class Reporter:
    """Prints outcomes and summaries; errors go to stderr."""

    def __init__(
        self,
        verbose: bool = False,
        noop: bool = False,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.verbose = verbose
        self.noop = noop
        self.console = console or Console(highlight=False, emoji=False, soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)

    def missing_argument(self, path: Path) -> None:
        self.error_console.print(f"[bold red]ERROR:[/bold red] {_quoted(path)} doesn't exist.")

    def collected(self, count: int) -> None:
        if self.verbose:
            self.console.print(f"Collected [cyan]{count}[/cyan] path components to process.")

    def outcome(self, outcome: OperationOutcome) -> None:
        """Report a single terminal outcome."""
        current = _quoted(outcome.current_path)
        target = _quoted(outcome.target_path)

        if self.verbose:
            self.console.print(f"Processing {current}...")

        state = outcome.state
        if state is OperationState.APPLIED:
            verb = "Would have renamed" if self.noop else "Renaming"
            self.console.print(f"{verb} [cyan]{current}[/cyan] to [green]{target}[/green]...")
        elif state is OperationState.NO_EXIST:
            if self.verbose:
                self.console.print(f"[dim]Path no longer exists, skipping {current}...[/dim]")
        elif state is OperationState.NO_CHANGE:
            if self.verbose:
                self.console.print(f"[dim]No need to rename {current}.[/dim]")
        elif state is OperationState.COLLISION:
            self.error_console.print(f"[bold red]ERROR:[/bold red] {target} already exists.")
            self.error_console.print("[bold red]ERROR:[/bold red] Specify --overwrite to overwrite.")
        elif state is OperationState.TRANSLITERATION_ERROR:
            self.error_console.print(
                f"[bold red]ERROR:[/bold red] Unable to convert {_quoted(Path(outcome.current_path.name))} "
                "to ASCII, skipping."
            )
        elif state is OperationState.FILESYSTEM_ERROR:
            self.error_console.print(
                f"[bold red]ERROR:[/bold red] File system error, unable to rename {current} to {target}."
            )
            if outcome.message:
                self.error_console.print(f"[dim]  {escape(outcome.message)}[/dim]")

    def summary(self, summary: RenameSummary) -> None:
        if self.verbose:
            self.console.print(
                f"Renamed: [green]{summary.applied}[/green], "
                f"Skipped: [yellow]{summary.skipped}[/yellow], "
                f"Total: [cyan]{summary.total}[/cyan]"
            )
