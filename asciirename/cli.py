"""CLI entrypoint."""

import click

from asciirename.logging_setup import DEFAULT_LOG_LEVEL, LOG_LEVELS, configure_logging
from asciirename.models.rename import RenameOptions
from asciirename.processors.executor import RenameExecutor
from asciirename.processors.expansion import expand_paths
from asciirename.processors.scheduler import RenameScheduler
from asciirename.reporting import Reporter


__version__ = "1.0.0"

PROG_NAME = "ascii-rename"

# Exit statuses are a single byte.
MAX_EXIT_STATUS = 255


def run(paths: tuple[str, ...], options: RenameOptions, reporter: Reporter) -> int:
    """Rename ``paths`` and return the number of skipped (failed) operations."""
    scheduler = RenameScheduler()
    scheduler.extend(expand_paths(paths, recursive=options.recursive, on_missing=reporter.missing_argument))

    operations = scheduler.schedule()
    reporter.collected(len(operations))

    executor = RenameExecutor(options=options)
    summary = executor.run(operations, on_outcome=reporter.outcome)
    reporter.summary(summary)

    return summary.skipped


@click.command(
    PROG_NAME,
    context_settings=dict(
        show_default=True,
        help_option_names=["-h", "--help"],
        auto_envvar_prefix="ASCII_RENAME",
    ),
)
@click.argument("paths", type=click.Path(), nargs=-1)
@click.option(
    "-n",
    "--no-op",
    "noop",
    is_flag=True,
    default=False,
    help="Show what would happen but don't actually rename path(s).",
)
@click.option("-o", "--overwrite", is_flag=True, default=False, help="Overwrite existing path(s).")
@click.option("-r", "--recursive", is_flag=True, default=False, help="Rename files and subdirectories recursively.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Make the output more verbose.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    help="Level for diagnostic logging on stderr.",
)
@click.version_option(__version__, "-V", "--version", prog_name=PROG_NAME, message="%(prog)s %(version)s")
def cli(
    paths: tuple[str, ...],
    noop: bool,
    overwrite: bool,
    recursive: bool,
    verbose: bool,
    log_level: str,
) -> None:
    """Rename paths with non-ASCII names to shell-safe ASCII equivalents.

    Every component of each path is considered, so Unicode-named parent
    directories are renamed too. Deeper paths are always renamed before
    their parents.

    Examples:

        ascii-rename --no-op ./Müsik/Björk.mp3

        ascii-rename -r ./Téléchargements
    """
    if not paths:
        click.echo(f"{PROG_NAME}: try '{PROG_NAME} --help' for more information")
        return

    configure_logging(log_level)

    options = RenameOptions(noop=noop, overwrite=overwrite, recursive=recursive, verbose=verbose)
    reporter = Reporter(verbose=verbose, noop=noop)

    skipped = run(paths, options, reporter)
    if skipped:
        raise SystemExit(min(skipped, MAX_EXIT_STATUS))
