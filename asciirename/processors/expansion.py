"""Input path validation and recursive directory expansion."""

import logging
import os
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path


logger = logging.getLogger(__name__)

MissingCallback = Callable[[Path], None]


def iter_descendants(directory: Path) -> Iterator[Path]:
    """Yield every entry below ``directory``.

    Symlinks to directories are yielded but not descended into.
    """
    pending = [directory]
    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as iterator:
                entries = list(iterator)
        except OSError as e:
            logger.warning("Unable to list %s: %s", current, e)
            continue
        for entry in entries:
            child = Path(entry.path)
            yield child
            if entry.is_dir(follow_symlinks=False):
                pending.append(child)


def expand_paths(
    paths: Iterable[str | Path],
    recursive: bool = False,
    on_missing: MissingCallback | None = None,
) -> Iterator[Path]:
    """Yield the paths to decompose for a set of input arguments.

    Args:
        paths: Paths given on the command line.
        recursive: Also yield every descendant of directory arguments.
        on_missing: Called with each argument that does not exist. Missing
                    arguments are dropped and never abort the expansion.
    """
    for raw in paths:
        path = Path(raw)
        if not os.path.lexists(path):
            if on_missing is not None:
                on_missing(path)
            continue

        yield path

        if recursive and path.is_dir() and not path.is_symlink():
            yield from iter_descendants(path)
