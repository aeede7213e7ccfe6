"""Split paths into their renameable components."""

import os
from pathlib import Path


RELATIVE_MARKERS = (".", "..")


def _is_renameable(part: str, path: Path) -> bool:
    if part in (path.anchor, path.drive, path.root, os.sep):
        return False
    if part in RELATIVE_MARKERS:
        return False
    # Drive prefix such as "C:"
    if len(part) == 2 and part[1] == ":":
        return False
    return True


def get_renameable_components(path: str | os.PathLike[str]) -> list[Path]:
    """Return the cumulative sub-paths of ``path`` that may be renamed, deepest first.

    For ``/a/b/c`` this is ``[/a/b/c, /a/b, /a]``. Roots, drive prefixes and
    ``.``/``..`` markers are never returned but still extend the cumulative path,
    so renaming any returned path only touches its final component.

    Args:
        path: Path to decompose.

    Returns:
        Renameable cumulative paths, deepest first. Empty for a bare root or drive.
    """
    full_path = Path(path)
    current = Path()
    components: list[Path] = []

    for part in full_path.parts:
        current = current / part
        if _is_renameable(part, full_path):
            components.append(current)

    components.reverse()
    return components
