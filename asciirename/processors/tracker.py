"""Resolution of paths affected by earlier renames."""

from collections.abc import Sequence
from pathlib import Path

from asciirename.models.rename import RenameMapping


def replace_prefix(path: Path, source: Path, target: Path) -> Path | None:
    """Swap the leading ``source`` components of ``path`` for ``target``.

    Matching is done on whole components, so ``/data/x`` is a prefix of
    ``/data/x/y`` but not of ``/data/xy``.

    Returns:
        The rewritten path, or None if ``source`` is not a prefix of ``path``.
    """
    source_parts = source.parts
    path_parts = path.parts
    if len(source_parts) > len(path_parts):
        return None
    if Path(*path_parts[: len(source_parts)]) != source:
        return None
    return target.joinpath(*path_parts[len(source_parts) :])


class PathTracker:
    """Append-only log of renames used to find where an original path lives now."""

    def __init__(self) -> None:
        self._mappings: list[RenameMapping] = []

    @property
    def mappings(self) -> Sequence[RenameMapping]:
        """Recorded renames in the order they were applied."""
        return tuple(self._mappings)

    def record(self, source: Path, target: Path) -> None:
        """Remember that ``source`` now lives at ``target``."""
        self._mappings.append(RenameMapping(source=source, target=target))

    def resolve(self, original: Path) -> Path:
        """Return the current location of ``original``.

        Every mapping is applied in the order it was recorded. A path can be
        rewritten several times, once for each of its ancestors renamed after it.
        """
        result = Path(original)
        for mapping in self._mappings:
            rewritten = replace_prefix(result, mapping.source, mapping.target)
            if rewritten is not None:
                result = rewritten
        return result

    def __len__(self) -> int:
        return len(self._mappings)
