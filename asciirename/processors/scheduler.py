"""Global ordering of rename operations."""

import logging
from collections.abc import Iterable
from pathlib import Path

from asciirename.models.rename import RenameOperation
from asciirename.processors.decomposer import get_renameable_components


logger = logging.getLogger(__name__)


class RenameScheduler:
    """Collects renameable components from every input path and orders them deepest-first."""

    def __init__(self) -> None:
        self._pending: list[RenameOperation] = []

    def add(self, components: list[Path]) -> None:
        """Queue the components of one decomposed path.

        Args:
            components: Cumulative sub-paths of a single input path, deepest first,
                        as returned by ``get_renameable_components``.
        """
        count = len(components)
        for index, component in enumerate(components):
            self._pending.append(RenameOperation(source_path=component, depth=count - index))

    def add_path(self, path: str | Path) -> None:
        """Decompose ``path`` and queue its components."""
        self.add(get_renameable_components(path))

    def extend(self, paths: Iterable[str | Path]) -> None:
        for path in paths:
            self.add_path(path)

    def schedule(self) -> list[RenameOperation]:
        """Return the queued operations sorted deepest-first without duplicates.

        The sort is stable, so operations of equal depth keep the order in which
        they were added. When the same source path was queued more than once, only
        its first occurrence in sorted order is kept.
        """
        ordered = sorted(self._pending, key=lambda op: op.depth, reverse=True)

        seen: set[Path] = set()
        operations: list[RenameOperation] = []
        for operation in ordered:
            if operation.source_path in seen:
                continue
            seen.add(operation.source_path)
            operations.append(operation)

        logger.debug("Scheduled %d of %d queued components", len(operations), len(self._pending))
        return operations

    def __len__(self) -> int:
        return len(self._pending)
