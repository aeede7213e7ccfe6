"""Filesystem backends used by the rename executor."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from asciirename.processors.tracker import replace_prefix


logger = logging.getLogger(__name__)


class Filesystem(ABC):
    """Operations the executor needs from the filesystem."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return True if an entry exists at ``path`` (symlinks are not followed)."""
        pass

    @abstractmethod
    def same_entry(self, first: Path, second: Path) -> bool:
        """Return True if ``second`` is only another spelling of the entry at ``first``.

        Symlinks are not followed, and a hard link is a separate entry.
        """
        pass

    @abstractmethod
    def rename(self, source: Path, target: Path) -> None:
        """Atomically move ``source`` to ``target``, replacing ``target`` if present.

        Raises:
            OSError: If the underlying rename fails.
        """
        pass


class LocalFilesystem(Filesystem):
    """The real filesystem."""

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def same_entry(self, first: Path, second: Path) -> bool:
        first, second = Path(first), Path(second)
        try:
            if not os.path.samestat(os.lstat(first), os.lstat(second)):
                return False
            if first == second:
                return True
            # A name the directory actually lists is its own entry, e.g. a hard link.
            return second.name not in os.listdir(second.parent)
        except OSError:
            return False

    def rename(self, source: Path, target: Path) -> None:
        os.replace(source, target)


class SimulatedFilesystem(Filesystem):
    """A read-only view of a backing filesystem with renames applied virtually.

    Renames are kept in an in-memory log. Queries against a virtual path are
    translated back to the on-disk path that currently backs it, so a dry run
    sees the same tree a real run would.
    """

    def __init__(self, backing: Filesystem | None = None) -> None:
        self.backing = backing if backing is not None else LocalFilesystem()
        self._moves: list[tuple[Path, Path]] = []

    def _backing_path(self, path: Path) -> Path | None:
        """Map a virtual path to the on-disk path behind it.

        Returns None if the entry was moved away and nothing took its place.
        """
        current = Path(path)
        for source, target in reversed(self._moves):
            restored = replace_prefix(current, target, source)
            if restored is not None:
                current = restored
            elif replace_prefix(current, source, target) is not None:
                return None
        return current

    def exists(self, path: Path) -> bool:
        backing_path = self._backing_path(path)
        return backing_path is not None and self.backing.exists(backing_path)

    def same_entry(self, first: Path, second: Path) -> bool:
        first_backing = self._backing_path(first)
        second_backing = self._backing_path(second)
        if first_backing is None or second_backing is None:
            return False
        return self.backing.same_entry(first_backing, second_backing)

    def rename(self, source: Path, target: Path) -> None:
        if not self.exists(source):
            raise FileNotFoundError(2, "No such file or directory", str(source))
        logger.debug("Simulated rename %s -> %s", source, target)
        self._moves.append((Path(source), Path(target)))
