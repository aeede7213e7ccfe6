"""Rename executor: turns scheduled operations into renames."""

import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path

from asciirename.errors import TransliterationError
from asciirename.models.rename import (
    OperationOutcome,
    OperationState,
    RenameOperation,
    RenameOptions,
    RenameSummary,
)
from asciirename.processors.filesystem import Filesystem, LocalFilesystem, SimulatedFilesystem
from asciirename.processors.sanitizer import PLACEHOLDER, sanitize_for_shell
from asciirename.processors.tracker import PathTracker
from asciirename.processors.transliterator import Transliterator


logger = logging.getLogger(__name__)

# Names that cannot be produced by renaming a single entry.
UNUSABLE_NAMES = ("", ".", "..")

OutcomeCallback = Callable[[OperationOutcome], None]


class RenameExecutor:
    """Applies scheduled rename operations one at a time, deepest first."""

    def __init__(
        self,
        options: RenameOptions | None = None,
        filesystem: Filesystem | None = None,
        tracker: PathTracker | None = None,
        transliterator: Transliterator | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            options: Rename flags. Only ``noop`` and ``overwrite`` affect execution.
            filesystem: Filesystem backend. Defaults to the local filesystem, or a
                        simulated view of it when ``options.noop`` is set.
            tracker: Rename log used to resolve paths under renamed ancestors.
            transliterator: Converter producing the ASCII spelling of a name.
        """
        self.options = options or RenameOptions()
        if filesystem is None:
            filesystem = SimulatedFilesystem() if self.options.noop else LocalFilesystem()
        self.filesystem = filesystem
        self.tracker = tracker if tracker is not None else PathTracker()
        self.transliterator = transliterator or Transliterator()

    def new_name(self, name: str) -> str:
        """Compute the ASCII, shell-safe replacement for a single path component.

        Raises:
            TransliterationError: If no usable name can be produced.
        """
        ascii_name = sanitize_for_shell(self.transliterator.transliterate(name))
        for separator in (os.sep, os.altsep):
            if separator:
                ascii_name = ascii_name.replace(separator, PLACEHOLDER)
        if ascii_name in UNUSABLE_NAMES:
            raise TransliterationError(name, f"result '{ascii_name}' is not a usable name")
        return ascii_name

    def apply(self, operation: RenameOperation) -> OperationOutcome:
        """Process a single operation and return its terminal outcome."""
        current_path = self.tracker.resolve(operation.source_path)

        def outcome(state: OperationState, target_path: Path | None = None, message: str = "") -> OperationOutcome:
            logger.debug("%s: %s (%s)", operation, state.value, message or target_path or current_path)
            return OperationOutcome(
                operation=operation,
                state=state,
                current_path=current_path,
                target_path=target_path,
                message=message,
            )

        if not self.filesystem.exists(current_path):
            return outcome(OperationState.NO_EXIST)

        try:
            ascii_name = self.new_name(current_path.name)
        except TransliterationError as e:
            return outcome(OperationState.TRANSLITERATION_ERROR, message=str(e))

        target_path = current_path.parent / ascii_name
        if str(target_path) == str(current_path):
            return outcome(OperationState.NO_CHANGE, target_path)

        if (
            not self.options.overwrite
            and self.filesystem.exists(target_path)
            and not self.filesystem.same_entry(current_path, target_path)
        ):
            return outcome(OperationState.COLLISION, target_path, message="destination already exists")

        try:
            self.filesystem.rename(current_path, target_path)
        except OSError as e:
            return outcome(OperationState.FILESYSTEM_ERROR, target_path, message=str(e))

        self.tracker.record(current_path, target_path)
        return outcome(OperationState.APPLIED, target_path)

    def run(
        self,
        operations: Iterable[RenameOperation],
        on_outcome: OutcomeCallback | None = None,
    ) -> RenameSummary:
        """Apply every operation in order.

        Failures are accumulated, never unwound: a rename that succeeded stays
        in place even if a later operation fails.

        Args:
            operations: Operations in scheduled (deepest-first) order.
            on_outcome: Optional callback invoked with each outcome as it happens.

        Returns:
            Summary with applied and skipped counts and every outcome.
        """
        summary = RenameSummary()
        for operation in operations:
            result = self.apply(operation)
            summary.add(result)
            if on_outcome is not None:
                on_outcome(result)
        return summary
