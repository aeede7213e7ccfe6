"""Rename operation data models."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class RenameOptions(BaseModel):
    """Flags consumed by the rename executor."""

    model_config = ConfigDict(frozen=True)

    noop: bool = Field(description="Report renames without touching the filesystem", default=False)
    overwrite: bool = Field(description="Replace existing destination paths", default=False)
    recursive: bool = Field(description="Expand directories into their descendants", default=False)
    verbose: bool = Field(description="Report every operation, not only changes and errors", default=False)


class RenameOperation(BaseModel):
    """A single path component scheduled for renaming."""

    model_config = ConfigDict(frozen=True)

    source_path: Path = Field(description="Cumulative path up to and including the component to rename")
    depth: int = Field(description="Nesting position of the component; deeper components have higher depth", ge=1)

    def __str__(self) -> str:
        return f"RenameOperation('{self.source_path}', depth={self.depth})"


class RenameMapping(BaseModel):
    """A completed (or simulated) rename, recorded for path resolution."""

    model_config = ConfigDict(frozen=True)

    source: Path = Field(description="Path before the rename")
    target: Path = Field(description="Path after the rename")

    def __str__(self) -> str:
        return f"RenameMapping('{self.source}' -> '{self.target}')"


class OperationState(str, Enum):
    """Terminal state of a single rename operation."""

    APPLIED = "applied"
    NO_EXIST = "no-exist"
    NO_CHANGE = "no-change"
    COLLISION = "collision"
    TRANSLITERATION_ERROR = "transliteration-error"
    FILESYSTEM_ERROR = "filesystem-error"

    @property
    def is_failure(self) -> bool:
        """Whether this state counts towards the skipped (failure) tally."""
        return self in (
            OperationState.COLLISION,
            OperationState.TRANSLITERATION_ERROR,
            OperationState.FILESYSTEM_ERROR,
        )


class OperationOutcome(BaseModel):
    """Result of processing one rename operation."""

    model_config = ConfigDict(frozen=True)

    operation: RenameOperation
    state: OperationState
    current_path: Path = Field(description="Resolved on-disk location at processing time")
    target_path: Path | None = Field(description="Candidate new location, when one was computed", default=None)
    message: str = Field(description="Human readable detail, e.g. the underlying error", default="")


class RenameSummary(BaseModel):
    """Counters accumulated over a rename run."""

    applied: int = 0
    skipped: int = 0
    unchanged: int = 0
    missing: int = 0
    outcomes: list[OperationOutcome] = Field(default_factory=list)

    @property
    def total(self) -> int:
        """Applied plus skipped operations."""
        return self.applied + self.skipped

    @property
    def succeeded(self) -> bool:
        return self.skipped == 0

    def add(self, outcome: OperationOutcome) -> None:
        """Account for a single terminal outcome."""
        self.outcomes.append(outcome)
        if outcome.state is OperationState.APPLIED:
            self.applied += 1
        elif outcome.state.is_failure:
            self.skipped += 1
        elif outcome.state is OperationState.NO_CHANGE:
            self.unchanged += 1
        elif outcome.state is OperationState.NO_EXIST:
            self.missing += 1

    def __len__(self) -> int:
        return len(self.outcomes)
