"""Unit tests for data models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from asciirename.models.rename import (
    OperationOutcome,
    OperationState,
    RenameMapping,
    RenameOperation,
    RenameOptions,
    RenameSummary,
)


class TestRenameOperation:
    """Tests for RenameOperation model."""

    @pytest.fixture
    def sample_operation(self):
        return RenameOperation(source_path=Path("/music/Björk"), depth=2)

    def test_str_representation(self, sample_operation):
        result = str(sample_operation)

        assert "/music/Björk" in result
        assert "depth=2" in result

    def test_path_from_string(self):
        operation = RenameOperation(source_path="a/b", depth=2)

        assert operation.source_path == Path("a/b")

    def test_depth_must_be_positive(self):
        with pytest.raises(ValidationError):
            RenameOperation(source_path=Path("a"), depth=0)

    def test_frozen(self, sample_operation):
        with pytest.raises(ValidationError):
            sample_operation.depth = 5

    def test_equality_uses_fields(self, sample_operation):
        assert sample_operation == RenameOperation(source_path=Path("/music/Björk"), depth=2)


class TestRenameMapping:
    """Tests for RenameMapping model."""

    def test_str_representation(self):
        mapping = RenameMapping(source=Path("/ä"), target=Path("/a"))

        assert str(mapping) == "RenameMapping('/ä' -> '/a')"


class TestOperationState:
    """Tests for OperationState enum."""

    @pytest.mark.parametrize(
        "state,is_failure",
        [
            (OperationState.APPLIED, False),
            (OperationState.NO_EXIST, False),
            (OperationState.NO_CHANGE, False),
            (OperationState.COLLISION, True),
            (OperationState.TRANSLITERATION_ERROR, True),
            (OperationState.FILESYSTEM_ERROR, True),
        ],
    )
    def test_is_failure(self, state, is_failure):
        assert state.is_failure is is_failure

    def test_values(self):
        assert OperationState("no-change") is OperationState.NO_CHANGE


class TestRenameSummary:
    """Tests for RenameSummary model."""

    @staticmethod
    def _outcome(state):
        return OperationOutcome(
            operation=RenameOperation(source_path=Path("x"), depth=1),
            state=state,
            current_path=Path("x"),
        )

    def test_counters(self):
        summary = RenameSummary()
        for state in (
            OperationState.APPLIED,
            OperationState.APPLIED,
            OperationState.COLLISION,
            OperationState.FILESYSTEM_ERROR,
            OperationState.NO_CHANGE,
            OperationState.NO_EXIST,
        ):
            summary.add(self._outcome(state))

        assert summary.applied == 2
        assert summary.skipped == 2
        assert summary.unchanged == 1
        assert summary.missing == 1
        assert summary.total == 4
        assert len(summary) == 6
        assert not summary.succeeded

    @pytest.mark.parametrize("state", list(OperationState))
    def test_skipped_follows_is_failure(self, state):
        summary = RenameSummary()

        summary.add(self._outcome(state))

        assert summary.skipped == (1 if state.is_failure else 0)
        assert summary.applied + summary.skipped + summary.unchanged + summary.missing == 1

    def test_empty_summary_succeeds(self):
        summary = RenameSummary()

        assert summary.total == 0
        assert summary.succeeded


class TestRenameOptions:
    """Tests for RenameOptions model."""

    def test_defaults(self):
        options = RenameOptions()

        assert not options.noop
        assert not options.overwrite
        assert not options.recursive
        assert not options.verbose
