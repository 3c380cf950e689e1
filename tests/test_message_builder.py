"""
Tests for the voice plan message builder.
"""

import pytest

from grocery_bot.voice import (
    AddEntry,
    RemoveEntry,
    AdjustEntry,
    Plan,
    EntryOutcome,
    EntryStatus,
    ExecutionResult,
    PlanMessageBuilder,
    NOTHING_ACTIONABLE_MESSAGE,
    compile_plan,
)


@pytest.fixture
def builder():
    return PlanMessageBuilder()


class TestBuildSummary:
    """Tests for the confirmation summary."""

    def test_empty_plan(self, builder):
        assert builder.build_summary(Plan.empty()) == NOTHING_ACTIONABLE_MESSAGE

    def test_add_summary(self, builder):
        plan = compile_plan("add two chickens three steaks and four pork chops")
        assert builder.build_summary(plan) == (
            "Add:\n"
            "- 2 × chickens\n"
            "- 3 × steaks\n"
            "- 4 × pork chops"
        )

    def test_note_is_shown(self, builder):
        plan = compile_plan("add milk (when cheap)")
        assert builder.build_summary(plan) == "Add:\n- 1 × milk (when cheap)"

    def test_groups_in_add_remove_adjust_order(self, builder):
        plan = Plan(
            adjust=(AdjustEntry(name="apples", delta=2), AdjustEntry(name="pears", delta=-1)),
            remove=(RemoveEntry(name="milk"),),
            add=(AddEntry(name="bread"),),
        )
        assert builder.build_summary(plan) == (
            "Add:\n"
            "- 1 × bread\n"
            "Remove:\n"
            "- milk\n"
            "Adjust:\n"
            "- +2 apples\n"
            "- -1 pears"
        )

    @pytest.mark.parametrize("delta,expected", [(2, "+2"), (-3, "-3"), (1, "+1")])
    def test_format_delta(self, builder, delta, expected):
        assert builder.format_delta(delta) == expected


class TestBuildExecutionMessage:
    """Tests for the message after execution."""

    def _outcome(self, operation, name, status):
        entry = {
            "add": AddEntry, "remove": RemoveEntry,
        }[operation](name=name)
        return EntryOutcome(operation, entry, status)

    def test_all_applied(self, builder):
        result = ExecutionResult([
            self._outcome("add", "milk", EntryStatus.APPLIED),
            self._outcome("remove", "eggs", EntryStatus.APPLIED),
        ])
        assert builder.build_execution_message(result) == "Updated 2 items."

    def test_single_item(self, builder):
        result = ExecutionResult([self._outcome("add", "milk", EntryStatus.APPLIED)])
        assert builder.build_execution_message(result) == "Updated 1 item."

    def test_partial(self, builder):
        result = ExecutionResult([
            self._outcome("remove", "eggs", EntryStatus.APPLIED),
            self._outcome("add", "milk", EntryStatus.FAILED),
        ])
        assert builder.build_execution_message(result) == (
            "Updated 1 item, but some changes didn't save. Failed: add milk."
        )

    def test_all_failed(self, builder):
        result = ExecutionResult([self._outcome("add", "milk", EntryStatus.FAILED)])
        assert builder.build_execution_message(result) == (
            "Couldn't update your list. Failed: add milk."
        )

    def test_no_match_is_mentioned(self, builder):
        result = ExecutionResult([
            self._outcome("remove", "caviar", EntryStatus.NO_MATCH),
        ])
        assert builder.build_execution_message(result) == (
            "Updated 0 items. Not on your list: caviar."
        )
