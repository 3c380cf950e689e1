"""
Plan Executor.

Applies a compiled Plan to a grocery list through GroceryListOperations.

Ordering:
    All adjust entries, then all remove entries, then all add entries,
    whatever order they were recorded in. Adds therefore see quantities
    after this plan's own adjustments and removals.

Matching:
    Entries are matched against one snapshot of the list taken by the caller
    before execution. The executor keeps a private working copy of that
    snapshot and updates it after each successful write, so later entries see
    earlier effects without the list being re-read mid-plan.

Failures:
    A missing remove/adjust target is a no-op. A write that raises is
    recorded against its entry and execution carries on; nothing already
    written is rolled back.
"""

import logging
from dataclasses import replace

from ..config import get_adjust_floor_policy
from .list_operations import GroceryListItem, GroceryListOperations, find_index
from .schemas import (
    AddEntry,
    AdjustEntry,
    AdjustFloorPolicy,
    EntryOutcome,
    EntryStatus,
    ExecutionResult,
    Plan,
    RemoveEntry,
)

logger = logging.getLogger(__name__)


class PlanExecutor:
    """Applies plans to a list in adjust -> remove -> add order."""

    def __init__(
        self,
        operations: GroceryListOperations,
        floor_policy: AdjustFloorPolicy | None = None,
    ):
        self.operations = operations
        self.floor_policy = floor_policy or get_adjust_floor_policy()

    def execute(self, plan: Plan, items: list[GroceryListItem]) -> ExecutionResult:
        """
        Apply every entry of the plan.

        Args:
            plan: The plan to apply
            items: Snapshot of the list, read once by the caller

        Returns:
            ExecutionResult with one outcome per entry, in execution order
        """
        working = list(items)
        result = ExecutionResult()

        for adjust_entry in plan.adjust:
            result.outcomes.append(self._apply_adjust(adjust_entry, working))
        for remove_entry in plan.remove:
            result.outcomes.append(self._apply_remove(remove_entry, working))
        for add_entry in plan.add:
            result.outcomes.append(self._apply_add(add_entry, working))

        logger.info(
            "Executed plan: %d applied, %d no match, %d failed",
            len(result.applied), len(result.no_match), len(result.failed),
        )
        return result

    def _failed(self, operation: str, entry, error: Exception) -> EntryOutcome:
        logger.warning("%s of '%s' failed: %s", operation, entry.name, error, exc_info=True)
        return EntryOutcome(
            operation=operation,
            entry=entry,
            status=EntryStatus.FAILED,
            error=str(error) or error.__class__.__name__,
        )

    def _apply_adjust(self, entry: AdjustEntry, working: list[GroceryListItem]) -> EntryOutcome:
        index = find_index(working, entry.name)
        if index is None:
            logger.info("No list item matches '%s', skipping adjust", entry.name)
            return EntryOutcome("adjust", entry, EntryStatus.NO_MATCH)

        item = working[index]
        new_quantity = self.floor_policy.apply(item.quantity + entry.delta)
        delete = self.floor_policy is AdjustFloorPolicy.DELETE_AT_ZERO and new_quantity <= 0

        try:
            if delete:
                self.operations.remove_by_name(item.name)
            else:
                self.operations.adjust_quantity_by_name(item.name, new_quantity - item.quantity)
        except Exception as e:
            return self._failed("adjust", entry, e)

        if delete:
            logger.debug("Adjust took '%s' to zero, row deleted", item.name)
            del working[index]
        else:
            working[index] = replace(item, quantity=new_quantity)
        return EntryOutcome("adjust", entry, EntryStatus.APPLIED)

    def _apply_remove(self, entry: RemoveEntry, working: list[GroceryListItem]) -> EntryOutcome:
        index = find_index(working, entry.name)
        if index is None:
            logger.info("No list item matches '%s', skipping remove", entry.name)
            return EntryOutcome("remove", entry, EntryStatus.NO_MATCH)

        try:
            self.operations.remove_by_name(working[index].name)
        except Exception as e:
            return self._failed("remove", entry, e)

        del working[index]
        return EntryOutcome("remove", entry, EntryStatus.APPLIED)

    def _apply_add(self, entry: AddEntry, working: list[GroceryListItem]) -> EntryOutcome:
        index = find_index(working, entry.name)
        target_name = working[index].name if index is not None else entry.name.strip()

        try:
            self.operations.add_or_increase_by_name(target_name, entry.quantity, entry.note)
        except Exception as e:
            return self._failed("add", entry, e)

        if index is not None:
            item = working[index]
            working[index] = replace(
                item,
                quantity=item.quantity + entry.quantity,
                note=entry.note or item.note,
            )
        else:
            next_order = max((item.order for item in working), default=-1) + 1
            working.append(GroceryListItem(
                id=0,  # Assigned by the store
                name=target_name,
                quantity=entry.quantity,
                note=entry.note,
                order=next_order,
            ))
        return EntryOutcome("add", entry, EntryStatus.APPLIED)


def execute_plan(
    plan: Plan,
    operations: GroceryListOperations,
    items: list[GroceryListItem],
    floor_policy: AdjustFloorPolicy | None = None,
) -> ExecutionResult:
    """Shortcut for PlanExecutor(operations, floor_policy).execute(plan, items)."""
    return PlanExecutor(operations, floor_policy).execute(plan, items)
