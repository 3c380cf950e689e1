"""
Voice command package.

Compiles grocery voice/text commands into Plans and applies Plans to a
grocery list:

    plan = compile_plan("add two chickens and remove milk")
    result = PlanExecutor(operations).execute(plan, operations.list_items())
"""

from .schemas import (
    AddEntry,
    RemoveEntry,
    AdjustEntry,
    Plan,
    AdjustFloorPolicy,
    EntryStatus,
    EntryOutcome,
    ExecutionResult,
)
from .parsers import compile_plan, parse_voice_plan, validate_plan
from .list_operations import (
    GroceryListItem,
    GroceryListOperations,
    InMemoryGroceryList,
    PersistenceWriteError,
)
from .executor import PlanExecutor, execute_plan
from .message_builder import PlanMessageBuilder, NOTHING_ACTIONABLE_MESSAGE

__all__ = [
    "AddEntry",
    "RemoveEntry",
    "AdjustEntry",
    "Plan",
    "AdjustFloorPolicy",
    "EntryStatus",
    "EntryOutcome",
    "ExecutionResult",
    "compile_plan",
    "parse_voice_plan",
    "validate_plan",
    "GroceryListItem",
    "GroceryListOperations",
    "InMemoryGroceryList",
    "PersistenceWriteError",
    "PlanExecutor",
    "execute_plan",
    "PlanMessageBuilder",
    "NOTHING_ACTIONABLE_MESSAGE",
]
