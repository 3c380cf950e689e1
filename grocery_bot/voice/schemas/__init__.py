"""
Voice Plan Schemas.

This package contains the Pydantic models and data structures shared by the
voice command compiler, the LLM plan producer and the plan executor.
"""

from .policies import AdjustFloorPolicy
from .plan import (
    AddEntry,
    RemoveEntry,
    AdjustEntry,
    Plan,
)
from .result import (
    EntryStatus,
    EntryOutcome,
    ExecutionResult,
)
from .parser_responses import (
    LLMAddItem,
    LLMRemoveItem,
    LLMAdjustItem,
    LLMPlanPayload,
    VoicePlanResponse,
)

__all__ = [
    # Policies
    "AdjustFloorPolicy",
    # Plan
    "AddEntry",
    "RemoveEntry",
    "AdjustEntry",
    "Plan",
    # Execution result
    "EntryStatus",
    "EntryOutcome",
    "ExecutionResult",
    # LLM parser responses
    "LLMAddItem",
    "LLMRemoveItem",
    "LLMAdjustItem",
    "LLMPlanPayload",
    "VoicePlanResponse",
]
