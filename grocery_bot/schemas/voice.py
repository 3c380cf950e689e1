"""
Voice Schemas for Grocery Bot
=============================

This module defines Pydantic models for the voice command endpoints, which
compile a transcript into a Plan for confirmation and then execute the
confirmed Plan against the grocery list.

Endpoint Coverage:
------------------
- POST /voice/plan: Compile text into a Plan plus a confirmation summary
- POST /voice/execute: Apply a confirmed Plan to the grocery list

Plan Wire Shape:
----------------
Plans travel as:

    {"add": [{"name", "quantity", "note"?}], "remove": [{"name"}],
     "adjust": [{"name", "delta"}], "raw": "..."}

The execute endpoint validates the Plan it receives with the same models the
compiler produces, so a Plan from the LLM producer, the deterministic
compiler or a client that edited the confirmation are handled alike.

Validation:
-----------
- Utterance length is constrained by MAX_UTTERANCE_LENGTH (default: 2000).
- Entry names must be non-empty, add quantities >= 1, adjust deltas != 0.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ..config import MAX_UTTERANCE_LENGTH
from ..voice.schemas import Plan
from .grocery_list import GroceryListItemOut


class PlanCompileRequest(BaseModel):
    """Request body for POST /voice/plan."""
    text: str = Field(
        max_length=MAX_UTTERANCE_LENGTH,
        description="Transcript or typed command, e.g. 'add two apples and milk'"
    )
    use_llm: Optional[bool] = Field(
        default=None,
        description="Force the LLM parser on or off; defaults to LLM_PLAN_ENABLED"
    )


class PlanCompileResponse(BaseModel):
    """Compiled plan plus the text to show in the confirmation dialog."""
    plan: Dict[str, Any] = Field(description="Plan in wire shape")
    summary: str
    actionable: bool
    source: Literal["llm", "deterministic"]


class PlanExecuteRequest(BaseModel):
    """Request body for POST /voice/execute."""
    plan: Plan


class EntryOutcomeOut(BaseModel):
    """What happened to one plan entry."""
    operation: Literal["adjust", "remove", "add"]
    entry: Dict[str, Any]
    status: Literal["applied", "no_match", "failed"]
    error: Optional[str] = None


class ExecutionResultOut(BaseModel):
    """Per-entry execution report."""
    ok: bool
    partial: bool
    outcomes: List[EntryOutcomeOut]


class PlanExecuteResponse(BaseModel):
    """Execution report, a user-facing message and the refreshed list.

    `items` is None when the list could not be re-read after execution.
    """
    result: ExecutionResultOut
    message: str
    items: Optional[List[GroceryListItemOut]] = None
