"""
Schemas Package for Grocery Bot
===============================

This package contains the Pydantic models used for API request validation
and response serialization. The Plan models themselves live in
``grocery_bot.voice.schemas``; the API schemas wrap them.

Schema Organization:
--------------------
- **voice.py**: Voice plan compile/execute request and response schemas
- **grocery_list.py**: Grocery list item schemas
"""

from .grocery_list import GroceryListItemOut
from .voice import (
    PlanCompileRequest,
    PlanCompileResponse,
    PlanExecuteRequest,
    EntryOutcomeOut,
    ExecutionResultOut,
    PlanExecuteResponse,
)

__all__ = [
    "GroceryListItemOut",
    "PlanCompileRequest",
    "PlanCompileResponse",
    "PlanExecuteRequest",
    "EntryOutcomeOut",
    "ExecutionResultOut",
    "PlanExecuteResponse",
]
