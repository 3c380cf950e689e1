"""
Voice Routes for Grocery Bot
============================

This module contains the endpoints behind the voice assistant: compiling a
transcript into a Plan the user confirms, and executing a confirmed Plan.

Endpoints:
----------
- POST /voice/plan: Compile text into a Plan and a confirmation summary
- POST /voice/execute: Apply a confirmed Plan to the grocery list

Flow:
-----
1. The client sends the transcript to /voice/plan
2. The Plan and its summary are shown for confirmation; nothing is written
3. If the user accepts, the client sends the Plan to /voice/execute
4. The Plan is applied adjust -> remove -> add against one snapshot of the
   list, and the per-entry result plus the refreshed list are returned

A declined Plan is simply never sent to /voice/execute.

Partial Success:
----------------
Each entry is written on its own. If some writes fail the response is still
200, with ``result.ok`` false and the failed entries listed, so the client
can retry or tell the user exactly what didn't save.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..schemas.grocery_list import GroceryListItemOut
from ..schemas.voice import (
    PlanCompileRequest,
    PlanCompileResponse,
    PlanExecuteRequest,
    PlanExecuteResponse,
    ExecutionResultOut,
)
from ..services.grocery_list import SqlGroceryList
from ..voice.executor import PlanExecutor
from ..voice.message_builder import PlanMessageBuilder
from ..voice.parsers import parse_voice_plan, validate_plan

logger = logging.getLogger(__name__)

voice_router = APIRouter(prefix="/voice", tags=["Voice"])

_message_builder = PlanMessageBuilder()


@voice_router.post("/plan", response_model=PlanCompileResponse)
def compile_voice_plan(req: PlanCompileRequest) -> PlanCompileResponse:
    """
    Compile a transcript into a Plan for confirmation.

    Never fails on odd input: unparseable text yields an empty plan with
    ``actionable`` false and a "nothing actionable" summary.
    """
    plan, source = parse_voice_plan(req.text, use_llm=req.use_llm)
    logger.info("Voice plan compiled via %s with %d entries", source, plan.entry_count)

    return PlanCompileResponse(
        plan=plan.to_wire(),
        summary=_message_builder.build_summary(plan),
        actionable=not plan.is_empty,
        source=source,
    )


@voice_router.post("/execute", response_model=PlanExecuteResponse)
def execute_voice_plan(
    req: PlanExecuteRequest,
    db: Session = Depends(get_db),
) -> PlanExecuteResponse:
    """
    Apply a confirmed Plan to the grocery list.

    Raises:
        HTTPException 400: the plan has no entries
        HTTPException 503: the list could not be read before execution

    If the list can't be re-read afterwards, `items` is null and the
    per-entry result is still returned.
    """
    is_valid, error = validate_plan(req.plan)
    if not is_valid:
        raise HTTPException(status_code=400, detail=error)

    store = SqlGroceryList(db)
    try:
        snapshot = store.list_items()
    except SQLAlchemyError as e:
        logger.error("Failed to read grocery list before executing plan: %s", e)
        raise HTTPException(status_code=503, detail="Couldn't read your grocery list. Please try again.")

    result = PlanExecutor(store).execute(req.plan, snapshot)
    if result.failed:
        logger.warning("Voice plan partially applied: %d of %d writes failed",
                       len(result.failed), len(result.outcomes))

    # Writes are committed here, so the result goes back even without a refresh
    try:
        items = [GroceryListItemOut.model_validate(item) for item in store.list_items()]
    except SQLAlchemyError as e:
        logger.error("Failed to refresh grocery list after executing plan: %s", e)
        items = None

    return PlanExecuteResponse(
        result=ExecutionResultOut.model_validate(result.to_dict()),
        message=_message_builder.build_execution_message(result),
        items=items,
    )
