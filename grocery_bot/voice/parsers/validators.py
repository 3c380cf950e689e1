"""
Plan Validation Functions.

This module contains the functions that check plans before they are shown
for confirmation or executed, and that turn loosely-typed LLM output into a
strict Plan.
"""

import logging
from typing import Any

from ...config import MAX_ITEM_QUANTITY
from ..schemas import AddEntry, RemoveEntry, AdjustEntry, Plan
from ..schemas.parser_responses import LLMPlanPayload

logger = logging.getLogger(__name__)

EMPTY_PLAN_ERROR = "No items were detected in your voice input."


def _clean_text(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = " ".join(value.split())
    return cleaned or None


def coerce_plan(payload: LLMPlanPayload | dict[str, Any], raw: str) -> Plan:
    """
    Build a strict Plan from an LLM plan payload.

    Entries the Plan model would reject are dropped rather than failing the
    whole plan:
    - blank names
    - add quantities outside 1..MAX_ITEM_QUANTITY (a missing quantity becomes 1)
    - adjust deltas of 0 or larger than MAX_ITEM_QUANTITY either way

    Args:
        payload: LLMPlanPayload, or a dict in the same shape
        raw: The original utterance, kept on the Plan

    Returns:
        Plan with entries in the order the model listed them
    """
    if not isinstance(payload, LLMPlanPayload):
        payload = LLMPlanPayload.model_validate(payload)

    add = []
    for item in payload.add:
        name = _clean_text(item.name)
        if not name:
            logger.debug("Dropping LLM add entry with blank name")
            continue
        quantity = 1 if item.quantity is None else item.quantity
        if not 1 <= quantity <= MAX_ITEM_QUANTITY:
            logger.debug("Dropping LLM add entry '%s' with quantity %s", name, quantity)
            continue
        add.append(AddEntry(name=name, quantity=quantity, note=_clean_text(item.note)))

    remove = []
    for item in payload.remove:
        name = _clean_text(item.name)
        if name:
            remove.append(RemoveEntry(name=name))

    adjust = []
    for item in payload.adjust:
        name = _clean_text(item.name)
        if not name or item.delta == 0 or abs(item.delta) > MAX_ITEM_QUANTITY:
            logger.debug("Dropping LLM adjust entry %r", item)
            continue
        adjust.append(AdjustEntry(name=name, delta=item.delta))

    return Plan(add=tuple(add), remove=tuple(remove), adjust=tuple(adjust), raw=raw or "")


def validate_plan(plan: Plan) -> tuple[bool, str | None]:
    """
    Check that a plan is worth confirming or executing.

    Returns:
        Tuple of (is_valid, error_message).
        If valid: (True, None)
        If invalid: (False, user-friendly error message)
    """
    if plan.is_empty:
        return (False, EMPTY_PLAN_ERROR)
    return (True, None)
