"""
Deterministic Voice Command Compiler (no LLM).

This module turns a freeform grocery utterance such as
"add two chickens three steaks and four pork chops" into a Plan using
regex and token scanning only. It is the reference implementation of the
Plan shape and the fallback when the LLM producer is disabled or fails.

Pipeline:
    normalize -> classify intent -> split segments -> per segment
    (resolve quantities, extract names and notes) -> assemble Plan

Nothing here keeps module-level state (logging aside), so compiling
the same utterance twice always yields equal Plans.
"""

import logging
import re

from ...config import MAX_ITEM_QUANTITY
from ...logging_config import preview_utterance
from ..schemas import AddEntry, RemoveEntry, AdjustEntry, Plan
from .constants import (
    WORD_TO_NUM,
    UNIT_WORDS,
    FILLER_WORDS,
    REMOVE_PATTERN,
    INCREASE_PATTERN,
    DECREASE_PATTERN,
    ADD_SOFTENER_PATTERN,
    COMMAND_VERB_PATTERN,
    SEGMENT_DELIMITER_PATTERN,
    NOTE_PATTERN,
    NAME_STOP_WORD_PATTERN,
    NAME_EDGE_PUNCTUATION,
)

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")


# =============================================================================
# Normalizer / Segmenter / Quantity Resolver
# =============================================================================

def normalize_utterance(text: str | None) -> str:
    """Trim, lower-case and collapse internal whitespace."""
    if not text:
        return ""
    return " ".join(text.split()).lower()


def split_segments(text: str) -> list[str]:
    """Split on commas, ' and ', ' plus ' into non-empty item phrases."""
    return [part.strip() for part in SEGMENT_DELIMITER_PATTERN.split(text) if part and part.strip()]


def resolve_quantity(token: str | None) -> int | None:
    """Map '3' or 'three' to 3.

    Returns None for anything else, including 0 and numbers above
    MAX_ITEM_QUANTITY.
    """
    if not token:
        return None
    if _DIGITS.fullmatch(token):
        digits = token.lstrip("0")
        # Length check first so a long digit run never reaches int()
        if not digits or len(digits) > len(str(MAX_ITEM_QUANTITY)):
            return None
        value = int(digits)
        return value if value <= MAX_ITEM_QUANTITY else None
    return WORD_TO_NUM.get(token)


# =============================================================================
# Entity Extractor
# =============================================================================

def clean_item_name(text: str) -> str:
    """Strip 'of'/'some', collapse whitespace and trim edge punctuation."""
    name = NAME_STOP_WORD_PATTERN.sub("", text)
    name = " ".join(name.split())
    return name.strip(NAME_EDGE_PUNCTUATION)


def extract_note(text: str) -> tuple[str, str | None]:
    """Split 'milk (when cheap)' into ('milk', 'when cheap').

    Only the first parenthesised group is treated as a note. Text after the
    closing paren stays part of the name.
    """
    match = NOTE_PATTERN.search(text)
    if not match:
        return text.strip(), None
    note = match.group(1).strip() or None
    name = f"{text[:match.start()]} {text[match.end():]}".strip()
    return name, note


def _build_add_entry(tokens: list[str], quantity: int | None) -> AddEntry | None:
    text = " ".join(tokens)
    name, note = extract_note(text)
    name = clean_item_name(name)
    if not name:
        logger.debug("Dropping add group with no item name: %r", text)
        return None
    return AddEntry(name=name, quantity=quantity or 1, note=note)


def _parse_add_segment(segment: str) -> list[AddEntry]:
    """Scan one segment, starting a new item at every quantity token.

    "two chickens three steaks" has no delimiter, so the quantity tokens are
    the only group boundaries.
    """
    entries: list[AddEntry] = []
    quantity: int | None = None
    name_buffer: list[str] = []
    after_quantity = False
    note_depth = 0

    for token in segment.split():
        # Inside a note everything is kept verbatim
        if note_depth > 0 or "(" in token:
            name_buffer.append(token)
            note_depth = max(0, note_depth + token.count("(") - token.count(")"))
            after_quantity = False
            continue

        value = resolve_quantity(token)
        if value is not None:
            if name_buffer:
                entry = _build_add_entry(name_buffer, quantity)
                if entry:
                    entries.append(entry)
                name_buffer = []
            quantity = value
            after_quantity = True
            continue

        if after_quantity and token in UNIT_WORDS:
            after_quantity = False
            continue

        after_quantity = False
        if token in FILLER_WORDS:
            continue
        name_buffer.append(token)

    if name_buffer:
        entry = _build_add_entry(name_buffer, quantity)
        if entry:
            entries.append(entry)

    return entries


# =============================================================================
# Intent Paths
# =============================================================================

def _parse_remove(text: str) -> list[RemoveEntry]:
    entries = []
    for segment in split_segments(text):
        name = clean_item_name(segment)
        if name:
            entries.append(RemoveEntry(name=name))
        else:
            logger.debug("Dropping remove segment with no item name: %r", segment)
    return entries


def _parse_adjust(quantity_token: str, rest: str, sign: int) -> list[AdjustEntry]:
    magnitude = resolve_quantity(quantity_token)
    if magnitude is None:
        logger.debug("Could not resolve adjust quantity %r, using 1", quantity_token)
        magnitude = 1

    entries = []
    for segment in split_segments(rest):
        name = clean_item_name(segment)
        if name:
            entries.append(AdjustEntry(name=name, delta=sign * magnitude))
        else:
            logger.debug("Dropping adjust segment with no item name: %r", segment)
    return entries


def _parse_add(text: str) -> list[AddEntry]:
    text = ADD_SOFTENER_PATTERN.sub("", text, count=1)
    entries: list[AddEntry] = []
    for segment in split_segments(text):
        if COMMAND_VERB_PATTERN.match(segment):
            # Only the leading verb decides the intent; later verbs are item text
            logger.debug("Segment starts with a command verb, treating as item text: %r", segment)
        entries.extend(_parse_add_segment(segment))
    return entries


# =============================================================================
# Plan Assembler
# =============================================================================

def compile_plan(utterance: str | None) -> Plan:
    """
    Compile an utterance into a Plan.

    One intent is chosen for the whole utterance from its leading verb:
    remove/delete/drop/take off -> remove, increase/plus N -> adjust up,
    decrease/subtract/minus N -> adjust down, anything else -> add.
    "add milk, remove eggs" is therefore an add of "milk" and "remove eggs".

    Never raises on malformed text; the worst case is an empty Plan.

    Args:
        utterance: Transcript or typed text

    Returns:
        Plan whose `raw` is the original, unnormalized utterance
    """
    raw = utterance if utterance is not None else ""
    text = normalize_utterance(utterance)
    if not text:
        return Plan.empty(raw)

    remove_match = REMOVE_PATTERN.match(text)
    if remove_match:
        plan = Plan(remove=tuple(_parse_remove(text[remove_match.end():].strip())), raw=raw)
        logger.info("Compiled remove plan (%d entries): %s", len(plan.remove), preview_utterance(text))
        return plan

    adjust_match = INCREASE_PATTERN.match(text)
    sign = 1
    if not adjust_match:
        adjust_match = DECREASE_PATTERN.match(text)
        sign = -1
    if adjust_match:
        quantity_token, rest = adjust_match.groups()
        plan = Plan(adjust=tuple(_parse_adjust(quantity_token, rest, sign)), raw=raw)
        logger.info("Compiled adjust plan (%d entries): %s", len(plan.adjust), preview_utterance(text))
        return plan

    plan = Plan(add=tuple(_parse_add(text)), raw=raw)
    logger.info("Compiled add plan (%d entries): %s", len(plan.add), preview_utterance(text))
    return plan
