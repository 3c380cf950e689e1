"""
Parsers Package.

This package contains the functions that turn a grocery voice command into
a Plan.

Exports:
- Deterministic Parsers: Regex/token-based voice command compiler
- LLM Parsers: OpenAI/instructor-based plan producer with deterministic fallback
- Validators: Plan validation and coercion of LLM output
- Constants: Number words, unit and filler word lists, intent patterns
"""

from .deterministic import (
    normalize_utterance,
    split_segments,
    resolve_quantity,
    clean_item_name,
    extract_note,
    compile_plan,
)

from .llm_parsers import (
    VOICE_PLAN_SYSTEM_PROMPT,
    get_instructor_client,
    parse_voice_plan_llm,
    parse_voice_plan,
)

from .validators import (
    EMPTY_PLAN_ERROR,
    coerce_plan,
    validate_plan,
)

from .constants import (
    WORD_TO_NUM,
    UNIT_WORDS,
    FILLER_WORDS,
)

__all__ = [
    # Deterministic parsers
    "normalize_utterance",
    "split_segments",
    "resolve_quantity",
    "clean_item_name",
    "extract_note",
    "compile_plan",
    # LLM parsers
    "VOICE_PLAN_SYSTEM_PROMPT",
    "get_instructor_client",
    "parse_voice_plan_llm",
    "parse_voice_plan",
    # Validators
    "EMPTY_PLAN_ERROR",
    "coerce_plan",
    "validate_plan",
    # Constants
    "WORD_TO_NUM",
    "UNIT_WORDS",
    "FILLER_WORDS",
]
