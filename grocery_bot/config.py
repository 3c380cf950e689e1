"""
Configuration Module for Grocery Bot
====================================

This module centralizes the configuration settings and environment variables
used by the grocery list voice assistant. Values are read from the
environment once at import time (``main.py`` loads ``.env`` first).

Configuration Categories:
-------------------------
- **Database**: Connection URL for the grocery list store.

- **Input Validation**: Maximum utterance length accepted by the API, to keep
  transcripts (and LLM token usage) bounded.

- **Plan Execution**: What a quantity decrease does when it reaches the
  bottom of the range (see AdjustFloorPolicy).

- **LLM Plan Producer**: Whether voice commands are first sent to the
  LLM-backed parser, and which model it uses. The deterministic compiler
  is always the fallback.

- **CORS Settings**: Allowed origins for the frontend.

Environment Variables:
----------------------
- DATABASE_URL: SQLAlchemy URL (default: "sqlite:///./grocery_bot.db")
- MAX_UTTERANCE_LENGTH: Max accepted utterance length (default: 2000)
- MAX_ITEM_QUANTITY: Largest quantity or adjustment a single entry may carry
  (default: 999)
- ADJUST_FLOOR_POLICY: clamp_to_one | clamp_to_zero | delete_at_zero
  (default: "clamp_to_one")
- LLM_PLAN_ENABLED: Try the LLM parser before the deterministic one
  (default: "false")
- LLM_PLAN_MODEL: Model name for the LLM parser (default: "gpt-4o-mini")
- OPENAI_API_KEY: Required only when LLM_PLAN_ENABLED is true
- CORS_ORIGINS: Comma-separated allowed origins (default: "*")

Usage:
------
    from grocery_bot.config import (
        MAX_UTTERANCE_LENGTH,
        get_adjust_floor_policy,
        is_llm_plan_enabled,
    )
"""

import logging
import os
from typing import List

logger = logging.getLogger(__name__)


# =============================================================================
# Database Configuration
# =============================================================================

DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./grocery_bot.db")


# =============================================================================
# Input Validation Configuration
# =============================================================================

# Maximum allowed utterance length in characters
MAX_UTTERANCE_LENGTH: int = int(os.getenv("MAX_UTTERANCE_LENGTH", "2000"))

# Upper bound for an entry quantity or the size of an adjustment; keeps
# stored quantities well inside a 64-bit INTEGER column
MAX_ITEM_QUANTITY: int = int(os.getenv("MAX_ITEM_QUANTITY", "999"))


# =============================================================================
# Plan Execution Configuration
# =============================================================================

# Grocery list quantities never go below 1 in the list UI, so clamping to one
# is the default
ADJUST_FLOOR_POLICY: str = os.getenv("ADJUST_FLOOR_POLICY", "clamp_to_one").strip().lower()


def get_adjust_floor_policy():
    """
    Return the configured AdjustFloorPolicy.

    Unknown values fall back to CLAMP_TO_ONE with a warning. Reads the
    module-level value on every call so tests can override it.

    Returns:
        AdjustFloorPolicy member
    """
    # Import here to avoid circular imports
    from .voice.schemas.policies import AdjustFloorPolicy

    try:
        return AdjustFloorPolicy(ADJUST_FLOOR_POLICY)
    except ValueError:
        logger.warning(
            "Unknown ADJUST_FLOOR_POLICY %r, using %s",
            ADJUST_FLOOR_POLICY, AdjustFloorPolicy.CLAMP_TO_ONE.value,
        )
        return AdjustFloorPolicy.CLAMP_TO_ONE


# =============================================================================
# LLM Plan Producer Configuration
# =============================================================================

LLM_PLAN_ENABLED: bool = os.getenv("LLM_PLAN_ENABLED", "false").lower() == "true"
LLM_PLAN_MODEL: str = os.getenv("LLM_PLAN_MODEL", "gpt-4o-mini")


def is_llm_plan_enabled() -> bool:
    """Return whether the LLM plan producer should be tried first."""
    return LLM_PLAN_ENABLED


# =============================================================================
# CORS Configuration
# =============================================================================

_cors_origins_env = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in _cors_origins_env.split(",")
    if origin.strip()
] or ["*"]
