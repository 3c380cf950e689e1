"""
LLM-Powered Plan Parser.

This module sends a grocery voice command to an LLM through instructor/OpenAI
and turns the structured answer into the same Plan shape the deterministic
compiler produces. The deterministic compiler is always the fallback, so a
missing API key or a model error never loses the user's command.
"""

import os
import logging

import instructor
from openai import OpenAI

from ...config import LLM_PLAN_MODEL, is_llm_plan_enabled
from ...logging_config import preview_utterance
from ..schemas import Plan
from ..schemas.parser_responses import VoicePlanResponse
from .deterministic import compile_plan
from .validators import coerce_plan

logger = logging.getLogger(__name__)


VOICE_PLAN_SYSTEM_PROMPT = """You are an assistant that converts grocery-related natural language into a machine-readable plan for a grocery list.

Return a summary and a plan:
- summary: plain-text bullets grouped by Add/Remove/Adjust, for example
  Add:
  - 2 × chickens
  - 3 × steaks
  Remove:
  - milk
  Adjust:
  - +2 apples
- plan.add: items to add, each with name, optional quantity, optional note
- plan.remove: items to take off the list, each with name
- plan.adjust: quantity changes to items already on the list, each with name and delta

Rules:
- Split enumerations like "add two chickens three steaks and four pork chops" into separate items with correct quantities.
- Numbers may be words (two, three, four) or digits (2, 3, 4).
- Merge duplicates by case-insensitive name.
- quantity defaults to 1 if omitted.
- For adjustments, positive delta means increase, negative means decrease.
- Put qualifiers in parentheses ("milk (when cheap)") into note.
- If nothing actionable, return an empty plan and a helpful summary.
"""


def get_instructor_client():
    """Get instructor-wrapped OpenAI client."""
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise ValueError("OPENAI_API_KEY not set")
    return instructor.from_openai(OpenAI(api_key=api_key))


def parse_voice_plan_llm(
    user_input: str,
    client: instructor.Instructor | None = None,
    model: str | None = None,
) -> Plan:
    """
    Parse a voice command with the LLM.

    Args:
        user_input: Transcript or typed text
        client: Optional pre-created instructor client
        model: Model to use; defaults to LLM_PLAN_MODEL

    Returns:
        Plan built from the model's answer, with `raw` set to user_input

    Raises:
        ValueError: OPENAI_API_KEY is not set and no client was given
        Any error from the OpenAI client or instructor validation
    """
    if client is None:
        client = get_instructor_client()

    response = client.chat.completions.create(
        model=model or LLM_PLAN_MODEL,
        response_model=VoicePlanResponse,
        temperature=0.1,
        messages=[
            {"role": "system", "content": VOICE_PLAN_SYSTEM_PROMPT},
            {"role": "user", "content": f"User request: {user_input}"},
        ],
    )
    logger.debug("LLM plan summary: %s", response.summary)

    return coerce_plan(response.plan, raw=user_input)


def parse_voice_plan(
    user_input: str | None,
    use_llm: bool | None = None,
    client: instructor.Instructor | None = None,
    model: str | None = None,
) -> tuple[Plan, str]:
    """Parse a voice command into a Plan.

    Tries the LLM first when enabled, falling back to the deterministic
    compiler on any LLM failure.

    Args:
        user_input: Transcript or typed text
        use_llm: Force the LLM path on or off; None uses LLM_PLAN_ENABLED
        client: Optional pre-created instructor client for the LLM path
        model: Model to use for the LLM path

    Returns:
        Tuple of (plan, source) where source is "llm" or "deterministic"
    """
    if not user_input or not user_input.strip():
        return Plan.empty(user_input), "deterministic"

    if use_llm is None:
        use_llm = is_llm_plan_enabled()

    if use_llm:
        try:
            plan = parse_voice_plan_llm(user_input, client=client, model=model)
            logger.info("Parsed voice plan with LLM: %s", preview_utterance(user_input))
            return plan, "llm"
        except Exception as e:
            logger.warning("LLM plan parse failed, using deterministic parser: %s", e)

    return compile_plan(user_input), "deterministic"
