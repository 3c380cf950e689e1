"""
LLM Parser Response Schemas.

Pydantic models used as instructor response models for the LLM-backed plan
producer. They are deliberately looser than the Plan models (quantities may
be missing or zero, deltas may be zero) because model output is not trusted;
validators.coerce_plan turns them into a strict Plan.
"""

from pydantic import BaseModel, Field


class LLMAddItem(BaseModel):
    """An item the user wants added."""
    name: str = Field(description="Item name, e.g. 'pork chops'")
    quantity: int | None = Field(
        default=None,
        description="How many to add. Omit if the user gave no number"
    )
    note: str | None = Field(
        default=None,
        description="Any qualifier such as 'when cheap' or 'ripe'"
    )


class LLMRemoveItem(BaseModel):
    """An item the user wants taken off the list."""
    name: str = Field(description="Item name to remove")


class LLMAdjustItem(BaseModel):
    """A change to the quantity of an item already on the list."""
    name: str = Field(description="Item name to adjust")
    delta: int = Field(description="Positive to increase, negative to decrease")


class LLMPlanPayload(BaseModel):
    """The machine-readable part of the LLM answer."""
    add: list[LLMAddItem] = Field(default_factory=list)
    remove: list[LLMRemoveItem] = Field(default_factory=list)
    adjust: list[LLMAdjustItem] = Field(default_factory=list)


class VoicePlanResponse(BaseModel):
    """Parser output for a grocery voice command."""
    summary: str = Field(
        default="",
        description="Plain-text bullets grouped by Add/Remove/Adjust"
    )
    plan: LLMPlanPayload = Field(default_factory=LLMPlanPayload)
