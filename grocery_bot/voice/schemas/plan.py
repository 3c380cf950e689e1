"""
Plan Schemas.

This module contains the Pydantic models that make up a compiled voice Plan:
the three entry types and the Plan container. Both the deterministic compiler
and the LLM-backed producer emit exactly this shape, so downstream code
(confirmation, execution, the HTTP API) does not care where a Plan came from.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...config import MAX_ITEM_QUANTITY


class AddEntry(BaseModel):
    """Create an item, or increase its quantity if it is already on the list."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Item name as spoken, lower-cased")
    quantity: int = Field(
        default=1, ge=1, le=MAX_ITEM_QUANTITY, description="How many to add (default 1)"
    )
    note: str | None = Field(
        default=None,
        description="Optional note from a trailing parenthesis, e.g. 'when cheap'"
    )


class RemoveEntry(BaseModel):
    """Delete the list item whose name matches."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)


class AdjustEntry(BaseModel):
    """Change the quantity of an existing list item by a signed delta."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    delta: int = Field(
        ge=-MAX_ITEM_QUANTITY,
        le=MAX_ITEM_QUANTITY,
        description="Positive to increase, negative to decrease; never 0",
    )

    @field_validator("delta")
    @classmethod
    def _delta_not_zero(cls, value: int) -> int:
        if value == 0:
            raise ValueError("delta must not be 0")
        return value


class Plan(BaseModel):
    """
    A compiled, immutable set of list mutations.

    Entry order inside each sequence is the order the items were mentioned.
    The executor decides the order *between* sequences (adjust, remove, add).
    """
    model_config = ConfigDict(frozen=True)

    add: tuple[AddEntry, ...] = ()
    remove: tuple[RemoveEntry, ...] = ()
    adjust: tuple[AdjustEntry, ...] = ()
    raw: str = ""

    @classmethod
    def empty(cls, raw: str | None = "") -> "Plan":
        return cls(raw=raw or "")

    @property
    def is_empty(self) -> bool:
        return not (self.add or self.remove or self.adjust)

    @property
    def entry_count(self) -> int:
        return len(self.add) + len(self.remove) + len(self.adjust)

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON wire shape (absent notes are omitted)."""
        return {
            "add": [entry.model_dump(exclude_none=True) for entry in self.add],
            "remove": [entry.model_dump() for entry in self.remove],
            "adjust": [entry.model_dump() for entry in self.adjust],
            "raw": self.raw,
        }

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "Plan":
        """Parse the JSON wire shape back into a Plan."""
        return cls.model_validate(data)
