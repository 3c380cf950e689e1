"""
Grocery List Schemas for Grocery Bot
====================================

Pydantic models for returning grocery list items from the API.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class GroceryListItemOut(BaseModel):
    """One grocery list row as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    quantity: int
    note: Optional[str] = None
    order: int = 0
