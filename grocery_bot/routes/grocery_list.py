"""
Grocery List Routes for Grocery Bot
===================================

Read access to the grocery list, used by clients to refresh after a voice
plan has been executed.

Endpoints:
----------
- GET /items: List grocery items in display order
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..db import get_db
from ..schemas.grocery_list import GroceryListItemOut
from ..services.grocery_list import SqlGroceryList

logger = logging.getLogger(__name__)

grocery_list_router = APIRouter(prefix="/items", tags=["Grocery List"])


@grocery_list_router.get("", response_model=List[GroceryListItemOut])
def list_grocery_items(
    db: Session = Depends(get_db),
) -> List[GroceryListItemOut]:
    """List grocery items in display order."""
    items = SqlGroceryList(db).list_items()
    return [GroceryListItemOut.model_validate(item) for item in items]
