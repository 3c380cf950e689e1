"""
Grocery List Service
====================

SQLAlchemy-backed implementation of the list operations the voice plan
executor depends on (see voice.list_operations.GroceryListOperations).

Matching:
---------
Items are matched by name, case-insensitively and ignoring surrounding
whitespace, the same rule the executor uses on its snapshot. When several
rows match, the one highest on the list wins.

Writes:
-------
Each operation is its own transaction and commits immediately, so a plan
is applied one entry at a time. Any error during a write rolls the session
back, so the next entry starts clean, and is re-raised as
PersistenceWriteError for the executor to record.

Usage:
------
    store = SqlGroceryList(db)
    result = PlanExecutor(store).execute(plan, store.list_items())
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models
from ..voice.list_operations import GroceryListItem, PersistenceWriteError, match_key

logger = logging.getLogger(__name__)


def _to_item(row: models.GroceryListItem) -> GroceryListItem:
    return GroceryListItem(
        id=row.id,
        name=row.name,
        quantity=row.quantity,
        note=row.note,
        order=row.sort_order,
    )


class SqlGroceryList:
    """Grocery list stored in the grocery_list_items table."""

    def __init__(self, db: Session):
        self.db = db

    def list_items(self) -> list[GroceryListItem]:
        """Read the whole list in display order."""
        rows = (
            self.db.query(models.GroceryListItem)
            .order_by(models.GroceryListItem.sort_order, models.GroceryListItem.id)
            .all()
        )
        return [_to_item(row) for row in rows]

    @contextmanager
    def _write(self, action: str, name: str) -> Iterator[None]:
        try:
            yield
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to %s '%s': %s", action, name, e)
            raise PersistenceWriteError(f"Could not {action} '{name}'") from e
        except Exception as e:
            # Driver errors SQLAlchemy doesn't wrap (e.g. OverflowError from
            # sqlite3) still leave the session needing a rollback
            self.db.rollback()
            logger.error("Unexpected error trying to %s '%s': %s", action, name, e, exc_info=True)
            raise PersistenceWriteError(f"Could not {action} '{name}'") from e

    def _find_row(self, name: str) -> models.GroceryListItem | None:
        return (
            self.db.query(models.GroceryListItem)
            .filter(func.lower(func.trim(models.GroceryListItem.name)) == match_key(name))
            .order_by(models.GroceryListItem.sort_order, models.GroceryListItem.id)
            .first()
        )

    def adjust_quantity_by_name(self, name: str, delta: int) -> None:
        with self._write("adjust", name):
            row = self._find_row(name)
            if row is None:
                return
            row.quantity = row.quantity + delta

    def remove_by_name(self, name: str) -> None:
        with self._write("remove", name):
            row = self._find_row(name)
            if row is None:
                return
            self.db.delete(row)

    def add_or_increase_by_name(self, name: str, quantity: int, note: str | None = None) -> None:
        with self._write("add", name):
            row = self._find_row(name)
            if row is not None:
                row.quantity = row.quantity + quantity
                if note:
                    row.note = note
                return

            max_order = self.db.query(func.max(models.GroceryListItem.sort_order)).scalar()
            self.db.add(models.GroceryListItem(
                name=name.strip(),
                quantity=quantity,
                note=note,
                sort_order=(max_order + 1) if max_order is not None else 0,
            ))
