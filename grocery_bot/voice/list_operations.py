"""
Grocery List Operations.

The plan executor never owns list storage. It talks to whatever holds the
list through the narrow GroceryListOperations protocol below, which has
exactly the three by-name mutations a plan needs.

Implementations:
- InMemoryGroceryList: a plain list of items, used by tests and as a
  scratch list
- services.grocery_list.SqlGroceryList: the SQLAlchemy-backed production list
"""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

logger = logging.getLogger(__name__)


class PersistenceWriteError(Exception):
    """A single list mutation could not be written."""


def match_key(name: str) -> str:
    """Key used for name matching: case-insensitive, whitespace-trimmed."""
    return name.strip().lower()


@dataclass(frozen=True)
class GroceryListItem:
    """One row of the grocery list as seen by the executor."""
    id: int
    name: str
    quantity: int
    note: str | None = None
    order: int = 0


def find_index(items: list[GroceryListItem], name: str) -> int | None:
    """Position of the first item whose name matches, or None."""
    key = match_key(name)
    for index, item in enumerate(items):
        if match_key(item.name) == key:
            return index
    return None


class GroceryListOperations(Protocol):
    """The list mutations the plan executor depends on."""

    def adjust_quantity_by_name(self, name: str, delta: int) -> None:
        ...

    def remove_by_name(self, name: str) -> None:
        ...

    def add_or_increase_by_name(self, name: str, quantity: int, note: str | None = None) -> None:
        ...


class InMemoryGroceryList:
    """List operations over an in-process list of GroceryListItem."""

    def __init__(self, items: list[GroceryListItem] | None = None):
        self._items: list[GroceryListItem] = list(items or [])
        self._next_id = max((item.id for item in self._items), default=0) + 1

    def list_items(self) -> list[GroceryListItem]:
        """Snapshot of the list in display order."""
        return sorted(self._items, key=lambda item: item.order)

    def adjust_quantity_by_name(self, name: str, delta: int) -> None:
        index = find_index(self._items, name)
        if index is None:
            return
        item = self._items[index]
        self._items[index] = replace(item, quantity=item.quantity + delta)

    def remove_by_name(self, name: str) -> None:
        index = find_index(self._items, name)
        if index is not None:
            del self._items[index]

    def add_or_increase_by_name(self, name: str, quantity: int, note: str | None = None) -> None:
        index = find_index(self._items, name)
        if index is not None:
            item = self._items[index]
            self._items[index] = replace(
                item,
                quantity=item.quantity + quantity,
                note=note if note else item.note,
            )
            return

        next_order = max((item.order for item in self._items), default=-1) + 1
        self._items.append(GroceryListItem(
            id=self._next_id,
            name=name.strip(),
            quantity=quantity,
            note=note,
            order=next_order,
        ))
        self._next_id += 1
