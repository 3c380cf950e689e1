"""
Adjust Floor Policy Definitions.

This module defines the AdjustFloorPolicy enum that decides what happens
when a quantity adjustment would take a list item to zero or below.
"""

from enum import Enum


class AdjustFloorPolicy(str, Enum):
    """What a decrease does when it reaches the bottom of the quantity range."""
    CLAMP_TO_ONE = "clamp_to_one"  # Quantity never drops below 1 (the list UI minimum)
    CLAMP_TO_ZERO = "clamp_to_zero"  # Quantity may sit at 0; the row stays on the list
    DELETE_AT_ZERO = "delete_at_zero"  # Reaching 0 or below removes the row

    def apply(self, new_quantity: int) -> int:
        """Clamp a raw adjusted quantity according to this policy.

        DELETE_AT_ZERO returns the raw value clamped to 0; the executor
        treats 0 as "delete the row".
        """
        if self is AdjustFloorPolicy.CLAMP_TO_ONE:
            return max(1, new_quantity)
        return max(0, new_quantity)
