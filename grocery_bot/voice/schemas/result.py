"""
Plan Execution Result.

Defines the per-entry outcome records and the aggregate result returned by
the plan executor. A plan can be partially applied, so the result keeps one
outcome per entry instead of a single success flag.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .plan import AddEntry, AdjustEntry, RemoveEntry


class EntryStatus(str, Enum):
    """What happened to a single plan entry during execution."""
    APPLIED = "applied"
    NO_MATCH = "no_match"  # Remove/adjust target not on the list; not an error
    FAILED = "failed"  # The persistence write raised


@dataclass
class EntryOutcome:
    """Result of applying one entry."""
    operation: str  # "adjust" | "remove" | "add"
    entry: AddEntry | RemoveEntry | AdjustEntry
    status: EntryStatus
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "operation": self.operation,
            "entry": self.entry.model_dump(exclude_none=True),
            "status": self.status.value,
            "error": self.error,
        }


@dataclass
class ExecutionResult:
    """Aggregate result of executing a plan."""
    outcomes: list[EntryOutcome] = field(default_factory=list)

    @property
    def applied(self) -> list[EntryOutcome]:
        return [o for o in self.outcomes if o.status is EntryStatus.APPLIED]

    @property
    def no_match(self) -> list[EntryOutcome]:
        return [o for o in self.outcomes if o.status is EntryStatus.NO_MATCH]

    @property
    def failed(self) -> list[EntryOutcome]:
        return [o for o in self.outcomes if o.status is EntryStatus.FAILED]

    @property
    def ok(self) -> bool:
        """True when no write failed."""
        return not self.failed

    @property
    def is_partial(self) -> bool:
        """True when some writes failed and others went through."""
        return bool(self.failed) and bool(self.applied)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "partial": self.is_partial,
            "outcomes": [o.to_dict() for o in self.outcomes],
        }
