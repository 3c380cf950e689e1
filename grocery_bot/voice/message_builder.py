"""
Message Builder for Voice Plans.

This module builds the text shown to the user around a voice command: the
confirmation summary of a compiled plan, and the message after executing it.
"""

from .schemas import EntryOutcome, ExecutionResult, Plan

NOTHING_ACTIONABLE_MESSAGE = "No actionable items detected."


class PlanMessageBuilder:
    """
    Handles message construction for voice plans.

    Summaries are grouped by Add/Remove/Adjust in that order, which is the
    order users read them in, not the order the executor applies them.
    """

    MULTIPLY_SIGN = "×"

    def format_delta(self, delta: int) -> str:
        """Format an adjustment delta with an explicit sign (+2, -1)."""
        return f"+{delta}" if delta > 0 else str(delta)

    def build_summary(self, plan: Plan) -> str:
        """Build the confirmation summary for a plan."""
        if plan.is_empty:
            return NOTHING_ACTIONABLE_MESSAGE

        lines: list[str] = []
        if plan.add:
            lines.append("Add:")
            for entry in plan.add:
                line = f"- {entry.quantity} {self.MULTIPLY_SIGN} {entry.name}"
                if entry.note:
                    line += f" ({entry.note})"
                lines.append(line)
        if plan.remove:
            lines.append("Remove:")
            lines.extend(f"- {entry.name}" for entry in plan.remove)
        if plan.adjust:
            lines.append("Adjust:")
            lines.extend(f"- {self.format_delta(entry.delta)} {entry.name}" for entry in plan.adjust)

        return "\n".join(lines)

    def describe_outcome(self, outcome: EntryOutcome) -> str:
        """Short description of one entry, e.g. 'add milk'."""
        return f"{outcome.operation} {outcome.entry.name}"

    def build_execution_message(self, result: ExecutionResult) -> str:
        """Build the message shown after a plan has been executed."""
        applied = len(result.applied)
        noun = "item" if applied == 1 else "items"

        if not result.failed:
            message = f"Updated {applied} {noun}."
        elif not result.applied:
            message = "Couldn't update your list."
        else:
            message = f"Updated {applied} {noun}, but some changes didn't save."

        if result.failed:
            failed = ", ".join(self.describe_outcome(o) for o in result.failed)
            message += f" Failed: {failed}."
        if result.no_match:
            missing = ", ".join(o.entry.name for o in result.no_match)
            message += f" Not on your list: {missing}."

        return message
