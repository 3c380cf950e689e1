"""
Tests for plan validation and LLM payload coercion.
"""

from grocery_bot.voice.parsers.validators import (
    EMPTY_PLAN_ERROR,
    coerce_plan,
    validate_plan,
)
from grocery_bot.voice.schemas import AddEntry, RemoveEntry, AdjustEntry, Plan
from grocery_bot.voice.schemas.parser_responses import LLMPlanPayload


class TestValidatePlan:
    """Tests for validate_plan."""

    def test_empty_plan_is_invalid(self):
        assert validate_plan(Plan.empty()) == (False, EMPTY_PLAN_ERROR)

    def test_plan_with_entries_is_valid(self):
        plan = Plan(remove=(RemoveEntry(name="milk"),))
        assert validate_plan(plan) == (True, None)


class TestCoercePlan:
    """Tests for coerce_plan."""

    def test_from_dict(self):
        plan = coerce_plan({
            "add": [{"name": "chickens", "quantity": 2}, {"name": "milk", "note": "when cheap"}],
            "remove": [{"name": "eggs"}],
            "adjust": [{"name": "apples", "delta": -2}],
        }, raw="original text")

        assert plan.add == (
            AddEntry(name="chickens", quantity=2),
            AddEntry(name="milk", quantity=1, note="when cheap"),
        )
        assert plan.remove == (RemoveEntry(name="eggs"),)
        assert plan.adjust == (AdjustEntry(name="apples", delta=-2),)
        assert plan.raw == "original text"

    def test_from_payload_model(self):
        payload = LLMPlanPayload.model_validate({"remove": [{"name": "bread"}]})
        plan = coerce_plan(payload, raw="remove bread")
        assert plan.remove == (RemoveEntry(name="bread"),)

    def test_drops_blank_names(self):
        plan = coerce_plan({
            "add": [{"name": "   "}],
            "remove": [{"name": ""}],
            "adjust": [{"name": " ", "delta": 1}],
        }, raw="")
        assert plan.is_empty

    def test_drops_non_positive_quantities(self):
        plan = coerce_plan({"add": [{"name": "milk", "quantity": 0}, {"name": "eggs", "quantity": -2}]}, raw="")
        assert plan.add == ()

    def test_drops_oversized_values(self):
        plan = coerce_plan({
            "add": [{"name": "milk", "quantity": 10 ** 20}, {"name": "eggs", "quantity": 2}],
            "adjust": [{"name": "apples", "delta": -(10 ** 20)}],
        }, raw="")
        assert plan.add == (AddEntry(name="eggs", quantity=2),)
        assert plan.adjust == ()

    def test_drops_zero_deltas(self):
        plan = coerce_plan({"adjust": [{"name": "apples", "delta": 0}]}, raw="")
        assert plan.adjust == ()

    def test_collapses_whitespace_and_blank_notes(self):
        plan = coerce_plan({"add": [{"name": "  pork   chops ", "note": "  "}]}, raw="")
        assert plan.add == (AddEntry(name="pork chops", quantity=1),)
