"""
Tests for the LLM-backed plan producer.

The OpenAI client is mocked everywhere except the integration class at the
bottom, which only runs with a real OPENAI_API_KEY.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from grocery_bot.voice.parsers import llm_parsers
from grocery_bot.voice.parsers.llm_parsers import (
    get_instructor_client,
    parse_voice_plan,
    parse_voice_plan_llm,
)
from grocery_bot.voice.schemas import AddEntry, RemoveEntry, AdjustEntry
from grocery_bot.voice.schemas.parser_responses import LLMPlanPayload, VoicePlanResponse


def _mock_client(plan: dict, summary: str = "") -> MagicMock:
    mock_client = MagicMock()
    mock_client.chat.completions.create.return_value = VoicePlanResponse(
        summary=summary,
        plan=LLMPlanPayload.model_validate(plan),
    )
    return mock_client


class TestGetInstructorClient:
    """Tests for client creation."""

    def test_missing_api_key_raises(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(ValueError, match="OPENAI_API_KEY"):
            get_instructor_client()


class TestParseVoicePlanLLM:
    """Tests for parse_voice_plan_llm with a mocked client."""

    def test_builds_plan_from_response(self):
        mock_client = _mock_client({
            "add": [{"name": "chickens", "quantity": 2}, {"name": "steaks", "quantity": 3}],
            "remove": [{"name": "milk"}],
            "adjust": [{"name": "apples", "delta": 2}],
        })

        plan = parse_voice_plan_llm("add two chickens three steaks", client=mock_client)

        assert plan.add == (
            AddEntry(name="chickens", quantity=2),
            AddEntry(name="steaks", quantity=3),
        )
        assert plan.remove == (RemoveEntry(name="milk"),)
        assert plan.adjust == (AdjustEntry(name="apples", delta=2),)
        assert plan.raw == "add two chickens three steaks"

    def test_sends_prompt_and_response_model(self):
        mock_client = _mock_client({})

        parse_voice_plan_llm("add milk", client=mock_client, model="gpt-4o")

        call_kwargs = mock_client.chat.completions.create.call_args[1]
        assert call_kwargs["model"] == "gpt-4o"
        assert call_kwargs["response_model"] is VoicePlanResponse
        assert call_kwargs["messages"][0]["content"] == llm_parsers.VOICE_PLAN_SYSTEM_PROMPT
        assert "add milk" in call_kwargs["messages"][1]["content"]

    def test_default_model(self):
        mock_client = _mock_client({})

        parse_voice_plan_llm("add milk", client=mock_client)

        call_kwargs = mock_client.chat.completions.create.call_args[1]
        assert call_kwargs["model"] == llm_parsers.LLM_PLAN_MODEL

    def test_invalid_entries_are_dropped(self):
        mock_client = _mock_client({
            "add": [{"name": "milk", "quantity": 0}, {"name": "eggs"}],
            "adjust": [{"name": "apples", "delta": 0}],
        })

        plan = parse_voice_plan_llm("whatever", client=mock_client)

        assert plan.add == (AddEntry(name="eggs", quantity=1),)
        assert plan.adjust == ()


class TestParseVoicePlan:
    """Tests for the LLM-first parser with deterministic fallback."""

    def test_llm_disabled_uses_deterministic(self):
        mock_client = _mock_client({"add": [{"name": "not used"}]})

        plan, source = parse_voice_plan("remove milk", use_llm=False, client=mock_client)

        assert source == "deterministic"
        assert plan.remove == (RemoveEntry(name="milk"),)
        mock_client.chat.completions.create.assert_not_called()

    def test_llm_enabled(self):
        mock_client = _mock_client({"remove": [{"name": "milk"}]})

        plan, source = parse_voice_plan("please take the milk off", use_llm=True, client=mock_client)

        assert source == "llm"
        assert plan.remove == (RemoveEntry(name="milk"),)

    def test_falls_back_when_llm_raises(self):
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = RuntimeError("API down")

        plan, source = parse_voice_plan("add two apples", use_llm=True, client=mock_client)

        assert source == "deterministic"
        assert plan.add == (AddEntry(name="apples", quantity=2),)

    def test_falls_back_without_api_key(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        plan, source = parse_voice_plan("add milk", use_llm=True)

        assert source == "deterministic"
        assert plan.add == (AddEntry(name="milk", quantity=1),)

    def test_uses_config_when_not_forced(self):
        mock_client = _mock_client({"add": [{"name": "milk"}]})

        with patch.object(llm_parsers, "is_llm_plan_enabled", return_value=True):
            _, source = parse_voice_plan("add milk", client=mock_client)

        assert source == "llm"

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank_input_skips_llm(self, text):
        mock_client = _mock_client({"add": [{"name": "milk"}]})

        plan, source = parse_voice_plan(text, use_llm=True, client=mock_client)

        assert plan.is_empty
        assert source == "deterministic"
        mock_client.chat.completions.create.assert_not_called()


@pytest.mark.skipif(
    not os.getenv("OPENAI_API_KEY"),
    reason="OPENAI_API_KEY not set"
)
class TestLLMParserIntegration:
    """Integration tests that call the real OpenAI API."""

    def test_run_on_enumeration(self):
        plan = parse_voice_plan_llm("add two chickens three steaks and four pork chops")

        quantities = {entry.name: entry.quantity for entry in plan.add}
        assert quantities.get("chickens") == 2
        assert quantities.get("steaks") == 3
        assert quantities.get("pork chops") == 4

    def test_remove(self):
        plan = parse_voice_plan_llm("remove milk")
        assert [entry.name for entry in plan.remove] == ["milk"]
