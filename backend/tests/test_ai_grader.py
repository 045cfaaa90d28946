from __future__ import annotations

import json

import httpx
import pytest
from respx import MockRouter

from pte_scoring.scoring.ai_grader import extract_json, result_from_ai
from pte_scoring.scoring.engine import ScoringEngine
from pte_scoring.scoring.grader import grade
from pte_scoring.scoring.models import FormCheck, Passage
from pte_scoring.settings import settings


AI_PAYLOAD = {
    "trait_scores": {
        "form": {"value": 1, "word_count": 27, "notes": "Valid form"},
        "content": {
            "value": 2,
            "topic_captured": True,
            "pivot_captured": True,
            "conclusion_captured": False,
            "notes": "Conclusion only implied",
        },
        "grammar": {"value": 2, "has_connector": True, "notes": "Good linking"},
        "vocabulary": {"value": 2, "notes": "Appropriate"},
    },
    "feedback": "Mention the conclusion explicitly.",
}


def _anthropic_response(text: str) -> httpx.Response:
    return httpx.Response(200, json={"content": [{"type": "text", "text": text}]})


@pytest.fixture
def api_key(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setattr(settings, "anthropic_api_key", "test-key")
    return "test-key"


class TestExtractJson:
    def test_bare_object(self) -> None:
        assert extract_json('{"a": 1}') == {"a": 1}

    def test_fenced_block(self) -> None:
        assert extract_json('Here you go:\n```json\n{"a": 1}\n```\nThanks') == {"a": 1}

    def test_object_embedded_in_prose(self) -> None:
        assert extract_json('Result: {"a": {"b": 2}} done') == {"a": {"b": 2}}

    @pytest.mark.parametrize("text", ["", "not json", "[1, 2]", "{broken"])
    def test_unparsable(self, text: str) -> None:
        with pytest.raises(ValueError):
            extract_json(text)


def test_ai_values_are_clamped(engine: ScoringEngine, good_summary: str) -> None:
    form = FormCheck(word_count=27, is_valid=True)
    data = {
        "trait_scores": {
            "content": {"value": 9},
            "grammar": {"value": -3},
            "vocabulary": {"value": "abc"},
        }
    }

    result = result_from_ai(data, good_summary, form, engine)

    assert result.trait_scores.content.value == 3
    assert result.trait_scores.grammar.value == 0
    assert result.trait_scores.vocabulary.value == 2
    assert result.raw_score == 6
    assert result.feedback == "Summary evaluated"
    assert result.scoring_mode == "ai"


def test_fractional_ai_values_round_half_up(engine: ScoringEngine, good_summary: str) -> None:
    form = FormCheck(word_count=27, is_valid=True)
    data = {"trait_scores": {"content": {"value": 2.5}, "grammar": {"value": 0.5}, "vocabulary": {"value": 1.5}}}

    result = result_from_ai(data, good_summary, form, engine)

    assert result.trait_scores.content.value == 3
    assert result.trait_scores.grammar.value == 1
    assert result.trait_scores.vocabulary.value == 2


def test_ai_response_without_traits_is_rejected(engine: ScoringEngine, good_summary: str) -> None:
    with pytest.raises(ValueError):
        result_from_ai({"feedback": "ok"}, good_summary, FormCheck(word_count=27, is_valid=True), engine)


@pytest.mark.asyncio
async def test_ai_result_is_used_when_available(
    api_key: str, respx_mock: MockRouter, passage: Passage, good_summary: str
) -> None:
    route = respx_mock.post(settings.anthropic_base_url).mock(return_value=_anthropic_response(json.dumps(AI_PAYLOAD)))

    result = await grade(good_summary, passage)

    assert route.call_count == 1
    request = route.calls.last.request
    assert request.headers["x-api-key"] == api_key
    body = json.loads(request.content)
    assert body["model"] == settings.anthropic_model
    assert "rising youth unemployment rates" in body["messages"][0]["content"]
    assert result.scoring_mode == "ai"
    assert result.trait_scores.content.value == 2
    assert not result.trait_scores.content.conclusion_captured
    assert result.raw_score == 7
    assert result.overall_score == 79
    assert result.band == "Band 9"
    assert result.feedback == "Mention the conclusion explicitly."
    assert result.grammar_details.connector_type == "contrast"
    assert result.grammar_details.connector == "however"


@pytest.mark.asyncio
async def test_fenced_ai_output_is_accepted(
    api_key: str, respx_mock: MockRouter, passage: Passage, good_summary: str
) -> None:
    respx_mock.post(settings.anthropic_base_url).mock(
        return_value=_anthropic_response(f"```json\n{json.dumps(AI_PAYLOAD)}\n```")
    )

    result = await grade(good_summary, passage)

    assert result.scoring_mode == "ai"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, text="upstream error"),
        httpx.Response(401, json={"error": "invalid key"}),
        _anthropic_response("I cannot score this."),
        httpx.Response(200, json={"unexpected": True}),
        httpx.Response(200, text="<html>"),
    ],
)
async def test_failures_fall_back_to_local_without_retry(
    api_key: str, respx_mock: MockRouter, passage: Passage, good_summary: str, response: httpx.Response
) -> None:
    route = respx_mock.post(settings.anthropic_base_url).mock(return_value=response)

    result = await grade(good_summary, passage)

    assert route.call_count == 1
    assert result.scoring_mode == "local"
    assert result.raw_score == 8


@pytest.mark.asyncio
async def test_network_error_falls_back_to_local(
    api_key: str, respx_mock: MockRouter, passage: Passage, good_summary: str
) -> None:
    respx_mock.post(settings.anthropic_base_url).mock(side_effect=httpx.ConnectError("connection refused"))

    result = await grade(good_summary, passage)

    assert result.scoring_mode == "local"


@pytest.mark.asyncio
async def test_missing_credential_skips_remote_call(respx_mock: MockRouter, passage: Passage, good_summary: str) -> None:
    result = await grade(good_summary, passage)

    assert len(respx_mock.calls) == 0
    assert result.scoring_mode == "local"


@pytest.mark.asyncio
async def test_form_failure_never_reaches_remote(api_key: str, respx_mock: MockRouter, passage: Passage) -> None:
    result = await grade("Rates rose.", passage)

    assert len(respx_mock.calls) == 0
    assert result.raw_score == 0
