from __future__ import annotations

import json
import re
from typing import Any, Dict, Optional

import httpx

from ..llm_client import AnthropicClient
from .aggregator import round_half_up
from .engine import ScoringEngine
from .models import (
	ContentScore,
	FormCheck,
	FormScore,
	GrammarDetails,
	GrammarScore,
	Passage,
	ScoreResult,
	SpellCheckReport,
	TraitScores,
	VocabularyScore,
)


class AIGradingUnavailable(RuntimeError):
	"""The remote grader could not produce a usable result."""


_FENCED_JSON = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")
_BARE_OBJECT = re.compile(r"\{[\s\S]*\}")


def extract_json(text: str) -> Dict[str, Any]:
	"""Extract a JSON object from model output.

	Tries the whole text, then a fenced ```json block, then the outermost
	``{...}`` span.

	Raises:
		ValueError: If no JSON object can be parsed.
	"""
	if not text:
		raise ValueError("Empty AI response")
	candidates = [text]
	fenced = _FENCED_JSON.search(text)
	if fenced:
		candidates.append(fenced.group(1).strip())
	bare = _BARE_OBJECT.search(text)
	if bare:
		candidates.append(bare.group(0))
	for candidate in candidates:
		try:
			data = json.loads(candidate)
		except Exception:
			continue
		if isinstance(data, dict):
			return data
	raise ValueError("Could not parse AI response as JSON")


def build_system_prompt(content_scale: int) -> str:
	if content_scale == 3:
		content_rubric = (
			"CONTENT (0-3): one point each for TOPIC captured, PIVOT accurately represented, CONCLUSION included."
		)
	else:
		content_rubric = (
			"CONTENT (0, 1, or 2):\n"
			"- 2: TOPIC captured + PIVOT accurately represented + CONCLUSION included\n"
			"- 1: TOPIC mentioned but PIVOT or CONCLUSION missing/distorted\n"
			"- 0: TOPIC completely wrong"
		)
	return (
		"You are a PTE Academic examiner. Score based on TOPIC-PIVOT-CONCLUSION structure:\n\n"
		"FORM (0 or 1): Already validated. Return 1.\n\n"
		f"{content_rubric}\n\n"
		"GRAMMAR (0, 1, or 2): 2 with connector, 1 without, 0 with errors\n"
		"VOCABULARY (0, 1, or 2): 2 appropriate, 1 awkward, 0 inappropriate\n\n"
		"Return ONLY valid JSON. No markdown, no explanation."
	)


def build_user_prompt(summary: str, passage: Passage, word_count: int) -> str:
	elements = passage.key_elements
	return (
		f'PASSAGE: "{passage.text}"\n\n'
		f"TOPIC: {elements.topic or 'N/A'}\n"
		f"PIVOT: {elements.pivot or 'N/A'}\n"
		f"CONCLUSION: {elements.conclusion or 'N/A'}\n\n"
		f'SUMMARY: "{summary}"\n\n'
		"Return JSON:\n"
		"{\n"
		'  "trait_scores": {\n'
		f'    "form": {{ "value": 1, "word_count": {word_count}, "notes": "Valid form" }},\n'
		'    "content": { "value": <int>, "topic_captured": true/false, "pivot_captured": true/false, "conclusion_captured": true/false, "notes": "..." },\n'
		'    "grammar": { "value": 0-2, "has_connector": true/false, "notes": "..." },\n'
		'    "vocabulary": { "value": 0-2, "notes": "..." }\n'
		"  },\n"
		'  "feedback": "..."\n'
		"}"
	)


def _clamped(value: Any, default: int, high: int) -> int:
	try:
		number = float(value)
	except (TypeError, ValueError):
		number = float(default)
	if number != number:
		number = float(default)
	return round_half_up(max(0.0, min(float(high), number)))


def _trait(traits: Dict[str, Any], name: str) -> Dict[str, Any]:
	value = traits.get(name)
	return value if isinstance(value, dict) else {}


def result_from_ai(data: Dict[str, Any], summary: str, form: FormCheck, engine: ScoringEngine) -> ScoreResult:
	traits = data.get("trait_scores", data)
	if not isinstance(traits, dict) or not any(k in traits for k in ("content", "grammar", "vocabulary")):
		raise ValueError("AI response is missing trait scores")
	content = _trait(traits, "content")
	grammar = _trait(traits, "grammar")
	vocabulary = _trait(traits, "vocabulary")

	content_value = _clamped(content.get("value"), 1, engine.config.content_scale)
	grammar_value = _clamped(grammar.get("value"), 1, 2)
	vocabulary_value = _clamped(vocabulary.get("value"), 2, 2)
	raw, overall, band = engine.aggregator.totals(1, content_value, grammar_value, vocabulary_value)

	# Error listings stay deterministic regardless of who assigned the trait values
	connector = engine.connector_detector.detect(summary)
	spelling = engine.spell_checker.check(summary)
	issues = engine.grammar_engine.check(summary)
	feedback = data.get("feedback")
	return ScoreResult(
		trait_scores=TraitScores(
			form=FormScore(value=1, word_count=form.word_count, notes="Valid form"),
			content=ContentScore(
				value=content_value,
				topic_captured=bool(content.get("topic_captured")),
				pivot_captured=bool(content.get("pivot_captured")),
				conclusion_captured=bool(content.get("conclusion_captured")),
				notes=str(content.get("notes") or "Content assessed"),
			),
			grammar=GrammarScore(
				value=grammar_value,
				has_connector=bool(grammar.get("has_connector")),
				issue_count=len(spelling) + len(issues),
				notes=str(grammar.get("notes") or "Grammar assessed"),
			),
			vocabulary=VocabularyScore(value=vocabulary_value, notes=str(vocabulary.get("notes") or "Vocabulary assessed")),
		),
		spell_check=SpellCheckReport(errors=spelling),
		grammar_details=GrammarDetails(
			issues=issues,
			has_connector=connector.has_connector,
			connector_type=connector.connector_type,
			connector=connector.connector,
		),
		overall_score=overall,
		raw_score=raw,
		band=band,
		feedback=str(feedback).strip() if feedback else "Summary evaluated",
		scoring_mode="ai",
	)


async def ai_grade(
	client: AnthropicClient,
	summary: str,
	passage: Passage,
	form: FormCheck,
	engine: ScoringEngine,
) -> ScoreResult:
	"""Grade through the remote model; every failure surfaces as ``AIGradingUnavailable``."""
	try:
		raw = await client.generate(
			build_user_prompt(summary, passage, form.word_count),
			system=build_system_prompt(engine.config.content_scale),
		)
		return result_from_ai(extract_json(raw), summary, form, engine)
	except httpx.HTTPStatusError as exc:
		raise AIGradingUnavailable(f"API error {exc.response.status_code}") from exc
	except httpx.HTTPError as exc:
		raise AIGradingUnavailable(f"Request failed: {exc!r}") from exc
	except (ValueError, KeyError, TypeError, RuntimeError) as exc:
		raise AIGradingUnavailable(str(exc)) from exc


async def ai_grade_with_default_client(
	summary: str,
	passage: Passage,
	form: FormCheck,
	engine: ScoringEngine,
	api_key: Optional[str] = None,
) -> ScoreResult:
	try:
		client = AnthropicClient(api_key)
	except ValueError as exc:
		raise AIGradingUnavailable(str(exc)) from exc
	try:
		return await ai_grade(client, summary, passage, form, engine)
	finally:
		await client.aclose()
