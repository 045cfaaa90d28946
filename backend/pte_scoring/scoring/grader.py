from __future__ import annotations
import logging
from typing import Any, Optional

from ..settings import settings
from .ai_grader import AIGradingUnavailable, ai_grade_with_default_client
from .engine import ScoringEngine, default_engine
from .models import Passage, ScoreResult

logger = logging.getLogger(__name__)


def _coerce_passage(passage: Any) -> Passage:
	if isinstance(passage, Passage):
		return passage
	try:
		return Passage.model_validate(passage)
	except Exception:
		logger.warning("Unusable passage payload, scoring without key elements")
		return Passage(text="")


async def grade(
	summary: Any,
	passage: Any,
	*,
	engine: Optional[ScoringEngine] = None,
	use_ai: Optional[bool] = None,
) -> ScoreResult:
	"""Grade a summary against a passage.

	The remote grader is tried once when an API key is configured; any failure
	falls back to the local engine. Never raises.
	"""
	engine = engine or default_engine
	passage = _coerce_passage(passage)
	form = engine.check_form(summary)
	if not form.is_valid:
		return engine.aggregator.form_failure(form)

	if use_ai is None:
		use_ai = bool(settings.anthropic_api_key)
	if use_ai:
		try:
			result = await ai_grade_with_default_client(summary, passage, form, engine)
			logger.info("Graded with AI (raw_score=%s)", result.raw_score)
			return result
		except AIGradingUnavailable as exc:
			logger.warning("AI grading unavailable, using local scoring: %s", exc)
		except Exception:
			logger.exception("AI grading failed unexpectedly, using local scoring")
	else:
		logger.info("No API key configured, using local scoring")

	try:
		return engine.score(summary, passage, form)
	except Exception:
		logger.exception("Local scoring failed")
		return engine.aggregator.conservative(form, "Scoring error")
