from __future__ import annotations
from typing import Any, Dict, Optional

from ..settings import settings
from .aggregator import ScoreAggregator, ScoringConfig
from .connectors import CONNECTOR_DETECTOR, ConnectorDetector
from .form import FormValidator
from .grammar import GRAMMAR_ENGINE, GrammarRuleEngine
from .models import FormCheck, KeyElementMatch, Passage, ScoreResult
from .overlap import SemanticOverlapScorer
from .spelling import SPELL_CHECKER, SpellChecker
from .thesaurus import THESAURUS, Thesaurus


class ScoringEngine:
	"""Offline scorer. Shared tables are passed in by reference and never mutated."""

	def __init__(
		self,
		config: Optional[ScoringConfig] = None,
		*,
		thesaurus: Optional[Thesaurus] = None,
		spell_checker: Optional[SpellChecker] = None,
		grammar_engine: Optional[GrammarRuleEngine] = None,
		connector_detector: Optional[ConnectorDetector] = None,
	) -> None:
		self.config = config or ScoringConfig()
		self.form_validator = FormValidator(self.config.min_words, self.config.max_words)
		self.overlap = SemanticOverlapScorer(thesaurus or THESAURUS)
		self.spell_checker = spell_checker or SPELL_CHECKER
		self.grammar_engine = grammar_engine or GRAMMAR_ENGINE
		self.connector_detector = connector_detector or CONNECTOR_DETECTOR
		self.aggregator = ScoreAggregator(self.config)

	def check_form(self, summary: Any) -> FormCheck:
		return self.form_validator.validate(summary)

	def match_elements(self, summary: str, passage: Passage) -> Dict[str, KeyElementMatch]:
		elements = passage.key_elements
		return {
			"topic": self.overlap.score_element(elements.topic, summary),
			"pivot": self.overlap.score_element(elements.pivot, summary, require_contrast=True),
			"conclusion": self.overlap.score_element(elements.conclusion, summary),
		}

	def score(self, summary: Any, passage: Passage, form: Optional[FormCheck] = None) -> ScoreResult:
		form = form or self.check_form(summary)
		if not form.is_valid:
			return self.aggregator.form_failure(form)
		return self.aggregator.aggregate(
			form,
			self.match_elements(summary, passage),
			self.connector_detector.detect(summary),
			self.spell_checker.check(summary),
			self.grammar_engine.check(summary),
		)


default_engine = ScoringEngine(ScoringConfig.from_settings(settings))
