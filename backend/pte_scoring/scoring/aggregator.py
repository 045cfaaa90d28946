from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from .models import (
	ConnectorMatch,
	ContentScore,
	FormCheck,
	FormScore,
	GrammarDetails,
	GrammarIssue,
	GrammarScore,
	KeyElementMatch,
	ScoreResult,
	SpellCheckReport,
	SpellingError,
	TraitScores,
	VocabularyScore,
)


ELEMENT_NAMES: Tuple[str, ...] = ("topic", "pivot", "conclusion")

FORM_MAX = 1
GRAMMAR_MAX = 2
VOCABULARY_MAX = 2

# (minimum raw score, band), highest first. Each table partitions [0, max_raw].
BAND_TABLES: Mapping[int, Tuple[Tuple[int, str], ...]] = {
	3: ((7, "Band 9"), (6, "Band 8"), (5, "Band 7"), (3, "Band 6"), (0, "Band 5")),
	2: ((5, "Band 9"), (4, "Band 8"), (3, "Band 7"), (2, "Band 6"), (0, "Band 5")),
}


@dataclass(frozen=True)
class ScoringConfig:
	content_scale: int = 3
	min_words: int = 5
	max_words: int = 75
	overall_ceiling: int = 90

	def __post_init__(self) -> None:
		if self.content_scale not in BAND_TABLES:
			raise ValueError(f"content_scale must be one of {sorted(BAND_TABLES)}, got {self.content_scale}")
		if not 0 < self.min_words <= self.max_words:
			raise ValueError("min_words must be positive and not exceed max_words")

	@property
	def max_raw(self) -> int:
		return FORM_MAX + self.content_scale + GRAMMAR_MAX + VOCABULARY_MAX

	@classmethod
	def from_settings(cls, s: Any) -> "ScoringConfig":
		return cls(
			content_scale=s.scoring_content_scale,
			min_words=s.scoring_min_words,
			max_words=s.scoring_max_words,
		)


def _clamp(value: int, low: int, high: int) -> int:
	return max(low, min(high, value))


def round_half_up(value: float) -> int:
	"""Round halves up; builtin ``round()`` rounds them to even."""
	return int(math.floor(value + 0.5))


class ScoreAggregator:
	def __init__(self, config: Optional[ScoringConfig] = None) -> None:
		self.config = config or ScoringConfig()
		self._bands = BAND_TABLES[self.config.content_scale]

	@property
	def lowest_band(self) -> str:
		return self._bands[-1][1]

	def band_for(self, raw_score: int) -> str:
		for minimum, band in self._bands:
			if raw_score >= minimum:
				return band
		return self.lowest_band

	def content_value(self, matches: Mapping[str, KeyElementMatch]) -> int:
		captured = [matches[name].score for name in ELEMENT_NAMES if name in matches]
		if self.config.content_scale == 3:
			return _clamp(sum(captured), 0, 3)
		# Two-point scale: full marks need every element, the topic alone earns one
		topic = matches.get("topic")
		if topic is None or not topic.captured:
			return 0
		return 2 if all(m.captured for m in matches.values()) else 1

	@staticmethod
	def grammar_value(has_connector: bool, issue_count: int) -> int:
		if issue_count == 0 and has_connector:
			return 2
		if issue_count <= 1 or has_connector:
			return 1
		return 0

	def totals(self, form: int, content: int, grammar: int, vocabulary: int) -> Tuple[int, int, str]:
		"""Return ``(raw_score, overall_score, band)`` for the given trait values."""
		raw = _clamp(form + content + grammar + vocabulary, 0, self.config.max_raw)
		overall = round_half_up(raw * self.config.overall_ceiling / self.config.max_raw)
		return raw, overall, self.band_for(raw)

	def build_feedback(
		self,
		matches: Mapping[str, KeyElementMatch],
		connector: ConnectorMatch,
		spelling: List[SpellingError],
		issues: List[GrammarIssue],
	) -> str:
		clauses: List[str] = []
		missing = [name for name in ELEMENT_NAMES if name in matches and not matches[name].captured]
		if missing:
			clauses.append(f"Your summary does not clearly capture the passage's {', '.join(missing)}.")
		if not connector.has_connector:
			clauses.append("Link your ideas with a connector such as 'however', 'while' or 'therefore'.")
		for err in spelling:
			clauses.append(f"Spelling: '{err.word}' should be '{err.suggestion}'.")
		for issue in issues:
			clauses.append(f"Grammar: '{issue.issue}' should be '{issue.suggestion}'.")
		if not clauses:
			return "Excellent summary: all key elements are captured in one well-connected sentence."
		return " ".join(clauses)

	def form_failure(self, form: FormCheck) -> ScoreResult:
		rules = "; ".join(form.errors) or "Invalid form"
		return ScoreResult(
			trait_scores=TraitScores(
				form=FormScore(value=0, word_count=form.word_count, errors=list(form.errors), notes=f"Invalid form: {rules}"),
				content=ContentScore(value=0, notes="Form error"),
				grammar=GrammarScore(value=0, notes="Form error"),
				vocabulary=VocabularyScore(value=0, notes="Form error"),
			),
			overall_score=0,
			raw_score=0,
			band=self.lowest_band,
			feedback=(
				f"Form validation failed: {rules}. Write one sentence of "
				f"{self.config.min_words}-{self.config.max_words} words ending with a full stop."
			),
			scoring_mode="local",
		)

	def aggregate(
		self,
		form: FormCheck,
		matches: Mapping[str, KeyElementMatch],
		connector: ConnectorMatch,
		spelling: List[SpellingError],
		issues: List[GrammarIssue],
	) -> ScoreResult:
		if not form.is_valid:
			return self.form_failure(form)

		content = self.content_value(matches)
		issue_count = len(spelling) + len(issues)
		grammar = self.grammar_value(connector.has_connector, issue_count)
		vocabulary = VOCABULARY_MAX
		raw, overall, band = self.totals(FORM_MAX, content, grammar, vocabulary)

		captured = {name: bool(matches.get(name) and matches[name].captured) for name in ELEMENT_NAMES}
		grammar_notes: List[str] = []
		grammar_notes.append(f"Connector detected ({connector.connector})" if connector.has_connector else "No connector")
		if issue_count:
			grammar_notes.append(f"{issue_count} spelling/grammar issue(s)")
		return ScoreResult(
			trait_scores=TraitScores(
				form=FormScore(value=FORM_MAX, word_count=form.word_count, notes="Valid form"),
				content=ContentScore(
					value=content,
					topic_captured=captured["topic"],
					pivot_captured=captured["pivot"],
					conclusion_captured=captured["conclusion"],
					elements=dict(matches),
					notes=f"{sum(captured.values())}/{len(ELEMENT_NAMES)} key elements captured",
				),
				grammar=GrammarScore(
					value=grammar,
					has_connector=connector.has_connector,
					issue_count=issue_count,
					notes="; ".join(grammar_notes),
				),
				vocabulary=VocabularyScore(value=vocabulary, notes="Verbatim and paraphrased wording both accepted"),
			),
			spell_check=SpellCheckReport(errors=list(spelling)),
			grammar_details=GrammarDetails(
				issues=list(issues),
				has_connector=connector.has_connector,
				connector_type=connector.connector_type,
				connector=connector.connector,
			),
			overall_score=overall,
			raw_score=raw,
			band=band,
			feedback=self.build_feedback(matches, connector, spelling, issues),
			scoring_mode="local",
		)

	def conservative(self, form: FormCheck, note: str) -> ScoreResult:
		"""Low but non-zero result used when local scoring itself fails."""
		if not form.is_valid:
			return self.form_failure(form)
		content, grammar, vocabulary = 1, 1, 1
		raw, overall, band = self.totals(FORM_MAX, content, grammar, vocabulary)
		return ScoreResult(
			trait_scores=TraitScores(
				form=FormScore(value=FORM_MAX, word_count=form.word_count, notes="Valid form"),
				content=ContentScore(value=content, notes=note),
				grammar=GrammarScore(value=grammar, notes=note),
				vocabulary=VocabularyScore(value=vocabulary, notes=note),
			),
			overall_score=overall,
			raw_score=raw,
			band=band,
			feedback="Scoring error - conservative scoring applied",
			scoring_mode="local",
		)
