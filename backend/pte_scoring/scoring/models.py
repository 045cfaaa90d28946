from __future__ import annotations
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# Placeholders clients send for an element that was not labelled
_PLACEHOLDERS = {"", "n/a", "na", "none"}


def _clean_element(value: Any) -> Optional[str]:
	if not isinstance(value, str):
		return None
	value = value.strip()
	if value.lower() in _PLACEHOLDERS:
		return None
	return value


class KeyElements(BaseModel):
	"""Labelled sub-claims of a passage.

	Accepts the legacy labels as well: ``critical`` (topic), ``important``
	(pivot) and ``supplementary[0]`` (conclusion).
	"""
	model_config = ConfigDict(frozen=True, extra="ignore")

	topic: Optional[str] = None
	pivot: Optional[str] = None
	conclusion: Optional[str] = None

	@model_validator(mode="before")
	@classmethod
	def _map_legacy_labels(cls, data: Any) -> Any:
		if not isinstance(data, dict):
			return data
		supplementary = data.get("supplementary")
		first_supplementary = supplementary[0] if isinstance(supplementary, list) and supplementary else None
		return {
			"topic": _clean_element(data.get("topic")) or _clean_element(data.get("critical")),
			"pivot": _clean_element(data.get("pivot")) or _clean_element(data.get("important")),
			"conclusion": _clean_element(data.get("conclusion")) or _clean_element(first_supplementary),
		}


class Passage(BaseModel):
	model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

	text: str
	key_elements: KeyElements = Field(default_factory=KeyElements, alias="keyElements")


class KeyElementMatch(BaseModel):
	model_config = ConfigDict(frozen=True, populate_by_name=True)

	captured: bool
	score: Literal[0, 1]
	matched_words: List[str] = Field(default_factory=list, alias="matchedWords")
	ratio: float = Field(ge=0.0, le=1.0)


class SpellingError(BaseModel):
	model_config = ConfigDict(frozen=True)

	word: str
	suggestion: str
	confidence: Literal["high"] = "high"


class GrammarIssue(BaseModel):
	model_config = ConfigDict(frozen=True)

	issue: str
	suggestion: str
	rule: str


class ConnectorMatch(BaseModel):
	model_config = ConfigDict(frozen=True, populate_by_name=True)

	has_connector: bool = Field(alias="hasConnector")
	connector_type: Optional[str] = Field(default=None, alias="connectorType")
	connector: Optional[str] = None


class FormCheck(BaseModel):
	model_config = ConfigDict(frozen=True)

	word_count: int
	is_valid: bool
	errors: List[str] = Field(default_factory=list)


# ============================================================================
# TRAIT SCORES AND RESULT ENVELOPE
# ============================================================================

class FormScore(BaseModel):
	value: int = Field(ge=0, le=1)
	word_count: int = 0
	errors: List[str] = Field(default_factory=list)
	notes: str = ""


class ContentScore(BaseModel):
	value: int = Field(ge=0, le=3)
	topic_captured: bool = False
	pivot_captured: bool = False
	conclusion_captured: bool = False
	elements: Dict[str, KeyElementMatch] = Field(default_factory=dict)
	notes: str = ""


class GrammarScore(BaseModel):
	value: int = Field(ge=0, le=2)
	has_connector: bool = False
	issue_count: int = 0
	notes: str = ""


class VocabularyScore(BaseModel):
	value: int = Field(ge=0, le=2)
	notes: str = ""


class TraitScores(BaseModel):
	form: FormScore
	content: ContentScore
	grammar: GrammarScore
	vocabulary: VocabularyScore


class SpellCheckReport(BaseModel):
	errors: List[SpellingError] = Field(default_factory=list)


class GrammarDetails(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	issues: List[GrammarIssue] = Field(default_factory=list)
	has_connector: bool = Field(default=False, alias="hasConnector")
	connector_type: Optional[str] = Field(default=None, alias="connectorType")
	connector: Optional[str] = None


class ScoreResult(BaseModel):
	trait_scores: TraitScores
	spell_check: SpellCheckReport = Field(default_factory=SpellCheckReport)
	grammar_details: GrammarDetails = Field(default_factory=GrammarDetails)
	overall_score: int = Field(ge=0, le=90)
	raw_score: int = Field(ge=0)
	band: str
	feedback: str
	scoring_mode: Literal["local", "ai"] = "local"
