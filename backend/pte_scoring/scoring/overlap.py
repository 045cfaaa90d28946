"""
Key-element coverage
====================

Measures how much of a labelled key element (topic, pivot, conclusion) a
summary reflects, using three escalating lexical strategies per keyword:

1. literal containment of the keyword in the summary;
2. stem equality with any summary token;
3. thesaurus relatedness with any summary token.

Topic and conclusion are judged on keyword density. The pivot is judged
primarily on the presence of a contrast marker, since a paraphrased contrast
rarely repeats the passage wording.
"""

from __future__ import annotations

import re
from typing import FrozenSet, List, Optional, Sequence, Tuple

from .connectors import CONTRAST_PHRASES, contains_any
from .models import KeyElementMatch
from .stemmer import stem
from .thesaurus import THESAURUS, Thesaurus


_TOKEN_RE = re.compile(r"[a-z0-9']+")

STOP_WORDS: FrozenSet[str] = frozenset("""
about above after again against also although among another because been before being below between both cannot could does doing down during each even
ever every from further have having here hers herself himself into itself just least less many more most much must only other ought ours ourselves over
same shall should since some such than that their theirs them themselves then there these they this those through thus under until upon very what when
where which while whom whose with within without would your yours yourself yourselves will were said says make made like also well however therefore
""".split())

MIN_KEYWORD_LENGTH = 4
DENSITY_MIN_MATCHED = 2
DENSITY_MIN_RATIO = 0.4
CONTRAST_MIN_MATCHED = 1
CONTRAST_MIN_RATIO = 0.25


def tokenize(text: str) -> List[str]:
	return _TOKEN_RE.findall((text or "").lower())


def extract_keywords(text: str) -> List[str]:
	keywords: List[str] = []
	for token in tokenize(text):
		token = token.strip("'")
		if len(token) < MIN_KEYWORD_LENGTH or token in STOP_WORDS or token in keywords:
			continue
		keywords.append(token)
	return keywords


class SemanticOverlapScorer:
	def __init__(self, thesaurus: Optional[Thesaurus] = None, contrast_phrases: Sequence[str] = CONTRAST_PHRASES) -> None:
		self._thesaurus = thesaurus or THESAURUS
		self._contrast_phrases = tuple(contrast_phrases)

	def _match_keyword(self, keyword: str, summary_lower: str, tokens: Sequence[Tuple[str, str]]) -> Optional[str]:
		if keyword in summary_lower:
			return keyword
		keyword_stem = stem(keyword)
		if any(token_stem == keyword_stem for _, token_stem in tokens):
			return f"{keyword}→stem"
		if any(self._thesaurus.is_related(keyword, token) for token, _ in tokens):
			return f"{keyword}→syn"
		return None

	def score_element(self, key_element: Optional[str], summary: Optional[str], require_contrast: bool = False) -> KeyElementMatch:
		keywords = extract_keywords(key_element or "")
		if not keywords:
			# Nothing to look for: an unlabelled element counts as covered
			return KeyElementMatch(captured=True, score=1, matched_words=[], ratio=1.0)

		summary_lower = (summary or "").lower()
		tokens = [(t, stem(t)) for t in sorted({t.strip("'") for t in tokenize(summary_lower)}) if t]
		matched: List[str] = []
		for keyword in keywords:
			hit = self._match_keyword(keyword, summary_lower, tokens)
			if hit is not None:
				matched.append(hit)

		ratio = len(matched) / len(keywords)
		if require_contrast:
			has_marker = contains_any(summary_lower, self._contrast_phrases) is not None
			captured = has_marker and (len(matched) >= CONTRAST_MIN_MATCHED or ratio >= CONTRAST_MIN_RATIO)
		else:
			captured = len(matched) >= DENSITY_MIN_MATCHED or ratio >= DENSITY_MIN_RATIO
		return KeyElementMatch(captured=captured, score=1 if captured else 0, matched_words=matched, ratio=round(ratio, 4))
