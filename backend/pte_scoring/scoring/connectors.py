from __future__ import annotations
import re
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple

from .models import ConnectorMatch


# Ordered (category, phrase) catalog; earlier entries win
CONNECTOR_CATALOG: Tuple[Tuple[str, str], ...] = (
	("contrast", "however"),
	("contrast", "although"),
	("contrast", "whereas"),
	("contrast", "while"),
	("contrast", "but"),
	("contrast", "yet"),
	("contrast", "nevertheless"),
	("contrast", "nonetheless"),
	("contrast", "despite"),
	("contrast", "in spite of"),
	("contrast", "though"),
	("contrast", "on the other hand"),
	("contrast", "in contrast"),
	("contrast", "conversely"),
	("contrast", "instead"),
	("causal", "because"),
	("causal", "therefore"),
	("causal", "consequently"),
	("causal", "thus"),
	("causal", "hence"),
	("causal", "as a result"),
	("causal", "due to"),
	("causal", "owing to"),
	("causal", "since"),
	("additive", "moreover"),
	("additive", "furthermore"),
	("additive", "in addition"),
	("additive", "additionally"),
	("additive", "besides"),
	("exemplifying", "for example"),
	("exemplifying", "for instance"),
	("exemplifying", "such as"),
	("concluding", "in conclusion"),
	("concluding", "ultimately"),
	("concluding", "overall"),
	("conditional", "unless"),
	("conditional", "provided that"),
	("conditional", "as long as"),
)


def _dedupe(phrases: Iterable[str]) -> Tuple[str, ...]:
	seen: List[str] = []
	for p in phrases:
		if p not in seen:
			seen.append(p)
	return tuple(seen)


CONNECTOR_PHRASES: Tuple[str, ...] = _dedupe(p for _, p in CONNECTOR_CATALOG)
CONTRAST_PHRASES: Tuple[str, ...] = _dedupe(p for c, p in CONNECTOR_CATALOG if c == "contrast")


@lru_cache(maxsize=None)
def phrase_pattern(phrase: str) -> "re.Pattern[str]":
	words = r"\s+".join(re.escape(w) for w in phrase.split())
	return re.compile(rf"\b{words}\b", re.IGNORECASE)


def contains_any(text: str, phrases: Iterable[str]) -> Optional[str]:
	for phrase in phrases:
		if phrase_pattern(phrase).search(text):
			return phrase
	return None


class ConnectorDetector:
	def __init__(self, catalog: Optional[Iterable[Tuple[str, str]]] = None) -> None:
		entries = tuple(catalog if catalog is not None else CONNECTOR_CATALOG)
		self._entries: Tuple[Tuple[str, str, "re.Pattern[str]"], ...] = tuple(
			(category, phrase, phrase_pattern(phrase)) for category, phrase in entries
		)

	def detect(self, text: str) -> ConnectorMatch:
		if isinstance(text, str) and text:
			for category, phrase, pattern in self._entries:
				if pattern.search(text):
					return ConnectorMatch(has_connector=True, connector_type=category, connector=phrase)
		return ConnectorMatch(has_connector=False, connector_type=None, connector=None)


CONNECTOR_DETECTOR = ConnectorDetector()
