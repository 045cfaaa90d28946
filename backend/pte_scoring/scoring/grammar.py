from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Iterable, List, Optional, Tuple

from .models import GrammarIssue


@dataclass(frozen=True)
class GrammarRule:
	"""One pattern/fix rule.

	``exceptions`` are matched against the first capture group: a match is
	skipped when the captured word equals, or starts with, an exception (so
	"a user" and "a useful" are both accepted).
	"""
	name: str
	pattern: "re.Pattern[str]"
	build: Callable[["re.Match[str]"], Tuple[str, str]]
	exceptions: FrozenSet[str] = field(default_factory=frozenset)
	prefix_exceptions: bool = False

	def is_exception(self, match: "re.Match[str]") -> bool:
		if not self.exceptions or match.re.groups < 1:
			return False
		word = (match.group(1) or "").lower()
		if word in self.exceptions:
			return True
		return self.prefix_exceptions and any(word.startswith(e) for e in self.exceptions)


def _rule(name: str, pattern: str, build: Callable[["re.Match[str]"], Tuple[str, str]], exceptions: Iterable[str] = (), prefix: bool = False) -> GrammarRule:
	return GrammarRule(
		name=name,
		pattern=re.compile(pattern, re.IGNORECASE),
		build=build,
		exceptions=frozenset(exceptions),
		prefix_exceptions=prefix,
	)


_VOWEL_CONSONANT_SOUND = (
	"one", "once", "uniform", "unit", "unique", "university", "use", "used", "user",
	"usual", "usually", "union", "united", "universal", "universe", "utility",
)
_SILENT_H = ("hour", "honest", "heir", "honor", "honour", "herb")
_POSSESSABLE = "book|house|car|idea|opinion|view|work|job|role|goal|aim"
_UNCOUNTABLE_PLURALS = ("times", "chances", "cases", "means", "equals")

# Words ending in -er / -est that are not comparatives / superlatives
_NOT_COMPARATIVE = (
	"other", "others", "water", "power", "number", "paper", "computer", "consumer", "customer",
	"worker", "member", "teacher", "player", "user", "order", "matter", "answer", "letter",
	"career", "manner", "danger", "cancer", "border", "leader", "partner", "summer", "winter",
	"together", "however", "whether", "either", "neither", "rather", "further", "after",
	"over", "under", "never", "ever", "offer", "proper", "clever", "tender", "sober",
)
_NOT_SUPERLATIVE = (
	"interest", "forest", "request", "test", "honest", "modest", "protest", "contest",
	"harvest", "suggest", "invest", "conquest", "arrest", "earnest", "manifest", "digest",
	"rest", "west", "quest", "guest", "chest", "nest", "pest", "crest",
)


def _article_an(m: "re.Match[str]") -> Tuple[str, str]:
	return f"an {m.group(1)}", "article_agreement"


def _article_a(m: "re.Match[str]") -> Tuple[str, str]:
	return f"a {m.group(1)}", "article_agreement"


GRAMMAR_RULES: Tuple[GrammarRule, ...] = (
	_rule("article_a_vowel", r"\ba\s+([aeiou][a-z'-]*)", _article_an, _VOWEL_CONSONANT_SOUND, prefix=True),
	_rule("article_an_consonant", r"\ban\s+([b-df-hj-np-tv-z][a-z'-]*)", _article_a, _SILENT_H, prefix=True),
	_rule("subject_verb_plural", r"\b(they|we|you|i)\s+was\b", lambda m: (f"{m.group(1)} were", "subject_verb_agreement")),
	_rule("subject_verb_singular", r"\b(he|she|it)\s+were\b", lambda m: (f"{m.group(1)} was", "subject_verb_agreement")),
	_rule("double_comparative", r"\bmore\s+([a-z]{2,}er)\b", lambda m: (m.group(1), "double_comparative"), _NOT_COMPARATIVE),
	_rule("double_superlative", r"\bmost\s+([a-z]{2,}est)\b", lambda m: (m.group(1), "double_superlative"), _NOT_SUPERLATIVE),
	_rule("their_there_verb", r"\btheir\s+(is|are|was|were)\b", lambda m: (f"there {m.group(1)}", "confused_words")),
	_rule("there_their_noun", rf"\bthere\s+({_POSSESSABLE})\b", lambda m: (f"their {m.group(1)}", "confused_words")),
	_rule("less_fewer", r"\bless\s+([a-z]+[^\Wsiu]s)\b", lambda m: (f"fewer {m.group(1)}", "less_fewer"), _UNCOUNTABLE_PLURALS),
	_rule("modal_of", r"\b(could|would|should|might|must)\s+of\b", lambda m: (f"{m.group(1)} have", "modal_have")),
	_rule("double_comma", r",\s*,", lambda m: (",", "punctuation")),
)


class GrammarRuleEngine:
	def __init__(self, rules: Optional[Iterable[GrammarRule]] = None) -> None:
		self._rules: Tuple[GrammarRule, ...] = tuple(rules if rules is not None else GRAMMAR_RULES)

	@property
	def rules(self) -> Tuple[GrammarRule, ...]:
		return self._rules

	def check(self, text: str) -> List[GrammarIssue]:
		issues: List[GrammarIssue] = []
		if not isinstance(text, str) or not text:
			return issues
		for rule in self._rules:
			for match in rule.pattern.finditer(text):
				if rule.is_exception(match):
					continue
				suggestion, category = rule.build(match)
				issues.append(GrammarIssue(issue=match.group(0), suggestion=suggestion, rule=category))
		return issues


GRAMMAR_ENGINE = GrammarRuleEngine()
