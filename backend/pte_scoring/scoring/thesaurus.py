from __future__ import annotations
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple

from .stemmer import stem


# Concept clusters for paraphrase matching. Inflected forms are listed
# explicitly because the stemmer does not unify e.g. "rise" and "rising".
SYNONYM_GROUPS: Tuple[Tuple[str, ...], ...] = (
	("increase", "increasing", "increased", "rise", "rising", "rose", "risen", "grow", "growing", "grew", "growth", "surge", "surging", "soar", "soaring", "climb", "climbing", "escalate", "escalating", "expand", "expanding", "expansion", "boost", "upward", "mount", "mounting"),
	("decrease", "decreasing", "decreased", "decline", "declining", "declined", "fall", "falling", "fell", "drop", "dropping", "dropped", "reduce", "reducing", "reduced", "reduction", "shrink", "shrinking", "diminish", "diminishing", "plunge", "downward", "lower", "lowering"),
	("unemployment", "unemployed", "jobless", "joblessness", "worklessness", "redundancy", "layoffs"),
	("employment", "employed", "job", "jobs", "work", "working", "occupation", "career", "labour", "labor"),
	("important", "importance", "significant", "significance", "crucial", "essential", "vital", "critical", "key", "major", "fundamental", "central", "paramount"),
	("problem", "problems", "issue", "issues", "challenge", "challenges", "difficulty", "difficulties", "obstacle", "concern", "concerns", "threat"),
	("benefit", "benefits", "advantage", "advantages", "gain", "gains", "merit", "upside", "positive"),
	("harm", "harmful", "damage", "damaging", "detrimental", "negative", "adverse", "drawback", "disadvantage", "downside"),
	("cause", "causes", "caused", "lead", "leads", "result", "results", "produce", "trigger", "drive", "drives", "driven", "contribute", "contributes"),
	("effect", "effects", "impact", "impacts", "consequence", "consequences", "outcome", "outcomes", "influence", "implication", "implications"),
	("study", "studies", "research", "researchers", "investigation", "survey", "analysis", "experiment", "findings"),
	("show", "shows", "showed", "demonstrate", "demonstrates", "reveal", "reveals", "revealed", "indicate", "indicates", "suggest", "suggests", "prove", "proves", "evidence"),
	("young", "youth", "youngsters", "adolescents", "teenagers", "teens", "juveniles"),
	("children", "child", "kids", "pupils", "students", "learners", "schoolchildren"),
	("elderly", "older", "aged", "seniors", "pensioners", "retirees"),
	("people", "population", "public", "citizens", "individuals", "society", "residents", "community", "communities"),
	("government", "governments", "state", "authorities", "officials", "administration", "policymakers", "politicians"),
	("economy", "economic", "economies", "financial", "fiscal", "monetary", "market", "markets"),
	("money", "funds", "funding", "finance", "capital", "investment", "budget", "spending", "expenditure"),
	("cost", "costs", "price", "prices", "expense", "expenses", "fee", "fees", "charge"),
	("environment", "environmental", "nature", "ecosystem", "ecosystems", "ecological", "planet"),
	("pollution", "pollutants", "emissions", "contamination", "waste", "toxins"),
	("climate", "warming", "greenhouse", "weather", "temperatures"),
	("technology", "technologies", "technological", "digital", "innovation", "innovations", "devices", "computers", "automation"),
	("health", "healthy", "wellbeing", "well-being", "wellness", "fitness", "medical"),
	("disease", "diseases", "illness", "illnesses", "sickness", "infection", "infections", "disorder", "condition"),
	("education", "educational", "schooling", "learning", "teaching", "instruction", "training", "academic"),
	("city", "cities", "urban", "metropolitan", "towns", "municipal"),
	("rural", "countryside", "village", "villages", "agricultural", "farming"),
	("change", "changes", "changing", "shift", "shifts", "transformation", "transition", "alteration", "evolve", "evolving"),
	("improve", "improves", "improved", "improving", "improvement", "enhance", "enhances", "enhancement", "better", "upgrade", "progress"),
	("worsen", "worsening", "deteriorate", "deteriorating", "deterioration", "decay", "aggravate"),
	("big", "large", "huge", "vast", "enormous", "massive", "substantial", "considerable", "extensive"),
	("small", "little", "minor", "slight", "modest", "limited", "marginal"),
	("fast", "rapid", "rapidly", "quick", "quickly", "swift", "swiftly", "sudden", "dramatic", "dramatically"),
	("slow", "slowly", "gradual", "gradually", "steady", "steadily"),
	("new", "novel", "modern", "recent", "contemporary", "emerging"),
	("old", "ancient", "traditional", "historic", "historical", "conventional"),
	("help", "helps", "helped", "assist", "support", "supports", "aid", "facilitate", "enable", "enables"),
	("prevent", "prevents", "prevention", "avoid", "stop", "block", "hinder", "restrict", "limit"),
	("solution", "solutions", "remedy", "answer", "fix", "resolution", "approach", "strategy", "strategies", "measure", "measures"),
	("believe", "believes", "think", "thinks", "argue", "argues", "claim", "claims", "contend", "maintain", "assert", "view", "opinion"),
	("many", "numerous", "several", "multiple", "countless", "various", "most"),
	("few", "scarce", "rare", "rarely", "seldom"),
	("need", "needs", "require", "requires", "requirement", "demand", "demands", "necessity", "necessary"),
	("danger", "dangerous", "risk", "risks", "risky", "hazard", "hazardous", "unsafe", "peril"),
	("country", "countries", "nation", "nations", "national", "nationwide", "domestic"),
	("world", "global", "globally", "worldwide", "international", "internationally"),
	("company", "companies", "firm", "firms", "business", "businesses", "corporation", "corporations", "industry", "industries", "employers"),
	("energy", "power", "electricity", "fuel", "fuels", "renewable", "renewables"),
	("food", "diet", "diets", "nutrition", "nutritional", "meals", "eating"),
	("rate", "rates", "level", "levels", "proportion", "percentage", "share", "ratio"),
)


class Thesaurus:
	"""Read-only synonym lookup keyed by literal word and by stem."""

	def __init__(self, groups: Iterable[Iterable[str]]) -> None:
		by_word: Dict[str, FrozenSet[str]] = {}
		by_stem: Dict[str, FrozenSet[str]] = {}
		for group in groups:
			words = frozenset(w.lower() for w in group)
			stems = frozenset(stem(w) for w in words)
			for w in words:
				# First registration wins; groups are never merged
				by_word.setdefault(w, words)
				by_stem.setdefault(stem(w), stems)
		self._by_word: Mapping[str, FrozenSet[str]] = MappingProxyType(by_word)
		self._by_stem: Mapping[str, FrozenSet[str]] = MappingProxyType(by_stem)

	def group_for(self, word: str) -> FrozenSet[str]:
		w = (word or "").lower()
		return self._by_word.get(w) or self._by_stem.get(stem(w)) or frozenset()

	def is_related(self, w1: str, w2: str) -> bool:
		a = (w1 or "").lower()
		b = (w2 or "").lower()
		if a == b:
			return True
		stem_b = stem(b)
		if stem(a) == stem_b:
			return True
		for group in (self._by_word.get(a), self._by_stem.get(stem(a))):
			if group and (b in group or stem_b in group):
				return True
		return False


THESAURUS = Thesaurus(SYNONYM_GROUPS)
