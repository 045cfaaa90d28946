"""Lightweight suffix-stripping stemmer.

A staged approximation of the Porter algorithm. Every stage applies at most one
rewrite and the first matching suffix wins, so the result is deterministic and
reapplying ``stem`` to a fully reduced root leaves it unchanged.
"""

from __future__ import annotations
from typing import Tuple

# Derivational endings, first layer
_STEP3: Tuple[Tuple[str, str], ...] = (
	("ational", "ate"),
	("tional", "tion"),
	("enci", "ence"),
	("anci", "ance"),
	("izer", "ize"),
	("bility", "ble"),
	("biliti", "ble"),
	("bli", "ble"),
	("alli", "al"),
	("entli", "ent"),
	("eli", "e"),
	("ousli", "ous"),
	("ization", "ize"),
	("ation", "ate"),
	("ator", "ate"),
	("alism", "al"),
	("iveness", "ive"),
	("fulness", "ful"),
	("ousness", "ous"),
	("aliti", "al"),
	("iviti", "ive"),
)

# Derivational endings, second layer
_STEP4: Tuple[Tuple[str, str], ...] = (
	("icate", "ic"),
	("ative", ""),
	("alize", "al"),
	("iciti", "ic"),
	("ical", "ic"),
	("ful", ""),
	("ness", ""),
)

_MIN_STEM = 2


def _rewrite(word: str, table: Tuple[Tuple[str, str], ...]) -> str:
	for suffix, replacement in table:
		if word.endswith(suffix):
			base = word[: -len(suffix)]
			if len(base) >= _MIN_STEM:
				return base + replacement
			return word
	return word


def stem(word: str) -> str:
	w = (word or "").lower()
	if len(w) <= 3:
		return w

	# Plurals
	if w.endswith("sses"):
		w = w[:-2]
	elif w.endswith("ies"):
		w = w[:-3] + "y"
	elif w.endswith("s") and not w.endswith("ss"):
		w = w[:-1]

	# Verb forms
	if w.endswith("eed"):
		if len(w) - 1 > 4:
			w = w[:-1]
	elif w.endswith("ing"):
		if len(w) - 3 >= _MIN_STEM:
			w = w[:-3]
	elif w.endswith("ed"):
		if len(w) - 2 >= _MIN_STEM:
			w = w[:-2]

	w = _rewrite(w, _STEP3)
	w = _rewrite(w, _STEP4)
	return w
