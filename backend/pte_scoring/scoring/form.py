from __future__ import annotations
import re
from typing import Any, List

from .models import FormCheck


_SENTENCE_BOUNDARY = re.compile(r"[.!?]\s+[A-Z]")
_TERMINAL = re.compile(r"[.!?]$")
_LINE_BREAK = re.compile(r"[\n\r]")
_LIST_MARKER = re.compile(r"^[ \t]*(?:[•\-*]|\d+[.)])\s", re.MULTILINE)


class FormValidator:
	def __init__(self, min_words: int = 5, max_words: int = 75) -> None:
		self.min_words = min_words
		self.max_words = max_words

	def validate(self, summary: Any) -> FormCheck:
		if not isinstance(summary, str) or not summary.strip():
			return FormCheck(word_count=0, is_valid=False, errors=["Summary must be a non-empty string"])

		trimmed = summary.strip()
		word_count = len(trimmed.split())
		errors: List[str] = []
		if word_count < self.min_words:
			errors.append(f"Too short: {word_count} words (minimum {self.min_words})")
		if word_count > self.max_words:
			errors.append(f"Too long: {word_count} words (maximum {self.max_words})")
		if _SENTENCE_BOUNDARY.search(trimmed):
			errors.append("More than one sentence detected")
		if not _TERMINAL.search(trimmed):
			errors.append("Must end with a full stop, question mark or exclamation mark")
		if _LINE_BREAK.search(trimmed):
			errors.append("Line breaks are not allowed")
		if _LIST_MARKER.search(trimmed):
			errors.append("Bullet points or numbered lists are not allowed")
		return FormCheck(word_count=word_count, is_valid=not errors, errors=errors)
