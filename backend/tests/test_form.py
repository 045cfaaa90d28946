from __future__ import annotations

import pytest

from pte_scoring.scoring.form import FormValidator


@pytest.fixture
def validator() -> FormValidator:
    return FormValidator()


def test_exactly_minimum_words_is_valid(validator: FormValidator) -> None:
    check = validator.validate("Youth unemployment is rising fast.")

    assert check.word_count == 5
    assert check.is_valid
    assert check.errors == []


def test_exactly_maximum_words_is_valid(validator: FormValidator) -> None:
    check = validator.validate(" ".join(["word"] * 74 + ["end."]))

    assert check.word_count == 75
    assert check.is_valid


def test_too_short(validator: FormValidator) -> None:
    check = validator.validate("Rates rose sharply today.")

    assert not check.is_valid
    assert any(e.startswith("Too short") for e in check.errors)


def test_too_long(validator: FormValidator) -> None:
    check = validator.validate(" ".join(["word"] * 75 + ["end."]))

    assert check.word_count == 76
    assert not check.is_valid
    assert any(e.startswith("Too long") for e in check.errors)


@pytest.mark.parametrize(
    ("summary", "error"),
    [
        ("Rates rose sharply this year. Experts are worried about it.", "More than one sentence detected"),
        ("Rates rose sharply this year", "Must end with a full stop, question mark or exclamation mark"),
        ("Rates rose\nsharply this year today.", "Line breaks are not allowed"),
        ("- rates rose sharply this year.", "Bullet points or numbered lists are not allowed"),
        ("1. Rates rose sharply this year.", "Bullet points or numbered lists are not allowed"),
    ],
)
def test_rule_violations(validator: FormValidator, summary: str, error: str) -> None:
    check = validator.validate(summary)

    assert not check.is_valid
    assert error in check.errors


def test_collects_every_violation(validator: FormValidator) -> None:
    check = validator.validate("Rates rose")

    assert check.word_count == 2
    assert len(check.errors) == 2


@pytest.mark.parametrize("summary", [None, "", "   ", 42, ["a", "list"]])
def test_malformed_input_short_circuits(validator: FormValidator, summary: object) -> None:
    check = validator.validate(summary)

    assert check.word_count == 0
    assert not check.is_valid


def test_custom_limits() -> None:
    check = FormValidator(min_words=2, max_words=3).validate("Rates rose.")

    assert check.is_valid
