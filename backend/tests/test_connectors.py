from __future__ import annotations

import pytest

from pte_scoring.scoring.connectors import CONNECTOR_DETECTOR, CONNECTOR_PHRASES, CONTRAST_PHRASES


@pytest.mark.parametrize(
    ("text", "category", "phrase"),
    [
        ("Prices rose; however, demand fell.", "contrast", "however"),
        ("HOWEVER it rained.", "contrast", "however"),
        ("In spite of the rain, they went out.", "contrast", "in spite of"),
        ("Sales fell because prices rose.", "causal", "because"),
        ("Moreover, costs rose.", "additive", "moreover"),
        ("Cities such as Paris grew.", "exemplifying", "such as"),
        ("Prices stay high unless supply grows.", "conditional", "unless"),
    ],
)
def test_detects_catalog_entries(text: str, category: str, phrase: str) -> None:
    match = CONNECTOR_DETECTOR.detect(text)

    assert match.has_connector
    assert match.connector_type == category
    assert match.connector == phrase


def test_first_catalog_entry_wins() -> None:
    match = CONNECTOR_DETECTOR.detect("Therefore prices rose, however demand held.")

    assert match.connector == "however"
    assert match.connector_type == "contrast"


@pytest.mark.parametrize(
    "text",
    ["The cat sat on the mat.", "Butter prices rose.", "Many factors contribute to the problem.", "", None],
)
def test_no_connector(text: str | None) -> None:
    match = CONNECTOR_DETECTOR.detect(text)  # type: ignore[arg-type]

    assert not match.has_connector
    assert match.connector_type is None


def test_phrase_lists_are_flat_and_deduplicated() -> None:
    assert len(CONNECTOR_PHRASES) == len(set(CONNECTOR_PHRASES))
    assert set(CONTRAST_PHRASES) <= set(CONNECTOR_PHRASES)
    assert "however" in CONTRAST_PHRASES
    assert "therefore" not in CONTRAST_PHRASES
