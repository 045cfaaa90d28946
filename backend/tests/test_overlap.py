from __future__ import annotations

import pytest

from pte_scoring.scoring.overlap import SemanticOverlapScorer, extract_keywords


@pytest.fixture
def scorer() -> SemanticOverlapScorer:
    return SemanticOverlapScorer()


@pytest.mark.parametrize("element", ["", None, "the of and"])
@pytest.mark.parametrize("summary", ["", "Anything at all.", None])
def test_missing_element_is_vacuously_captured(scorer: SemanticOverlapScorer, element: str | None, summary: str | None) -> None:
    match = scorer.score_element(element, summary, require_contrast=True)

    assert match.captured
    assert match.score == 1
    assert match.matched_words == []


def test_keywords_skip_short_and_stop_words() -> None:
    assert extract_keywords("The rising rates of youth unemployment rates") == ["rising", "rates", "youth", "unemployment"]


def test_topic_captured_through_synonyms_without_literal_overlap(scorer: SemanticOverlapScorer) -> None:
    match = scorer.score_element(
        "rising youth unemployment rates",
        "Increasing youth joblessness worries governments across Europe.",
    )

    assert match.captured
    assert match.matched_words == ["rising→syn", "youth", "unemployment→syn"]
    assert match.ratio == 0.75


def test_stem_strategy(scorer: SemanticOverlapScorer) -> None:
    match = scorer.score_element("government policies", "A new policy from the government.")

    assert match.captured
    assert match.matched_words == ["government", "policies→stem"]


def test_low_density_is_not_captured(scorer: SemanticOverlapScorer) -> None:
    match = scorer.score_element("expensive housing shortages affect families nationwide", "Families are moving away.")

    assert not match.captured
    assert match.score == 0
    assert match.matched_words == ["families"]
    assert match.ratio == pytest.approx(1 / 6, abs=1e-4)


def test_ratio_threshold_captures_single_match(scorer: SemanticOverlapScorer) -> None:
    match = scorer.score_element("youth jobs", "Youth matter.")

    assert match.captured
    assert match.ratio == 0.5


def test_pivot_needs_a_contrast_marker(scorer: SemanticOverlapScorer) -> None:
    element = "costs remain high"

    without = scorer.score_element(element, "Costs remain high for most households.", require_contrast=True)
    with_marker = scorer.score_element(element, "However, costs remain high for most households.", require_contrast=True)

    assert not without.captured
    assert with_marker.captured


def test_pivot_contrast_marker_alone_is_not_enough(scorer: SemanticOverlapScorer) -> None:
    match = scorer.score_element("quantum entanglement experiments", "However, prices fell.", require_contrast=True)

    assert not match.captured
    assert match.ratio == 0.0


def test_pivot_quarter_coverage_with_marker(scorer: SemanticOverlapScorer) -> None:
    match = scorer.score_element("subsidies benefit wealthy farmers", "Although subsidies exist, prices fell.", require_contrast=True)

    assert match.captured
    assert match.matched_words == ["subsidies"]
