"""Relevance scoring: additive per-field matches with compounding positional decay."""

import pytest

from app.application.services.relevance import calculate_relevance


class TestCalculateRelevance:
    def test_exact_title_match(self) -> None:
        # exact 100 + substring 50 + two word hits 20, single field so no decay
        assert calculate_relevance("Fraud Detector", ["Fraud Detector"]) == 170

    def test_match_in_second_field_is_discounted(self) -> None:
        score = calculate_relevance(
            "fraud", ["Fraud Detection Model", "Detects fraud", ""]
        )
        # (60 * 3/3 + 60) * 2/3; the empty third field is skipped
        assert score == pytest.approx(80.0)

    def test_decay_compounds_across_fields(self) -> None:
        score = calculate_relevance("bias", ["Bias", "Unrelated text"])
        # field 0: 160 * 2/2; the non-matching field 1 still halves the total
        assert score == pytest.approx(80.0)

    def test_empty_fields_skip_decay_step(self) -> None:
        with_none = calculate_relevance("model", ["Model", None])
        assert with_none == pytest.approx(160.0)

    def test_case_insensitive(self) -> None:
        assert calculate_relevance("FRAUD", ["fraud"]) == calculate_relevance(
            "fraud", ["FRAUD"]
        )

    def test_word_hits_without_phrase_match(self) -> None:
        # "bias" and "audit" each found; phrase "bias audit" is not a substring
        assert calculate_relevance("bias audit", ["Audit of model bias"]) == 20

    def test_no_match_scores_zero(self) -> None:
        assert calculate_relevance("privacy", ["Model drift", "Fraud patterns"]) == 0

    def test_empty_query_scores_zero(self) -> None:
        assert calculate_relevance("", ["anything"]) == 0.0

    def test_no_fields_scores_zero(self) -> None:
        assert calculate_relevance("fraud", []) == 0.0

    def test_title_match_outranks_description_match(self) -> None:
        title_hit = calculate_relevance("drift", ["Model drift", ""])
        description_hit = calculate_relevance("drift", ["Performance", "Model drift"])
        assert title_hit > description_hit

    def test_score_is_never_negative(self) -> None:
        assert calculate_relevance("x", ["", None, "y"]) >= 0
