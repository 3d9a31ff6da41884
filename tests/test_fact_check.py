"""Unit tests for truthscan/analysis/fact_check.py."""

import pytest

from tests.mocks.samples import SENSATIONAL_TEXT
from truthscan.analysis import constants as c
from truthscan.analysis.corrections import correct
from truthscan.analysis.fact_check import (
    FactCheckDecision,
    classify_verdict,
    decide,
    evaluate,
    from_assessment,
    local_fact_check,
)
from truthscan.schemas.analysis import FactCheckAssessment, Verdict


@pytest.mark.parametrize(
    "score, expected",
    [(0, FactCheckDecision.TRIGGERED), (69, FactCheckDecision.TRIGGERED),
     (70, FactCheckDecision.SKIPPED), (100, FactCheckDecision.SKIPPED)],
)
def test_decide_threshold(score, expected):
    assert decide(score) is expected


def test_classify_verdict():
    assert classify_verdict("Shocking footage from downtown") is Verdict.FALSE
    assert classify_verdict("Look at this!!!!!!") is Verdict.FALSE
    assert classify_verdict("Look at this!!!!!") is Verdict.NEEDS_VERIFICATION


def test_local_false_verdict_has_correction():
    result = local_fact_check("BREAKING: The vaccine contains tracking chips!")
    assert result.verdict is Verdict.FALSE
    assert result.claim == "BREAKING: The vaccine contains tracking chips"
    assert result.corrected_statement == correct("vaccine")
    assert [s.name for s in result.sources][:3] == ["WHO", "CDC", "PubMed"]


def test_local_needs_verification_has_no_correction():
    result = local_fact_check("Residents say the bridge may close next month")
    assert result.verdict is Verdict.NEEDS_VERIFICATION
    assert result.explanation == c.NEEDS_VERIFICATION_EXPLANATION
    assert result.corrected_statement is None
    assert len(result.sources) == 5


def test_local_fact_check_never_misleading():
    for content in (SENSATIONAL_TEXT, "plain words here", "SHOCKING!!!!!!!"):
        assert local_fact_check(content).verdict is not Verdict.MISLEADING


def test_evaluate_skips_at_threshold():
    assert evaluate(70, SENSATIONAL_TEXT) is None
    assert evaluate(69, SENSATIONAL_TEXT).verdict is Verdict.FALSE


def test_from_assessment_fills_missing_correction():
    assessment = FactCheckAssessment(
        claim="Vaccines cause illness",
        verdict="MISLEADING",
        explanation="Out of context.",
    )
    result = from_assessment(assessment, "Vaccines cause illness")
    assert result.verdict is Verdict.MISLEADING
    assert result.corrected_statement == correct("vaccine")
    assert result.explanation == "Out of context."


def test_from_assessment_drops_correction_when_unverified():
    assessment = FactCheckAssessment(
        claim="Bridge closes",
        verdict="NEEDS VERIFICATION",
        explanation="Unclear.",
        corrected_statement="Something",
    )
    assert from_assessment(assessment, "Bridge closes").corrected_statement is None


def test_from_assessment_uses_local_sources_and_claim_fallback():
    assessment = FactCheckAssessment(claim="  ", verdict="FALSE", explanation="No.",
                                     corrected_statement="Actual facts.")
    result = from_assessment(assessment, "The election was rigged by machines")
    assert result.claim == "The election was rigged by machines"
    assert result.corrected_statement == "Actual facts."
    assert [s.name for s in result.sources][:3] == ["USA.gov", "Vote.gov", "Election Officials"]
