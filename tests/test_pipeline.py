"""
Unit tests for truthscan/analysis/pipeline.py — analyze().

Gemini is always mocked at the pipeline's import site. Jitter is stubbed so
scores are exact.
"""

import random
from contextlib import ExitStack
from unittest.mock import MagicMock, patch

import pytest

from tests.mocks.jitter_mock import EdgeJitter, NullJitter
from tests.mocks.samples import ATTRIBUTED_TEXT, NEUTRAL_TEXT, PHISHING_URL, SENSATIONAL_TEXT
from truthscan.analysis import constants as c
from truthscan.analysis.corrections import correct
from truthscan.analysis.outcome import StepResult
from truthscan.analysis.pipeline import analyze
from truthscan.schemas.analysis import (
    AnalysisRequest,
    ContentAssessment,
    ContentType,
    FactCheckAssessment,
    Verdict,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_UNAVAILABLE = StepResult.unavailable("Gemini down")


def _request(content_type, content, **kwargs):
    return AnalysisRequest(content_type=content_type, content=content, **kwargs)


def _gemini(stack, language=_UNAVAILABLE, analysis=_UNAVAILABLE, check=_UNAVAILABLE):
    """Enable the Gemini path and mock every collaborator call."""
    mocks = {
        "detect_language": MagicMock(return_value=language),
        "analyze_content": MagicMock(return_value=analysis),
        "analyze_url": MagicMock(return_value=analysis),
        "fact_check": MagicMock(return_value=check),
    }
    stack.enter_context(patch("truthscan.analysis.pipeline.is_available", return_value=True))
    for name, mock in mocks.items():
        stack.enter_context(patch(f"truthscan.analysis.pipeline.{name}", mock))
    return mocks


def _heuristics_only(stack):
    stack.enter_context(patch("truthscan.analysis.pipeline.is_available", return_value=False))


_LOW_ASSESSMENT = ContentAssessment(score=42.6, findings=["a", "b"], recommendation="Check it.")
_HIGH_ASSESSMENT = ContentAssessment(score=85, findings=["a", "b", "c", "d"], recommendation="Fine.")
_MISLEADING = FactCheckAssessment(claim="Vaccines contain microchips", verdict="MISLEADING",
                                  explanation="Lacks context.")


# ---------------------------------------------------------------------------
# Heuristics-only path
# ---------------------------------------------------------------------------


async def test_sensational_text_is_flagged_false():
    with ExitStack() as stack:
        _heuristics_only(stack)
        result = await analyze(_request(ContentType.TEXT, SENSATIONAL_TEXT), NullJitter())

    assert result.authenticity_score == 35
    assert not result.is_authentic
    assert not result.is_warning
    assert result.recommendation == c.RECOMMENDATION_TEXT_SUSPECT
    assert len(result.findings) == 4
    assert [m.score for m in result.detection_metrics] == [35, 35, 35, 35]
    assert result.fact_check.verdict is Verdict.FALSE
    assert result.fact_check.corrected_statement is not None
    assert result.detected_language is None


async def test_credible_text_skips_fact_check():
    with ExitStack() as stack:
        _heuristics_only(stack)
        result = await analyze(_request(ContentType.TEXT, ATTRIBUTED_TEXT), NullJitter())

    assert result.authenticity_score == 95
    assert result.is_authentic
    assert result.fact_check is None
    assert result.findings == list(c.TEXT_FINDINGS_CREDIBLE)
    assert result.recommendation == c.RECOMMENDATION_TEXT_CREDIBLE


async def test_baseline_text_is_authentic():
    with ExitStack() as stack:
        _heuristics_only(stack)
        result = await analyze(_request(ContentType.TEXT, NEUTRAL_TEXT), NullJitter())

    assert result.authenticity_score == 75
    assert result.fact_check is None


async def test_phishing_url_gets_warning_and_general_sources():
    with ExitStack() as stack:
        _heuristics_only(stack)
        result = await analyze(_request(ContentType.URL, PHISHING_URL), NullJitter())

    # 75 - 10 (single word)
    assert result.authenticity_score == 65
    assert result.is_warning
    assert result.findings[:3] == [c.FINDING_NO_HTTPS, c.FINDING_UNKNOWN_DOMAIN, c.FINDING_PHISHING]
    assert [m.label for m in result.detection_metrics][0] == "Domain Credibility"
    assert result.fact_check.verdict is Verdict.NEEDS_VERIFICATION
    assert len(result.fact_check.sources) == 5


async def test_flags_are_mutually_exclusive_for_any_seed():
    with ExitStack() as stack:
        _heuristics_only(stack)
        for seed in range(30):
            result = await analyze(_request(ContentType.TEXT, SENSATIONAL_TEXT), random.Random(seed))
            assert not (result.is_authentic and result.is_warning)
            assert (result.fact_check is not None) == (result.authenticity_score < 70)


# ---------------------------------------------------------------------------
# Media
# ---------------------------------------------------------------------------


async def test_media_never_calls_gemini():
    with ExitStack() as stack:
        mocks = _gemini(stack, language=StepResult.success("es"))
        result = await analyze(
            _request(ContentType.MEDIA, "clip.mp4", file_name="clip.mp4", file_type="video/mp4"),
            EdgeJitter(high=False),
        )

    for mock in mocks.values():
        mock.assert_not_called()
    assert result.authenticity_score == 55
    assert result.is_warning
    assert result.findings == list(c.MEDIA_FINDINGS_SUSPECT)
    assert result.recommendation == c.RECOMMENDATION_MEDIA_SUSPECT
    assert result.fact_check is None
    assert result.detected_language is None


async def test_media_baseline_is_authentic():
    with ExitStack() as stack:
        _heuristics_only(stack)
        result = await analyze(
            _request(ContentType.MEDIA, "photo", file_type="image/png"), NullJitter()
        )

    assert result.authenticity_score == 70
    assert result.is_authentic
    assert result.findings == list(c.MEDIA_FINDINGS_CLEAN)


# ---------------------------------------------------------------------------
# Gemini path
# ---------------------------------------------------------------------------


async def test_gemini_analysis_and_fact_check():
    content = "Vaccines contain microchips"
    with ExitStack() as stack:
        mocks = _gemini(
            stack,
            language=StepResult.success("es"),
            analysis=StepResult.success(_LOW_ASSESSMENT),
            check=StepResult.success(_MISLEADING),
        )
        result = await analyze(_request(ContentType.TEXT, content), NullJitter())

    mocks["analyze_content"].assert_called_once_with(content, "es")
    mocks["fact_check"].assert_called_once_with(content, "es")
    assert result.authenticity_score == 43
    assert result.findings == ["a", "b", c.FINDING_TEXT_FILLER, c.FINDING_TEXT_FILLER]
    assert result.recommendation == "Check it."
    assert result.detected_language == "es"
    assert result.fact_check.verdict is Verdict.MISLEADING
    assert result.fact_check.corrected_statement == correct(content)
    assert result.fact_check.sources[0].name == "WHO"


async def test_language_hint_overrides_detection():
    with ExitStack() as stack:
        mocks = _gemini(stack, language=StepResult.success("es"),
                        analysis=StepResult.success(_HIGH_ASSESSMENT))
        result = await analyze(
            _request(ContentType.TEXT, NEUTRAL_TEXT, language_hint="fr"), NullJitter()
        )

    mocks["analyze_content"].assert_called_once_with(NEUTRAL_TEXT, "fr")
    assert result.detected_language == "es"


async def test_failed_language_detection_defaults_to_english():
    with ExitStack() as stack:
        mocks = _gemini(stack, analysis=StepResult.success(_HIGH_ASSESSMENT))
        result = await analyze(_request(ContentType.TEXT, NEUTRAL_TEXT), NullJitter())

    mocks["analyze_content"].assert_called_once_with(NEUTRAL_TEXT, "en")
    assert result.detected_language == "en"


async def test_high_gemini_score_skips_fact_check():
    with ExitStack() as stack:
        mocks = _gemini(stack, language=StepResult.success("en"),
                        analysis=StepResult.success(_HIGH_ASSESSMENT))
        result = await analyze(_request(ContentType.TEXT, NEUTRAL_TEXT), NullJitter())

    mocks["fact_check"].assert_not_called()
    assert result.authenticity_score == 85
    assert result.fact_check is None


async def test_failed_analysis_falls_back_to_local_scoring():
    with ExitStack() as stack:
        _gemini(stack, language=StepResult.success("en"), check=StepResult.success(_MISLEADING))
        result = await analyze(_request(ContentType.TEXT, SENSATIONAL_TEXT), NullJitter())

    assert result.authenticity_score == 35
    assert result.recommendation == c.RECOMMENDATION_TEXT_SUSPECT
    # the fact check step succeeded on its own
    assert result.fact_check.verdict is Verdict.MISLEADING


async def test_failed_fact_check_falls_back_to_local_policy():
    with ExitStack() as stack:
        _gemini(stack, language=StepResult.success("en"),
                analysis=StepResult.success(_LOW_ASSESSMENT))
        result = await analyze(_request(ContentType.TEXT, SENSATIONAL_TEXT), NullJitter())

    assert result.authenticity_score == 43
    assert result.fact_check.verdict is Verdict.FALSE


async def test_url_subjects_are_prefixed():
    with ExitStack() as stack:
        mocks = _gemini(stack, language=StepResult.success("en"),
                        analysis=StepResult.success(_LOW_ASSESSMENT))
        result = await analyze(_request(ContentType.URL, PHISHING_URL), NullJitter())

    mocks["detect_language"].assert_called_once_with(f"Analyzing website: {PHISHING_URL}")
    mocks["analyze_url"].assert_called_once_with(PHISHING_URL, "en")
    mocks["analyze_content"].assert_not_called()
    mocks["fact_check"].assert_called_once_with(f"Website URL: {PHISHING_URL}", "en")
    assert result.findings[2:] == [c.FINDING_URL_FILLER, c.FINDING_URL_FILLER]


@pytest.mark.parametrize("raw, expected, fact_checked", [(69.5, 70, False), (69.4, 69, True),
                                                        (150, 100, False), (-5, 0, True)])
async def test_gemini_score_normalized_before_fact_check(raw, expected, fact_checked):
    assessment = ContentAssessment(score=raw, findings=[], recommendation="r")
    with ExitStack() as stack:
        mocks = _gemini(stack, language=StepResult.success("en"),
                        analysis=StepResult.success(assessment))
        result = await analyze(_request(ContentType.TEXT, NEUTRAL_TEXT), NullJitter())

    assert result.authenticity_score == expected
    assert mocks["fact_check"].called is fact_checked
    assert result.findings == [c.FINDING_TEXT_FILLER] * 4
