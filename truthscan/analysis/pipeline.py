"""
Top-level analysis pipeline — public entry point for the /analyze route.

`analyze` orchestrates:
  1. Media      → local placeholder score (never sent to Gemini)
  2. Text / URL → Gemini language detection → Gemini analysis → Gemini fact
                  check (below the threshold), each step falling back to the
                  local heuristics on its own when Gemini is unavailable
  3. Normalization: rounded score, clamped metrics, derived verdict flags,
                  elapsed time
"""

import asyncio
import logging
import random
import time
from dataclasses import dataclass
from typing import Optional

from truthscan.analysis import fact_check as policy
from truthscan.analysis.constants import (
    DEFAULT_LANGUAGE,
    FINDING_TEXT_FILLER,
    FINDING_URL_FILLER,
    RECOMMENDATION_MEDIA_CREDIBLE,
    RECOMMENDATION_MEDIA_SUSPECT,
    RECOMMENDATION_TEXT_CREDIBLE,
    RECOMMENDATION_TEXT_SUSPECT,
)
from truthscan.analysis.heuristics import (
    clamp,
    expand_detection_metrics,
    media_findings,
    pad_findings,
    round_half_up,
    score_media,
    score_text,
    text_findings,
    url_findings,
)
from truthscan.config import settings
from truthscan.integrations.gemini.client import (
    analyze_content,
    analyze_url,
    detect_language,
    fact_check,
    is_available,
)
from truthscan.schemas.analysis import (
    AnalysisRequest,
    AnalysisResponse,
    ContentAssessment,
    ContentType,
    FactCheckResult,
)

logger = logging.getLogger(__name__)


@dataclass
class Assessment:
    score: int
    findings: list[str]
    recommendation: str
    fact_check: Optional[FactCheckResult] = None
    detected_language: Optional[str] = None


def _normalize_score(raw: float) -> int:
    return round_half_up(clamp(raw, 0, 100))


def _local_assessment(request: AnalysisRequest, rng) -> Assessment:
    """Score, findings and recommendation from local heuristics only."""
    content = request.content

    if request.content_type is ContentType.MEDIA:
        score = score_media(request.file_type, rng)
        recommendation = (
            RECOMMENDATION_MEDIA_CREDIBLE if score >= settings.authentic_threshold
            else RECOMMENDATION_MEDIA_SUSPECT
        )
        return Assessment(score, media_findings(score), recommendation)

    score = score_text(content, rng)
    if request.content_type is ContentType.URL:
        findings = url_findings(content)
    else:
        findings = text_findings(score, content)
    recommendation = (
        RECOMMENDATION_TEXT_CREDIBLE if score >= settings.authentic_threshold
        else RECOMMENDATION_TEXT_SUSPECT
    )
    return Assessment(score, findings, recommendation)


def _from_gemini(assessment: ContentAssessment, content_type: ContentType) -> Assessment:
    filler = FINDING_URL_FILLER if content_type is ContentType.URL else FINDING_TEXT_FILLER
    return Assessment(
        score=_normalize_score(assessment.score),
        findings=pad_findings(assessment.findings, filler),
        recommendation=assessment.recommendation,
    )


async def _assess_with_gemini(request: AnalysisRequest, rng) -> Assessment:
    content = request.content
    is_url = request.content_type is ContentType.URL

    subject = f"Analyzing website: {content}" if is_url else content
    language_step = await asyncio.to_thread(detect_language, subject)
    detected_language = language_step.or_else(lambda: DEFAULT_LANGUAGE)
    language = request.language_hint or detected_language

    analyzer = analyze_url if is_url else analyze_content
    analysis_step = await asyncio.to_thread(analyzer, content, language)
    if not analysis_step.ok:
        logger.warning(f"[PIPELINE] Gemini analysis unavailable ({analysis_step.reason}), scoring locally")
    assessment = analysis_step.map(
        lambda value: _from_gemini(value, request.content_type)
    ).or_else(lambda: _local_assessment(request, rng))
    assessment.detected_language = detected_language

    if policy.decide(assessment.score) is policy.FactCheckDecision.TRIGGERED:
        claim_subject = f"Website URL: {content}" if is_url else content
        check_step = await asyncio.to_thread(fact_check, claim_subject, language)
        if not check_step.ok:
            logger.warning(f"[PIPELINE] Gemini fact check unavailable ({check_step.reason}), using local policy")
        assessment.fact_check = check_step.map(
            lambda value: policy.from_assessment(value, claim_subject)
        ).or_else(lambda: policy.local_fact_check(claim_subject))

    return assessment


async def analyze(request: AnalysisRequest, rng: Optional[random.Random] = None) -> AnalysisResponse:
    """
    Analyze one request and return a normalized AnalysisResponse.

    Never raises for collaborator problems: every Gemini step degrades to its
    local heuristic. `rng` supplies score jitter; pass a seeded Random (or any
    object with `uniform`) for reproducible results.
    """
    rng = rng or random.Random()
    start_time = time.perf_counter()

    if request.content_type is ContentType.MEDIA:
        assessment = _local_assessment(request, rng)
    elif is_available():
        assessment = await _assess_with_gemini(request, rng)
    else:
        assessment = _local_assessment(request, rng)
        assessment.fact_check = policy.evaluate(assessment.score, request.content)

    score = _normalize_score(assessment.score)
    metrics = expand_detection_metrics(score, request.content_type, rng)
    elapsed = round(time.perf_counter() - start_time, 1)

    logger.info(
        f"[PIPELINE] type={request.content_type.value} score={score} "
        f"fact_check={'yes' if assessment.fact_check else 'no'} time={elapsed:.1f}s"
    )

    return AnalysisResponse(
        authenticity_score=score,
        detection_metrics=metrics,
        findings=assessment.findings,
        recommendation=assessment.recommendation,
        analysis_time_seconds=elapsed,
        detected_language=assessment.detected_language,
        fact_check=assessment.fact_check,
    )
