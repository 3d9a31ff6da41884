"""
Fact-check escalation policy and local fact-check assembly.

`decide` is a two-state gate evaluated once per request: TRIGGERED below
settings.fact_check_threshold, SKIPPED at or above it. When triggered, the
local verdict is FALSE for sensational markers (BREAKING/SHOCKING or excessive
"!") and NEEDS VERIFICATION otherwise. MISLEADING is reserved for the Gemini
path; the local rules never assign it.
"""

import logging
from enum import Enum
from typing import Optional

from truthscan.analysis.claims import extract_main_claim
from truthscan.analysis.constants import NEEDS_VERIFICATION_EXPLANATION
from truthscan.analysis.corrections import correct, explain
from truthscan.analysis.heuristics import has_false_claim_markers
from truthscan.analysis.sources import match_sources, matched_categories
from truthscan.config import settings
from truthscan.schemas.analysis import FactCheckAssessment, FactCheckResult, Verdict

logger = logging.getLogger(__name__)


class FactCheckDecision(str, Enum):
    SKIPPED = "skipped"
    TRIGGERED = "triggered"


def decide(score: int) -> FactCheckDecision:
    if score < settings.fact_check_threshold:
        return FactCheckDecision.TRIGGERED
    return FactCheckDecision.SKIPPED


def classify_verdict(content: str) -> Verdict:
    if has_false_claim_markers(content):
        return Verdict.FALSE
    return Verdict.NEEDS_VERIFICATION


def local_fact_check(content: str) -> FactCheckResult:
    verdict = classify_verdict(content)
    logger.info(
        f"[FACTCHECK] Local verdict={verdict.value}, categories={matched_categories(content)}"
    )

    if verdict is Verdict.FALSE:
        return FactCheckResult(
            claim=extract_main_claim(content),
            verdict=verdict,
            explanation=explain(content),
            corrected_statement=correct(content),
            sources=match_sources(content),
        )

    return FactCheckResult(
        claim=extract_main_claim(content),
        verdict=verdict,
        explanation=NEEDS_VERIFICATION_EXPLANATION,
        sources=match_sources(content),
    )


def from_assessment(assessment: FactCheckAssessment, content: str) -> FactCheckResult:
    """
    Build a FactCheckResult from a validated Gemini fact check.

    Sources are always matched locally. A corrected statement is kept only for
    FALSE / MISLEADING and filled from the local table when Gemini omits it.
    """
    verdict = Verdict(assessment.verdict)
    corrected = None
    if verdict in (Verdict.FALSE, Verdict.MISLEADING):
        corrected = assessment.corrected_statement or correct(content)

    return FactCheckResult(
        claim=assessment.claim.strip() or extract_main_claim(content),
        verdict=verdict,
        explanation=assessment.explanation,
        corrected_statement=corrected,
        sources=match_sources(content),
    )


def evaluate(score: int, content: str) -> Optional[FactCheckResult]:
    """Local fact check when the score triggers escalation, else None."""
    if decide(score) is FactCheckDecision.SKIPPED:
        return None
    return local_fact_check(content)
