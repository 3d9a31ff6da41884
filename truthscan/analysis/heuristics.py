"""
Local credibility heuristics for text, URL and media inputs.

Functions:
  - score_text: Additive keyword/structure scoring for free text (and URLs).
  - score_media: Neutral-baseline placeholder score for media descriptors.
  - text_findings / url_findings / media_findings: Four rationale strings each.
  - expand_detection_metrics: Fans one score out into four labelled sub-scores.

No network access. Randomness is injected as any object with `uniform(a, b)`
(normally a `random.Random`), so a seeded or stubbed source makes every
function here deterministic.
"""

import math
import re
from typing import Optional
from urllib.parse import urlsplit

from truthscan.analysis.constants import (
    ATTRIBUTION_FINDING_REGEX,
    ATTRIBUTION_REGEX,
    DETECTION_METRICS,
    EMOTIONAL_REGEX,
    FALSE_CLAIM_KEYWORDS,
    FINDING_BRIEF,
    FINDING_DIGITS,
    FINDING_EXCLAMATION,
    FINDING_HTTPS,
    FINDING_INCONSISTENT,
    FINDING_INVALID_URL,
    FINDING_KNOWN_DOMAIN,
    FINDING_NO_ATTRIBUTION,
    FINDING_NO_HTTPS,
    FINDING_PHISHING,
    FINDING_SENSATIONAL,
    FINDING_SUBDOMAINS,
    FINDING_TEXT_FILLER,
    FINDING_UNKNOWN_DOMAIN,
    FINDING_URL_FILLER,
    FINDINGS_COUNT,
    KNOWN_NEWS_DOMAINS,
    MAX_HOST_LABELS,
    MEDIA_FINDINGS_CLEAN,
    MEDIA_FINDINGS_SUSPECT,
    PHISHING_PATTERNS,
    SENSATIONAL_KEYWORDS,
    STATISTICS_REGEX,
    TEXT_FINDINGS_CREDIBLE,
)
from truthscan.config import settings
from truthscan.schemas.analysis import ContentType, DetectionMetric


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def count_exclamations(content: str) -> int:
    return content.count("!")


def count_words(content: str) -> int:
    return len(content.split())


def has_false_claim_markers(content: str) -> bool:
    """BREAKING/SHOCKING anywhere, or more exclamation marks than the threshold."""
    upper = content.upper()
    if any(word in upper for word in FALSE_CLAIM_KEYWORDS):
        return True
    return count_exclamations(content) > settings.text_exclamation_max


def text_score_before_jitter(content: str) -> int:
    score = settings.text_score_baseline
    upper = content.upper()

    if any(word in upper for word in SENSATIONAL_KEYWORDS):
        score -= settings.text_sensational_penalty

    caps_runs = re.findall(r"[A-Z]{%d,}" % settings.text_caps_run_length, content)
    if len(caps_runs) > settings.text_caps_max_runs:
        score -= settings.text_caps_penalty

    if count_exclamations(content) > settings.text_exclamation_max:
        score -= settings.text_exclamation_penalty

    if EMOTIONAL_REGEX.search(content) and len(content) < settings.text_emotional_max_length:
        score -= settings.text_emotional_penalty

    if STATISTICS_REGEX.search(content):
        score += settings.text_statistics_bonus

    if ATTRIBUTION_REGEX.search(content):
        score += settings.text_attribution_bonus

    word_count = count_words(content)
    if word_count < settings.text_short_word_count:
        score -= settings.text_short_penalty
    if word_count > settings.text_long_word_count:
        score += settings.text_long_bonus

    return score


def score_text(content: str, rng) -> int:
    """Authenticity score for free text, in [text_score_min, text_score_max]."""
    jitter = rng.uniform(-settings.text_jitter, settings.text_jitter)
    score = clamp(
        text_score_before_jitter(content) + jitter,
        settings.text_score_min,
        settings.text_score_max,
    )
    return round_half_up(score)


def score_media(file_type: Optional[str], rng) -> int:
    """
    Placeholder authenticity score for a media descriptor.

    There is no forensic analysis behind this number: it stays near a neutral
    baseline with a wide band per media kind, and callers must not present it
    with the confidence of the text path.
    """
    score = float(settings.media_score_baseline)
    kind = (file_type or "").lower()

    if kind.startswith("image/"):
        score += rng.uniform(-settings.media_image_jitter, settings.media_image_jitter)
    elif kind.startswith("video/"):
        score += rng.uniform(-settings.media_video_jitter, settings.media_video_jitter)
    elif kind.startswith("audio/"):
        score += rng.uniform(-settings.media_audio_jitter, settings.media_audio_jitter)

    return round_half_up(clamp(score, settings.media_score_min, settings.media_score_max))


def pad_findings(findings: list[str], filler: str) -> list[str]:
    padded = list(findings[:FINDINGS_COUNT])
    while len(padded) < FINDINGS_COUNT:
        padded.append(filler)
    return padded


def text_findings(score: int, content: str) -> list[str]:
    if score >= settings.authentic_threshold:
        return list(TEXT_FINDINGS_CREDIBLE)

    findings = []
    upper = content.upper()
    if any(word in upper for word in FALSE_CLAIM_KEYWORDS):
        findings.append(FINDING_SENSATIONAL)
    if count_exclamations(content) > settings.text_exclamation_max:
        findings.append(FINDING_EXCLAMATION)
    if not ATTRIBUTION_FINDING_REGEX.search(content):
        findings.append(FINDING_NO_ATTRIBUTION)
    if count_words(content) < settings.text_short_word_count:
        findings.append(FINDING_BRIEF)
    if not findings:
        findings.append(FINDING_INCONSISTENT)

    return pad_findings(findings, FINDING_TEXT_FILLER)


def _hostname(url: str) -> Optional[str]:
    """Host of an absolute URL, or None when the URL cannot be parsed as one."""
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
    except ValueError:
        return None
    if not parts.scheme or not host:
        return None
    return host


def url_findings(url: str) -> list[str]:
    domain = _hostname(url)
    if domain is None:
        return pad_findings([FINDING_INVALID_URL], FINDING_URL_FILLER)

    findings = [FINDING_HTTPS if url.startswith("https://") else FINDING_NO_HTTPS]

    if any(known in domain for known in KNOWN_NEWS_DOMAINS):
        findings.append(FINDING_KNOWN_DOMAIN)
    else:
        findings.append(FINDING_UNKNOWN_DOMAIN)

    if any(pattern in domain for pattern in PHISHING_PATTERNS):
        findings.append(FINDING_PHISHING)

    if len(domain.split(".")) > MAX_HOST_LABELS:
        findings.append(FINDING_SUBDOMAINS)

    if re.search(r"\d", domain):
        findings.append(FINDING_DIGITS)

    return pad_findings(findings, FINDING_URL_FILLER)


def media_findings(score: int) -> list[str]:
    if score >= settings.authentic_threshold:
        return list(MEDIA_FINDINGS_CLEAN)
    return list(MEDIA_FINDINGS_SUSPECT)


def expand_detection_metrics(score: float, content_type: ContentType, rng) -> list[DetectionMetric]:
    """
    Four presentation sub-scores derived from the single authenticity score.

    Each metric is the score plus its own jitter, clamped to [0, 100]. This is
    fan-out for display, not four independent measurements.
    """
    metrics = []
    for label, amplitude in DETECTION_METRICS[content_type]:
        raw = score + rng.uniform(-amplitude, amplitude)
        metrics.append(DetectionMetric(label=label, score=round_half_up(clamp(raw, 0, 100))))
    return metrics
