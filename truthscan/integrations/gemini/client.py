"""
Gemini API client — initialization and the four collaborator calls.

The module-level `client` is created on import from GEMINI_API_KEY and is None
when the key is missing or still the placeholder. Every public call returns a
StepResult: SDK errors, non-JSON output, schema mismatches, unknown verdicts and
unsupported language codes all come back as "unavailable" so the pipeline can
fall back to the local heuristics for that step.
"""

import json
import logging
import os
import re
import time
from typing import Optional, Type, TypeVar

from google import genai
from google.genai import types
from pydantic import BaseModel

from truthscan.analysis.constants import LANGUAGE_NAMES
from truthscan.analysis.outcome import StepResult
from truthscan.config import settings
from truthscan.integrations.gemini.prompts import (
    get_content_analysis_prompt,
    get_fact_check_prompt,
    get_language_detection_prompt,
    get_url_analysis_prompt,
)
from truthscan.schemas.analysis import ContentAssessment, FactCheckAssessment, Verdict

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEY = "your_gemini_api_key_here"

M = TypeVar("M", bound=BaseModel)


def _build_client() -> Optional[genai.Client]:
    api_key = os.getenv("GEMINI_API_KEY")
    if not api_key or api_key == PLACEHOLDER_API_KEY:
        logger.warning("[STARTUP] GEMINI_API_KEY not set. Text and URL analysis will use local heuristics.")
        return None

    return genai.Client(
        api_key=api_key,
        http_options=types.HttpOptions(
            timeout=settings.gemini_http_timeout_ms,
            retry_options=types.HttpRetryOptions(
                attempts=settings.gemini_max_retries,
                initial_delay=settings.gemini_retry_initial_delay,
                max_delay=settings.gemini_retry_max_delay,
                exp_base=settings.gemini_retry_exp_base,
                http_status_codes=[408, 429, 500, 502, 503, 504]
            )
        )
    )


client = _build_client()


def initialize() -> None:
    """Rebuild the client after `.env` has been loaded (FastAPI lifespan)."""
    global client
    if client is None:
        client = _build_client()
        if client is not None:
            logger.info("[STARTUP] Gemini client initialized")


def is_available() -> bool:
    return client is not None


def _generate(prompt: str, schema: Optional[Type[BaseModel]] = None):
    if client is None:
        raise RuntimeError("Gemini client is not configured")

    options = {"temperature": settings.gemini_temperature}
    if schema is not None:
        options.update(response_mime_type="application/json", response_schema=schema)

    return client.models.generate_content(
        model=settings.gemini_model,
        contents=prompt,
        config=types.GenerateContentConfig(**options)
    )


def _parse_structured(response, schema: Type[M]) -> M:
    """Structured output when the SDK parsed it, else the first JSON object in the text."""
    parsed = getattr(response, "parsed", None)
    if isinstance(parsed, schema):
        return parsed

    text = response.text or ""
    match = re.search(r"\{[\s\S]*\}", text)
    if not match:
        raise ValueError("Invalid response format: no JSON object found")
    return schema.model_validate(json.loads(match.group(0)))


def _normalize_verdict(raw: str) -> str:
    verdict = raw.strip().upper().replace("_", " ")
    if verdict not in {v.value for v in Verdict}:
        raise ValueError(f"Unknown verdict: {raw!r}")
    return verdict


def detect_language(text: str) -> StepResult[str]:
    """ISO 639-1 code of `text`, restricted to the supported language set."""
    try:
        response = _generate(get_language_detection_prompt(text))
        code = re.sub(r"[^a-z]", "", (response.text or "").strip().lower())
        if code not in LANGUAGE_NAMES:
            logger.warning(f"[GEMINI] Unsupported language code returned: {code!r}")
            return StepResult.unavailable(f"unsupported language code {code!r}")
        return StepResult.success(code)
    except Exception as e:
        logger.error(f"[GEMINI] detect_language error: {e}")
        return StepResult.unavailable(str(e))


def _assess(prompt: str, label: str) -> StepResult[ContentAssessment]:
    try:
        start = time.perf_counter()
        response = _generate(prompt, ContentAssessment)
        assessment = _parse_structured(response, ContentAssessment)
        logger.info(
            f"[GEMINI] {label}: score={assessment.score}, "
            f"latency={time.perf_counter() - start:.2f}s"
        )
        return StepResult.success(assessment)
    except Exception as e:
        logger.error(f"[GEMINI] {label} error: {e}")
        return StepResult.unavailable(str(e))


def analyze_content(text: str, language: str) -> StepResult[ContentAssessment]:
    return _assess(get_content_analysis_prompt(text, language), "analyze_content")


def analyze_url(url: str, language: str) -> StepResult[ContentAssessment]:
    return _assess(get_url_analysis_prompt(url, language), "analyze_url")


def fact_check(text: str, language: str) -> StepResult[FactCheckAssessment]:
    try:
        response = _generate(get_fact_check_prompt(text, language), FactCheckAssessment)
        assessment = _parse_structured(response, FactCheckAssessment)
        assessment = assessment.model_copy(
            update={"verdict": _normalize_verdict(assessment.verdict)}
        )
        logger.info(f"[GEMINI] fact_check: verdict={assessment.verdict}")
        return StepResult.success(assessment)
    except Exception as e:
        logger.error(f"[GEMINI] fact_check error: {e}")
        return StepResult.unavailable(str(e))


if __name__ == "__main__":
    import sys
    if len(sys.argv) > 1:
        sample = " ".join(sys.argv[1:])
        print(f"Language: {detect_language(sample)}")
        print(f"Analysis: {analyze_content(sample, 'en')}")
