"""
Analysis route: /analyze

Accepts a JSON payload { "type": "text" | "url" | "media", "content": "...",
"fileName"?, "fileType"?, "language"? } and returns the AnalysisResponse in
camelCase, omitting absent fields.
"""

import json
import logging

from fastapi import APIRouter, Request

from truthscan.analysis.pipeline import analyze
from truthscan.core.errors import InputValidationError
from truthscan.core.rate_limiter import enforce_rate_limit
from truthscan.core.request_validator import sanitize_log_message, validate_request
from truthscan.schemas.analysis import AnalysisResponse
from truthscan.services.reports_service import save_report

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Analysis"])


def get_client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
)
async def analyze_route(request: Request):
    """
    Score the submitted content and attach a fact check when it looks doubtful.
    """
    enforce_rate_limit(get_client_ip(request))

    try:
        payload = await request.json()
    except json.JSONDecodeError:
        raise InputValidationError("Invalid JSON body")

    analysis_request = validate_request(payload)
    logger.info(
        f"[ROUTE] /analyze type={analysis_request.content_type.value} "
        f"content='{sanitize_log_message(analysis_request.content)}'"
    )

    result = await analyze(analysis_request)

    short_id = save_report(analysis_request, result)
    if short_id:
        result = result.model_copy(update={"short_id": short_id})

    return result
