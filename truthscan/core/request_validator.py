"""
Request validation and log sanitization for the /analyze route.

`validate_request` turns a raw JSON payload into an AnalysisRequest or raises
InputValidationError before any heuristic runs.
"""

import logging
import re
from typing import Any

from pydantic import ValidationError

from truthscan.core.errors import InputValidationError
from truthscan.schemas.analysis import AnalysisRequest, ContentType

logger = logging.getLogger(__name__)

_TYPE_KEYS = ("type", "contentType", "content_type")


def validate_request(payload: Any) -> AnalysisRequest:
    """Check required fields and content type, then build the frozen request."""
    if not isinstance(payload, dict):
        raise InputValidationError("Request body must be a JSON object")

    content_type = next((payload[k] for k in _TYPE_KEYS if payload.get(k)), None)
    content = payload.get("content")

    if not content_type or not isinstance(content, str) or not content.strip():
        raise InputValidationError()

    if not isinstance(content_type, str) or content_type not in {t.value for t in ContentType}:
        raise InputValidationError(
            f"Unsupported content type: {content_type!r}. Use text, url or media"
        )

    try:
        return AnalysisRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"[VALIDATION] Rejected request: {e.error_count()} field error(s)")
        raise InputValidationError(f"Invalid request: {e.errors()[0].get('msg', 'invalid field')}")


def sanitize_log_message(message: str, limit: int = 120) -> str:
    """Collapse whitespace, strip query strings from URLs and truncate user content."""
    msg = re.sub(r"\s+", " ", message).strip()
    msg = re.sub(r"(https?://[^\s?#]+)[?#]\S*", r"\1?[REDACTED]", msg)
    if len(msg) > limit:
        msg = msg[:limit] + "..."
    return msg
