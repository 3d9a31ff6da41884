"""
Analysis report store: saves each finished analysis under a short share ID.

Two tiers, like the rest of the service: Upstash Redis (report:{short_id},
TTL settings.report_ttl_sec) when configured, else an in-memory LRU with the
same TTL. Saving is best-effort: a storage failure is logged and the analysis
is returned without a short ID.
"""

import json
import logging
import secrets
import string
import time
from collections import OrderedDict
from typing import Optional

from fastapi import HTTPException

from truthscan.config import settings
from truthscan.integrations import redis_client as redis_module
from truthscan.schemas.analysis import AnalysisRequest, AnalysisResponse

logger = logging.getLogger(__name__)

# {short_id: (record, stored_at)}
local_reports: OrderedDict = OrderedDict()


def _generate_short_id(length: int = settings.short_id_length) -> str:
    alphabet = string.ascii_letters + string.digits
    return ''.join(secrets.choice(alphabet) for _ in range(length))


def build_record(request: AnalysisRequest, response: AnalysisResponse) -> dict:
    """Opaque record handed to storage: the original input plus the full result."""
    return {
        "contentType": request.content_type.value,
        "content": request.content,
        "fileName": request.file_name,
        "result": response.model_dump(mode="json", by_alias=True, exclude_none=True),
        "createdAt": int(time.time()),
    }


def save_report(request: AnalysisRequest, response: AnalysisResponse) -> Optional[str]:
    """Store the analysis and return its short ID, or None if storage failed."""
    short_id = _generate_short_id()
    record = build_record(request, response)

    rc = redis_module.client
    if rc:
        try:
            rc.setex(f"report:{short_id}", settings.report_ttl_sec, json.dumps(record))
            return short_id
        except Exception as e:
            logger.warning(f"[REPORTS] Redis save failed: {e}")
            return None

    local_reports[short_id] = (record, time.time())
    if len(local_reports) > settings.local_report_max_size:
        local_reports.popitem(last=False)
    return short_id


def get_report(short_id: str) -> dict:
    """Fetch a stored report. Raises 404 when it never existed or has expired."""
    rc = redis_module.client
    if rc:
        try:
            raw = rc.get(f"report:{short_id}")
        except Exception as e:
            logger.error(f"[REPORTS] Redis get failed: {e}")
            raise HTTPException(status_code=503, detail="Report storage unavailable.")
        if not raw:
            raise HTTPException(status_code=404, detail="Report not found or expired.")
        return json.loads(raw) if isinstance(raw, str) else raw

    entry = local_reports.get(short_id)
    if entry:
        record, stored_at = entry
        if time.time() - stored_at < settings.report_ttl_sec:
            local_reports.move_to_end(short_id)
            return record
        del local_reports[short_id]

    raise HTTPException(status_code=404, detail="Report not found or expired.")
