"""
Per-client throttling for /analyze, protecting the shared Gemini quota.

Redis (fixed window via INCR + EXPIRE) when configured, otherwise a sliding
window of request timestamps held in process memory. A Redis error degrades to
the memory limiter rather than letting the request through unchecked.
"""

import logging
import time

from fastapi import HTTPException

from truthscan.config import settings
from truthscan.integrations import redis_client as redis_module

logger = logging.getLogger(__name__)

# {client_id: [request timestamps]}
_request_log: dict[str, list[float]] = {}

TOO_MANY_REQUESTS = "Too many analysis requests. Please try again in a minute."


def enforce_rate_limit(client_id: str) -> None:
    """Raise HTTP 429 when `client_id` exceeds its analysis quota."""
    rc = redis_module.client
    if rc is None:
        _enforce_in_memory(client_id)
        return

    try:
        _enforce_in_redis(rc, client_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[RATE LIMIT] Redis error: {e}. Falling back to memory.")
        _enforce_in_memory(client_id)


def _enforce_in_redis(rc, client_id: str) -> None:
    key = f"rate_limit:analyze:{client_id}"
    count = rc.incr(key)
    if count == 1:
        rc.expire(key, settings.rate_limit_request_window_sec)

    if count > settings.rate_limit_max_requests:
        logger.warning(f"[RATE LIMIT] Redis quota exceeded for {client_id}")
        raise HTTPException(status_code=429, detail=TOO_MANY_REQUESTS)


def _enforce_in_memory(client_id: str, now: float | None = None) -> None:
    now = time.time() if now is None else now
    window = settings.rate_limit_request_window_sec

    if len(_request_log) > settings.rate_limit_memory_limit:
        _prune_idle_clients(now)

    recent = [t for t in _request_log.get(client_id, []) if now - t < window]
    if len(recent) >= settings.rate_limit_max_requests:
        _request_log[client_id] = recent
        logger.warning(f"[RATE LIMIT] Memory quota exceeded for {client_id}")
        raise HTTPException(status_code=429, detail=TOO_MANY_REQUESTS)

    recent.append(now)
    _request_log[client_id] = recent


def _prune_idle_clients(now: float) -> None:
    window = settings.rate_limit_request_window_sec
    idle = [k for k, stamps in _request_log.items() if not stamps or now - stamps[-1] > window]
    for k in idle:
        del _request_log[k]
    logger.info(f"[RATE LIMIT] Pruned {len(idle)} idle clients")
