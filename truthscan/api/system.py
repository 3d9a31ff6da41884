"""
System / health routes.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from truthscan.integrations import redis_client as redis_module
from truthscan.integrations.gemini.client import is_available

router = APIRouter(tags=["System"])


@router.get("/health")
async def health():
    return {
        "status": "healthy",
        "ai_analysis": "enabled" if is_available() else "heuristics-only",
        "storage": "redis" if redis_module.client else "memory",
    }


@router.get("/robots.txt", response_class=PlainTextResponse)
def robots():
    return "User-agent: *\nDisallow: /"
