"""
Report routes: fetch a stored analysis by its short ID.
"""

from fastapi import APIRouter

from truthscan.services.reports_service import get_report

router = APIRouter(tags=["Reports"])


@router.get("/api/v1/reports/{short_id}")
async def get_report_route(short_id: str):
    """Returns the stored input and analysis result. No auth required."""
    return get_report(short_id)
