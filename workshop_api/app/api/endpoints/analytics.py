"""
Admin analytics endpoints.

Figures are recomputed from the stored registrations on every request.
"""

from typing import List

from fastapi import APIRouter, Depends

from workshop_api.app.schemas.analytics import DesignationBreakdown
from workshop_api.app.services.analytics_service import AnalyticsService
from workshop_api.app.api.deps import get_analytics_service

admin_router = APIRouter()


@admin_router.get("/designation", response_model=List[DesignationBreakdown])
async def designation_breakdown(
    service: AnalyticsService = Depends(get_analytics_service),
) -> List[DesignationBreakdown]:
    """Return the number of attendees per designation.

    Rows come in no particular order.
    """
    return await service.designation_breakdown()
