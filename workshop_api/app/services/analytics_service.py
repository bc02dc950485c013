"""
Service layer for admin analytics.

Figures are computed from a full scan of the attendees collection on
every call; nothing is cached.
"""

from typing import List

from workshop_api.app.core.db import DocumentStore
from workshop_api.app.schemas.analytics import DesignationBreakdown
from workshop_api.app.services.aggregation import designation_breakdown
from workshop_api.app.services.attendee_service import AttendeeService


class AnalyticsService:
    """Aggregated views over the attendee registrations."""

    def __init__(self, store: DocumentStore):
        self.attendees = AttendeeService(store)

    async def designation_breakdown(self) -> List[DesignationBreakdown]:
        return designation_breakdown(await self.attendees.list())
