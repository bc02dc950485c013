"""
Service layer for attendee registrations.

Registration is the only way attendees are created: the service assigns
a fresh identifier and stamps the current UTC time, ignoring anything
the caller may have sent for those fields.  Attendees are never updated.
"""

import logging
from datetime import datetime, timezone

from workshop_api.app.schemas.attendee import AttendeeCreate, AttendeeRead
from workshop_api.app.services.base import DocumentService, new_id

logger = logging.getLogger(__name__)


class AttendeeService(DocumentService[AttendeeRead]):
    collection_name = "attendees"
    read_model = AttendeeRead
    label = "Attendee"

    async def register(self, data: AttendeeCreate) -> AttendeeRead:
        """Store a new registration and return it."""
        attendee = AttendeeRead(
            id=new_id(),
            registered_at=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        await self._save(attendee)
        logger.info("Registered attendee %s", attendee.id)
        return attendee

    async def count(self) -> int:
        """Return the number of registered attendees."""
        return len(await self.collection.list())
