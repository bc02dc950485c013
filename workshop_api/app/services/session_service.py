"""
Service layer for workshop sessions.

Besides the admin CRUD operations this service produces the public
session listing, in which each session carries the speaker records its
``speaker_ids`` resolve to.
"""

import logging
from typing import List

from workshop_api.app.core.db import DocumentStore
from workshop_api.app.schemas.session import SessionCreate, SessionRead, SessionWithSpeakers
from workshop_api.app.services.aggregation import join_sessions_with_speakers
from workshop_api.app.services.base import DocumentService, new_id
from workshop_api.app.services.speaker_service import SpeakerService

logger = logging.getLogger(__name__)


class SessionService(DocumentService[SessionRead]):
    collection_name = "sessions"
    read_model = SessionRead
    label = "Session"

    def __init__(self, store: DocumentStore):
        super().__init__(store)
        self.speakers = SpeakerService(store)

    async def create(self, data: SessionCreate) -> SessionRead:
        session = SessionRead(id=new_id(), **data.model_dump())
        await self._save(session)
        logger.info("Created session %s", session.id)
        return session

    async def update(self, session_id: str, data: SessionCreate) -> SessionRead:
        """Overwrite the session stored under ``session_id`` (upsert)."""
        session = SessionRead(id=session_id, **data.model_dump())
        await self._save(session)
        logger.info("Updated session %s", session_id)
        return session

    async def list_with_speakers(self) -> List[SessionWithSpeakers]:
        """Return all sessions joined with their speakers."""
        sessions = await self.list()
        speakers = await self.speakers.list()
        return join_sessions_with_speakers(sessions, speakers)
