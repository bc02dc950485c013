"""
Service layer for speakers.

Speakers are managed by administrators only.  Updates replace the whole
document; nothing from the previous version is merged in.
"""

import logging

from workshop_api.app.schemas.speaker import SpeakerCreate, SpeakerRead
from workshop_api.app.services.base import DocumentService, new_id

logger = logging.getLogger(__name__)


class SpeakerService(DocumentService[SpeakerRead]):
    collection_name = "speakers"
    read_model = SpeakerRead
    label = "Speaker"

    async def create(self, data: SpeakerCreate) -> SpeakerRead:
        speaker = SpeakerRead(id=new_id(), **data.model_dump())
        await self._save(speaker)
        logger.info("Created speaker %s", speaker.id)
        return speaker

    async def update(self, speaker_id: str, data: SpeakerCreate) -> SpeakerRead:
        """Overwrite the speaker stored under ``speaker_id``.

        The key does not have to exist beforehand; the returned speaker
        always carries ``speaker_id``.
        """
        speaker = SpeakerRead(id=speaker_id, **data.model_dump())
        await self._save(speaker)
        logger.info("Updated speaker %s", speaker_id)
        return speaker
