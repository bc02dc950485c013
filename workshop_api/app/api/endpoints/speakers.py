"""
Speaker endpoints.

Speakers are readable by everyone.  Creating, replacing and deleting
them requires the admin password.  ``PUT`` replaces the whole document
and always answers with the id from the path.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from workshop_api.app.schemas.common import DataResponse, MessageResponse
from workshop_api.app.schemas.speaker import SpeakerCreate, SpeakerRead
from workshop_api.app.services.speaker_service import SpeakerService
from workshop_api.app.api.deps import get_speaker_service

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[SpeakerRead], response_model_exclude_none=True)
@admin_router.get("", response_model=List[SpeakerRead], response_model_exclude_none=True)
async def list_speakers(service: SpeakerService = Depends(get_speaker_service)) -> List[SpeakerRead]:
    return await service.list()


@router.get("/{speaker_id}", response_model=SpeakerRead, response_model_exclude_none=True)
@admin_router.get("/{speaker_id}", response_model=SpeakerRead, response_model_exclude_none=True)
async def get_speaker(
    speaker_id: str,
    service: SpeakerService = Depends(get_speaker_service),
) -> SpeakerRead:
    """Retrieve a single speaker.  Raises 404 if the key is unknown."""
    return await service.get(speaker_id)


@admin_router.post(
    "",
    response_model=DataResponse[SpeakerRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_speaker(
    speaker: SpeakerCreate,
    service: SpeakerService = Depends(get_speaker_service),
) -> DataResponse[SpeakerRead]:
    created = await service.create(speaker)
    return DataResponse[SpeakerRead](message="Speaker created successfully", data=created)


@admin_router.put("/{speaker_id}", response_model=DataResponse[SpeakerRead], response_model_exclude_none=True)
async def update_speaker(
    speaker_id: str,
    speaker: SpeakerCreate,
    service: SpeakerService = Depends(get_speaker_service),
) -> DataResponse[SpeakerRead]:
    updated = await service.update(speaker_id, speaker)
    return DataResponse[SpeakerRead](message="Speaker updated successfully", data=updated)


@admin_router.delete("/{speaker_id}", response_model=MessageResponse)
async def delete_speaker(
    speaker_id: str,
    service: SpeakerService = Depends(get_speaker_service),
) -> MessageResponse:
    await service.delete(speaker_id)
    return MessageResponse(message="Speaker deleted successfully")
