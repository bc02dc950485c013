"""
Session endpoints.

The session listing is the main page of the workshop site, so it
returns every session already joined with its speakers.  Single
sessions are returned as stored.  Writes are admin only; ``PUT``
replaces the whole document and always answers with the id from the
path.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from workshop_api.app.schemas.common import DataResponse, MessageResponse
from workshop_api.app.schemas.session import SessionCreate, SessionRead, SessionWithSpeakers
from workshop_api.app.services.session_service import SessionService
from workshop_api.app.api.deps import get_session_service

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[SessionWithSpeakers], response_model_exclude_none=True)
@admin_router.get("", response_model=List[SessionWithSpeakers], response_model_exclude_none=True)
async def list_sessions(service: SessionService = Depends(get_session_service)) -> List[SessionWithSpeakers]:
    """List all sessions with their resolved speakers.

    Speaker keys that do not match a stored speaker are left out of the
    ``speakers`` list without error.
    """
    return await service.list_with_speakers()


@router.get("/{session_id}", response_model=SessionRead, response_model_exclude_none=True)
@admin_router.get("/{session_id}", response_model=SessionRead, response_model_exclude_none=True)
async def get_session(
    session_id: str,
    service: SessionService = Depends(get_session_service),
) -> SessionRead:
    return await service.get(session_id)


@admin_router.post(
    "",
    response_model=DataResponse[SessionRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    session: SessionCreate,
    service: SessionService = Depends(get_session_service),
) -> DataResponse[SessionRead]:
    created = await service.create(session)
    return DataResponse[SessionRead](message="Session created successfully", data=created)


@admin_router.put("/{session_id}", response_model=DataResponse[SessionRead], response_model_exclude_none=True)
async def update_session(
    session_id: str,
    session: SessionCreate,
    service: SessionService = Depends(get_session_service),
) -> DataResponse[SessionRead]:
    updated = await service.update(session_id, session)
    return DataResponse[SessionRead](message="Session updated successfully", data=updated)


@admin_router.delete("/{session_id}", response_model=MessageResponse)
async def delete_session(
    session_id: str,
    service: SessionService = Depends(get_session_service),
) -> MessageResponse:
    await service.delete(session_id)
    return MessageResponse(message="Session deleted successfully")
