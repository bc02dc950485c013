"""
Attendee endpoints.

Anyone may register and read the number of registrations.  Listing,
inspecting and deleting individual registrations is admin only.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from workshop_api.app.schemas.attendee import AttendeeCreate, AttendeeRead
from workshop_api.app.schemas.common import CountResponse, DataResponse, MessageResponse
from workshop_api.app.services.attendee_service import AttendeeService
from workshop_api.app.api.deps import get_attendee_service

router = APIRouter()
admin_router = APIRouter()


@router.get("/count", response_model=CountResponse)
async def attendee_count(service: AttendeeService = Depends(get_attendee_service)) -> CountResponse:
    """Return the total number of registered attendees."""
    return CountResponse(count=await service.count())


@router.post(
    "",
    response_model=DataResponse[AttendeeRead],
    status_code=status.HTTP_201_CREATED,
)
async def register_attendee(
    attendee: AttendeeCreate,
    service: AttendeeService = Depends(get_attendee_service),
) -> DataResponse[AttendeeRead]:
    """Register an attendee.

    The identifier and ``registeredAt`` timestamp are assigned by the
    server; values for them in the request body are ignored.
    """
    created = await service.register(attendee)
    return DataResponse[AttendeeRead](message="Registration successful", data=created)


@admin_router.get("", response_model=List[AttendeeRead])
async def list_attendees(service: AttendeeService = Depends(get_attendee_service)) -> List[AttendeeRead]:
    return await service.list()


@admin_router.get("/{attendee_id}", response_model=AttendeeRead)
async def get_attendee(
    attendee_id: str,
    service: AttendeeService = Depends(get_attendee_service),
) -> AttendeeRead:
    """Retrieve a single attendee.  Raises 404 if the key is unknown."""
    return await service.get(attendee_id)


@admin_router.delete("/{attendee_id}", response_model=MessageResponse)
async def delete_attendee(
    attendee_id: str,
    service: AttendeeService = Depends(get_attendee_service),
) -> MessageResponse:
    await service.delete(attendee_id)
    return MessageResponse(message="Attendee deleted successfully")
