"""
Response envelopes shared by all endpoints.

Write endpoints answer ``{"message": ..., "data": ...}``.  Instead of an
untyped ``data`` field, ``DataResponse`` is generic over the entity it
carries, so ``DataResponse[AttendeeRead]`` and ``DataResponse[SessionRead]``
are distinct response models with fully described OpenAPI schemas while
still serialising to the same JSON shape.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class MessageResponse(BaseModel):
    """Body of a successful write that returns no entity (deletes)."""

    message: str = Field(..., examples=["Speaker deleted successfully"])


class DataResponse(BaseModel, Generic[T]):
    """Body of a successful write that returns the written entity."""

    message: str = Field(..., examples=["Registration successful"])
    data: T


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., examples=["Speaker not found"])


class CountResponse(BaseModel):
    count: int = Field(..., ge=0, examples=[42])


class HealthResponse(BaseModel):
    status: str = Field("ok", examples=["ok"])
