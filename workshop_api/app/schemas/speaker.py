"""
Pydantic models for speakers.

``sessions`` is a denormalised list of session keys kept for display
purposes only; it is not checked against the sessions collection.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class SpeakerCreate(BaseModel):
    """Schema for creating or replacing a speaker (admin only)."""

    name: str = Field(..., min_length=1, examples=["Grace Hopper"])
    bio: str = Field(..., min_length=1, examples=["Rear admiral and compiler pioneer."])
    photo_url: Optional[str] = Field(None, alias="photoUrl", examples=["https://example.com/grace.jpg"])
    sessions: Optional[List[str]] = Field(None, description="Keys of the sessions this speaker presents")

    model_config = {
        "populate_by_name": True,
    }


class SpeakerRead(BaseModel):
    """Schema for reading a speaker."""

    id: str
    name: str
    bio: str
    photo_url: Optional[str] = Field(None, alias="photoUrl")
    sessions: Optional[List[str]] = None

    model_config = {
        "populate_by_name": True,
    }
