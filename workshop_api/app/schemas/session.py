"""
Pydantic models for workshop sessions.

``time`` is an opaque display string (e.g. ``"10:00 - 11:00"``) and is
not parsed.  ``speaker_ids`` must be present but may reference speakers
that do not exist; such references are dropped when sessions are joined
with their speakers in ``SessionWithSpeakers``.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .speaker import SpeakerRead


class SessionCreate(BaseModel):
    """Schema for creating or replacing a session (admin only)."""

    title: str = Field(..., min_length=1, examples=["Intro to FastAPI"])
    description: str = Field(..., min_length=1, examples=["Building APIs with type hints."])
    time: str = Field(..., min_length=1, examples=["10:00 - 11:00"])
    speaker_ids: List[str] = Field(..., alias="speakerIds", examples=[["speaker-1"]])
    capacity: Optional[int] = Field(None, examples=[40])

    model_config = {
        "populate_by_name": True,
    }


class SessionRead(BaseModel):
    """Schema for reading a session."""

    id: str
    title: str
    description: str
    time: str
    speaker_ids: List[str] = Field(default_factory=list, alias="speakerIds")
    capacity: Optional[int] = None

    model_config = {
        "populate_by_name": True,
    }


class SessionWithSpeakers(SessionRead):
    """A session together with the speaker records its keys resolve to."""

    speakers: List[SpeakerRead] = Field(default_factory=list)
