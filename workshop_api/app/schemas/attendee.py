"""
Pydantic models for attendee registrations.

An attendee is created once through public registration and is never
modified afterwards; administrators can only list, inspect and delete
registrations.  The identifier and the registration timestamp are
assigned by the server, so ``AttendeeCreate`` does not accept them.
"""

import re
from datetime import datetime

from pydantic import BaseModel, Field, validator

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class AttendeeCreate(BaseModel):
    """Schema for registering an attendee."""

    name: str = Field(..., min_length=1, examples=["Ada Lovelace"])
    email: str = Field(..., min_length=1, examples=["ada@example.com"])
    designation: str = Field(..., min_length=1, examples=["Engineer"])

    @validator("email")
    def validate_email(cls, v):
        if not EMAIL_PATTERN.match(v):
            raise ValueError("must be a valid email address")
        return v


class AttendeeRead(BaseModel):
    """Schema for reading an attendee."""

    id: str
    name: str
    email: str
    designation: str
    registered_at: datetime = Field(..., alias="registeredAt")

    model_config = {
        "populate_by_name": True,
    }
