"""Pydantic models for admin analytics."""

from pydantic import BaseModel, Field


class DesignationBreakdown(BaseModel):
    """Number of attendees sharing one designation value."""

    designation: str = Field(..., examples=["Engineer"])
    count: int = Field(..., ge=1, examples=[12])
