"""
Error hierarchy for the workshop API.

Every failure a request can end in is one of the ``WorkshopError``
subclasses below.  Each carries the HTTP status it maps to, and
``to_response`` renders the uniform ``{"error": <message>}`` body.  The
global handlers in ``api.error_handlers`` turn these into responses, so
services and dependencies simply raise.
"""

from fastapi import status


class WorkshopError(Exception):
    """Base exception for all workshop API errors."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(WorkshopError):
    """Request payload is missing a required field or is malformed."""

    http_status = status.HTTP_400_BAD_REQUEST


class NotFoundError(WorkshopError):
    """No document exists under the requested key."""

    http_status = status.HTTP_404_NOT_FOUND


class UnauthorizedError(WorkshopError):
    """Admin password missing or wrong."""

    http_status = status.HTTP_401_UNAUTHORIZED


class ServerMisconfiguredError(WorkshopError):
    """The deployment lacks configuration an endpoint depends on."""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR


class StoreError(WorkshopError):
    """The document store failed or did not answer in time."""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
