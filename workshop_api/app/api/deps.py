"""
FastAPI dependencies providing services to endpoint handlers.

The document store is created once by ``create_app`` and kept on
``app.state``; these functions wrap it in the service a handler needs.
"""

from fastapi import Depends, Request

from workshop_api.app.core.db import DocumentStore
from workshop_api.app.services.analytics_service import AnalyticsService
from workshop_api.app.services.attendee_service import AttendeeService
from workshop_api.app.services.session_service import SessionService
from workshop_api.app.services.speaker_service import SpeakerService


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_attendee_service(store: DocumentStore = Depends(get_store)) -> AttendeeService:
    return AttendeeService(store)


def get_speaker_service(store: DocumentStore = Depends(get_store)) -> SpeakerService:
    return SpeakerService(store)


def get_session_service(store: DocumentStore = Depends(get_store)) -> SessionService:
    return SessionService(store)


def get_analytics_service(store: DocumentStore = Depends(get_store)) -> AnalyticsService:
    return AnalyticsService(store)
