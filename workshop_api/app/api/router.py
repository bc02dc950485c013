"""
Top‑level router for the workshop API.

Public routes live under ``/api``.  Admin routes live under
``/api/admin`` and share a router-level dependency that checks the
``X-Admin-Password`` header before any handler runs.  When adding a
resource, include its ``router`` and/or ``admin_router`` here.
"""

from fastapi import APIRouter, Depends

from workshop_api.app.core.security import require_admin
from workshop_api.app.api.endpoints import analytics, attendees, health, sessions, speakers

# Public API
api_router = APIRouter()
api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(speakers.router, prefix="/speakers", tags=["speakers"])
api_router.include_router(attendees.router, prefix="/attendees", tags=["attendees"])

# Admin API (password protected)
admin_router = APIRouter(dependencies=[Depends(require_admin)])
admin_router.include_router(attendees.admin_router, prefix="/attendees", tags=["admin"])
admin_router.include_router(speakers.admin_router, prefix="/speakers", tags=["admin"])
admin_router.include_router(sessions.admin_router, prefix="/sessions", tags=["admin"])
admin_router.include_router(analytics.admin_router, prefix="/analytics", tags=["admin"])

api_router.include_router(admin_router, prefix="/admin")

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(api_router, prefix="/api")
