"""
Admin authentication gate.

Admin routes are protected by a single shared password configured at
startup (``Settings.admin_password``) and sent by clients in the
``X-Admin-Password`` header.  Every request is checked on its own; there
are no sessions, tokens or expiry.

Outcomes, in order:

* no password configured -> ``ServerMisconfiguredError`` (a deployment
  problem, not the caller's fault);
* header missing or different from the configured password ->
  ``UnauthorizedError``;
* otherwise the request proceeds to its handler.

The comparison uses ``hmac.compare_digest`` so the time taken does not
depend on how much of the password matched.
"""

import hmac
import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from .config import Settings
from .errors import ServerMisconfiguredError, UnauthorizedError

logger = logging.getLogger(__name__)

ADMIN_PASSWORD_HEADER = "X-Admin-Password"
ADMIN_PATH_PREFIX = "/api/admin"

admin_password_header = APIKeyHeader(name=ADMIN_PASSWORD_HEADER, auto_error=False)


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the app was created with."""
    return request.app.state.settings


def check_admin_password(configured: Optional[str], supplied: Optional[str]) -> None:
    """Validate ``supplied`` against the configured admin password.

    Raises
    ------
    ServerMisconfiguredError
        If no admin password is configured.
    UnauthorizedError
        If ``supplied`` is missing or does not match.
    """
    if not configured:
        raise ServerMisconfiguredError("Admin password not configured")
    if supplied is None or not hmac.compare_digest(
        supplied.encode("utf-8"), configured.encode("utf-8")
    ):
        raise UnauthorizedError("Invalid admin password")


def is_admin_path(path: str) -> bool:
    return path == ADMIN_PATH_PREFIX or path.startswith(ADMIN_PATH_PREFIX + "/")


def authorize_admin_request(request: Request, password: Optional[str]) -> None:
    """Run the admin check for ``request``, logging rejections."""
    try:
        check_admin_password(get_settings(request).admin_password, password)
    except ServerMisconfiguredError:
        logger.error("Admin request to %s rejected: admin password not configured", request.url.path)
        raise
    except UnauthorizedError:
        logger.warning("Admin request to %s rejected: invalid password", request.url.path)
        raise


def require_admin(
    request: Request,
    password: Optional[str] = Depends(admin_password_header),
) -> None:
    """Router-level dependency guarding every ``/api/admin`` route.

    FastAPI decodes the JSON body before dependencies run, so a
    malformed body on an admin route never reaches this function; the
    request validation handler applies the same check first for those.
    """
    authorize_admin_request(request, password)
