"""Workshop API client.

A thin wrapper around the workshop REST API for scripts, bots and
tests.  It covers every public and admin route and uses the
``requests`` library for transport.

All methods return a tuple ``(data, error)``.  On success ``data`` holds
the decoded JSON body and ``error`` is ``None``.  On failure ``data`` is
``None`` (or an empty list for listing calls) and ``error`` is a
dictionary with keys ``status_code`` and ``message``; the message is
taken from the server's ``{"error": ...}`` body when there is one.

Admin operations need the admin password, which is sent in the
``X-Admin-Password`` header once set through the constructor or
:meth:`WorkshopAPI.set_admin_password`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

ADMIN_PASSWORD_HEADER = "X-Admin-Password"

Error = Dict[str, Any]


class WorkshopAPI:
    """Client for interacting with the workshop API."""

    def __init__(
        self,
        *,
        base_url: str,
        admin_password: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
                The ``/api`` prefix is added by the client.
            admin_password: Optional admin password for ``/api/admin`` routes.
            session: Optional requests session.  Any object with a
                compatible ``request`` method may be used.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.admin_password = admin_password
        self.session = session or requests.Session()
        self.timeout = timeout

    def set_admin_password(self, password: str) -> None:
        self.admin_password = password

    def clear_admin_password(self) -> None:
        self.admin_password = None

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None, admin: bool = False
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/speakers``).
            json_body: JSON body to send with the request.
            admin: Attach the admin password header.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if admin and self.admin_password:
            headers[ADMIN_PASSWORD_HEADER] = self.admin_password
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = ""
            try:
                body = response.json()
                if isinstance(body, dict):
                    message = body.get("error") or body.get("detail") or ""
            except ValueError:
                message = response.text
            if not message:
                message = f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if response.content:
            try:
                return response.json(), None
            except ValueError:
                return None, {"status_code": response.status_code, "message": "Response is not valid JSON"}
        return None, None

    def _list(self, path: str, *, admin: bool = False) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, admin=admin)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    @staticmethod
    def _unwrap(
        result: Tuple[Optional[Any], Optional[Error]]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return the ``data`` member of a ``{message, data}`` envelope."""
        data, error = result
        if error:
            return None, error
        if isinstance(data, dict) and "data" in data:
            return data["data"], None
        return data, None

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------
    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/health")

    def list_sessions(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all sessions, each with its ``speakers`` resolved."""
        return self._list("/api/sessions")

    def get_session(self, session_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/sessions/{session_id}")

    def list_speakers(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/speakers")

    def get_speaker(self, speaker_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/speakers/{speaker_id}")

    def attendee_count(self) -> Tuple[Optional[int], Optional[Error]]:
        data, error = self._request("GET", "/api/attendees/count")
        if error:
            return None, error
        return (data or {}).get("count"), None

    def register_attendee(
        self, name: str, email: str, designation: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register an attendee and return the created record."""
        payload = {"name": name, "email": email, "designation": designation}
        return self._unwrap(self._request("POST", "/api/attendees", json_body=payload))

    # ------------------------------------------------------------------
    # Admin operations
    # ------------------------------------------------------------------
    def list_attendees(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/admin/attendees", admin=True)

    def get_attendee(self, attendee_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/admin/attendees/{attendee_id}", admin=True)

    def delete_attendee(self, attendee_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/api/admin/attendees/{attendee_id}", admin=True)
        return error is None, error

    def create_speaker(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._unwrap(self._request("POST", "/api/admin/speakers", json_body=payload, admin=True))

    def update_speaker(
        self, speaker_id: str, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._unwrap(
            self._request("PUT", f"/api/admin/speakers/{speaker_id}", json_body=payload, admin=True)
        )

    def delete_speaker(self, speaker_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/api/admin/speakers/{speaker_id}", admin=True)
        return error is None, error

    def create_session(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._unwrap(self._request("POST", "/api/admin/sessions", json_body=payload, admin=True))

    def update_session(
        self, session_id: str, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._unwrap(
            self._request("PUT", f"/api/admin/sessions/{session_id}", json_body=payload, admin=True)
        )

    def delete_session(self, session_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/api/admin/sessions/{session_id}", admin=True)
        return error is None, error

    def designation_breakdown(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/admin/analytics/designation", admin=True)
