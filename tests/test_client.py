"""API client driven through FastAPI's TestClient as its HTTP session."""

import pytest
import requests

from workshop_api.client import WorkshopAPI

from .conftest import ADMIN_PASSWORD


@pytest.fixture
def api(client):
    return WorkshopAPI(base_url="http://testserver", admin_password=ADMIN_PASSWORD, session=client)


@pytest.fixture
def anonymous_api(client):
    return WorkshopAPI(base_url="http://testserver/", session=client)


def test_health(api):
    assert api.health() == ({"status": "ok"}, None)


def test_registration_flow(api):
    attendee, error = api.register_attendee("Ada", "ada@example.com", "Engineer")

    assert error is None
    assert attendee["name"] == "Ada"
    assert api.attendee_count() == (1, None)

    fetched, error = api.get_attendee(attendee["id"])
    assert error is None and fetched == attendee

    listed, _ = api.list_attendees()
    assert listed == [attendee]

    assert api.delete_attendee(attendee["id"]) == (True, None)
    assert api.attendee_count() == (0, None)


def test_invalid_registration_reports_server_message(api):
    attendee, error = api.register_attendee("Ada", "not-an-email", "Engineer")

    assert attendee is None
    assert error["status_code"] == 400
    assert error["message"].startswith("email:")


def test_speaker_and_session_management(api):
    speaker, error = api.create_speaker({"name": "Grace", "bio": "Compilers"})
    assert error is None

    session, error = api.create_session(
        {"title": "T", "description": "D", "time": "10:00", "speakerIds": [speaker["id"], "gone"]}
    )
    assert error is None

    sessions, _ = api.list_sessions()
    assert [s["name"] for s in sessions[0]["speakers"]] == ["Grace"]
    assert api.get_session(session["id"]) == (session, None)

    updated, _ = api.update_speaker(speaker["id"], {"name": "Grace H.", "bio": "Navy"})
    assert updated["id"] == speaker["id"]
    assert api.get_speaker(speaker["id"])[0]["name"] == "Grace H."
    assert api.list_speakers()[0] == [updated]

    updated_session, _ = api.update_session(
        session["id"], {"title": "T2", "description": "D", "time": "11:00", "speakerIds": []}
    )
    assert updated_session["title"] == "T2"

    assert api.delete_session(session["id"]) == (True, None)
    assert api.delete_speaker(speaker["id"]) == (True, None)
    assert api.list_sessions() == ([], None)


def test_designation_breakdown(api):
    api.register_attendee("A", "a@example.com", "Eng")
    api.register_attendee("B", "b@example.com", "Eng")

    rows, error = api.designation_breakdown()

    assert error is None
    assert rows == [{"designation": "Eng", "count": 2}]


def test_admin_call_without_password_is_unauthorized(anonymous_api):
    rows, error = anonymous_api.list_attendees()

    assert rows == []
    assert error == {"status_code": 401, "message": "Invalid admin password"}


def test_password_can_be_set_and_cleared(anonymous_api):
    anonymous_api.set_admin_password(ADMIN_PASSWORD)
    assert anonymous_api.list_attendees() == ([], None)

    anonymous_api.clear_admin_password()
    assert anonymous_api.list_attendees()[1]["status_code"] == 401


def test_not_found_is_reported(api):
    speaker, error = api.get_speaker("missing")

    assert speaker is None
    assert error == {"status_code": 404, "message": "Speaker not found"}


class _FailingSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


def test_transport_failure_is_reported():
    api = WorkshopAPI(base_url="http://unreachable", session=_FailingSession())

    sessions, error = api.list_sessions()

    assert sessions == []
    assert error == {"status_code": None, "message": "connection refused"}
