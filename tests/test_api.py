"""HTTP surface, end to end against a temporary SQLite store."""

import pytest

from workshop_api.app.api.error_handlers import format_validation_errors


@pytest.fixture
def speaker(client, admin_headers):
    response = client.post(
        "/api/admin/speakers",
        json={"name": "Grace Hopper", "bio": "Compilers", "photoUrl": "https://example.com/grace.jpg"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()["data"]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_register_attendee(client):
    response = client.post(
        "/api/attendees",
        json={"name": "Ada", "email": "ada@example.com", "designation": "Engineer", "id": "mine"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Registration successful"
    assert body["data"]["id"] and body["data"]["id"] != "mine"
    assert body["data"]["name"] == "Ada"
    assert body["data"]["registeredAt"]
    assert client.get("/api/attendees/count").json() == {"count": 1}


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Ada", "email": "", "designation": "Engineer"},
        {"name": "Ada", "email": "ada-at-example", "designation": "Engineer"},
        {"name": "Ada", "email": "ada@example.com"},
        {"name": "", "email": "ada@example.com", "designation": "Engineer"},
    ],
)
def test_invalid_registration_is_rejected_without_write(client, payload):
    response = client.post("/api/attendees", json=payload)

    assert response.status_code == 400
    assert set(response.json()) == {"error"}
    assert client.get("/api/attendees/count").json() == {"count": 0}


def test_validation_error_names_the_field(client):
    response = client.post("/api/attendees", json={"name": "Ada", "email": "nope", "designation": "Eng"})

    assert response.json()["error"].startswith("email:")


def test_malformed_json_is_a_bad_request(client):
    response = client.post(
        "/api/attendees", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "JSON decode error"}


def test_speaker_crud(client, admin_headers, speaker):
    assert speaker["photoUrl"] == "https://example.com/grace.jpg"
    assert "sessions" not in speaker

    fetched = client.get(f"/api/speakers/{speaker['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == speaker

    updated = client.put(
        f"/api/admin/speakers/{speaker['id']}",
        json={"id": "ignored", "name": "Grace", "bio": "Navy", "sessions": ["s1"]},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["message"] == "Speaker updated successfully"
    assert updated.json()["data"] == {"id": speaker["id"], "name": "Grace", "bio": "Navy", "sessions": ["s1"]}

    deleted = client.delete(f"/api/admin/speakers/{speaker['id']}", headers=admin_headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Speaker deleted successfully"}

    missing = client.get(f"/api/speakers/{speaker['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Speaker not found"}


def test_admin_can_read_speakers(client, admin_headers, speaker):
    assert client.get("/api/admin/speakers", headers=admin_headers).json() == [speaker]
    assert client.get(f"/api/admin/speakers/{speaker['id']}", headers=admin_headers).json() == speaker


def test_speaker_requires_name_and_bio(client, admin_headers):
    response = client.post("/api/admin/speakers", json={"name": "Grace"}, headers=admin_headers)

    assert response.status_code == 400


def test_session_crud_and_joined_listing(client, admin_headers, speaker):
    created = client.post(
        "/api/admin/sessions",
        json={
            "title": "Compilers 101",
            "description": "From COBOL to today",
            "time": "Day 1, 10:00",
            "speakerIds": [speaker["id"], "missing"],
            "capacity": 40,
        },
        headers=admin_headers,
    )
    assert created.status_code == 201
    assert created.json()["message"] == "Session created successfully"
    session = created.json()["data"]
    assert session["speakerIds"] == [speaker["id"], "missing"]

    listing = client.get("/api/sessions").json()
    assert len(listing) == 1
    assert listing[0]["id"] == session["id"]
    assert listing[0]["capacity"] == 40
    assert listing[0]["speakers"] == [speaker]

    assert client.get(f"/api/sessions/{session['id']}").json() == session
    assert client.get("/api/admin/sessions", headers=admin_headers).json() == listing

    updated = client.put(
        f"/api/admin/sessions/{session['id']}",
        json={"title": "Compilers 102", "description": "d", "time": "t", "speakerIds": []},
        headers=admin_headers,
    )
    assert updated.json()["data"] == {
        "id": session["id"],
        "title": "Compilers 102",
        "description": "d",
        "time": "t",
        "speakerIds": [],
    }
    assert client.get("/api/sessions").json()[0]["speakers"] == []

    deleted = client.delete(f"/api/admin/sessions/{session['id']}", headers=admin_headers)
    assert deleted.json() == {"message": "Session deleted successfully"}
    assert client.get(f"/api/sessions/{session['id']}").status_code == 404


def test_session_requires_speaker_ids(client, admin_headers):
    response = client.post(
        "/api/admin/sessions",
        json={"title": "T", "description": "D", "time": "10:00"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert "speakerIds" in response.json()["error"]


def test_put_on_unknown_session_creates_it(client, admin_headers):
    response = client.put(
        "/api/admin/sessions/fresh",
        json={"title": "T", "description": "D", "time": "10:00", "speakerIds": []},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert client.get("/api/sessions/fresh").status_code == 200


def test_deleting_unknown_ids_succeeds(client, admin_headers):
    for path in ["attendees", "speakers", "sessions"]:
        response = client.delete(f"/api/admin/{path}/does-not-exist", headers=admin_headers)
        assert response.status_code == 200


def test_admin_attendee_management(client, admin_headers):
    created = client.post(
        "/api/attendees", json={"name": "Ada", "email": "ada@example.com", "designation": "Eng"}
    ).json()["data"]

    assert client.get("/api/admin/attendees", headers=admin_headers).json() == [created]
    assert client.get(f"/api/admin/attendees/{created['id']}", headers=admin_headers).json() == created

    deleted = client.delete(f"/api/admin/attendees/{created['id']}", headers=admin_headers)
    assert deleted.json() == {"message": "Attendee deleted successfully"}

    missing = client.get(f"/api/admin/attendees/{created['id']}", headers=admin_headers)
    assert missing.status_code == 404
    assert missing.json() == {"error": "Attendee not found"}


def test_designation_analytics(client, admin_headers):
    for i, designation in enumerate(["Eng", "Eng", "PM"]):
        client.post(
            "/api/attendees",
            json={"name": f"A{i}", "email": f"a{i}@example.com", "designation": designation},
        )

    response = client.get("/api/admin/analytics/designation", headers=admin_headers)

    assert response.status_code == 200
    rows = response.json()
    assert sorted(rows, key=lambda r: r["designation"]) == [
        {"designation": "Eng", "count": 2},
        {"designation": "PM", "count": 1},
    ]


def test_unknown_route_uses_error_shape(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert "error" in response.json()


def test_store_failure_is_reported_as_server_error(client, app, tmp_path):
    app.state.store.database_path = str(tmp_path)

    response = client.get("/api/speakers")

    assert response.status_code == 500
    assert set(response.json()) == {"error"}


def test_cors_allows_configured_origin(client, settings):
    response = client.options(
        "/api/admin/speakers",
        headers={
            "Origin": settings.cors_origin,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "X-Admin-Password",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == settings.cors_origin


def test_format_validation_errors_drops_json_offsets():
    message = format_validation_errors(
        [
            {"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"},
            {"type": "missing", "loc": ("body", "speakerIds", 0), "msg": "Field required"},
        ]
    )

    assert message == "JSON decode error; speakerIds.0: Field required"
