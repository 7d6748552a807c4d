def _payload(**fields):
    payload = {
        "name": "Book Club",
        "description": "Monthly reading circle",
        "emoji": "📚",
        "isPeriodic": False,
        "startDate": "2025-11-24",
        "endDate": "2025-11-26",
        "startTime": "10:00:00",
        "endTime": "12:00:00",
    }
    payload.update(fields)
    return payload


def test_create_activity_sets_creator(client, auth_headers, bootstrap_user):
    resp = client.post("/api/activities", json=_payload(), headers=auth_headers)
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["createdBy"] == bootstrap_user.id
    assert data["isActive"] is True
    assert data["isPeriodic"] is False
    assert data["startDate"] == "2025-11-24"


def test_create_ignores_created_by_in_body(client, auth_headers, bootstrap_user):
    resp = client.post("/api/activities", json=_payload(createdBy=999), headers=auth_headers)
    assert resp.status_code == 201
    assert resp.json()["data"]["createdBy"] == bootstrap_user.id


def test_create_requires_token(client):
    resp = client.post("/api/activities", json=_payload())
    assert resp.status_code == 401


def test_create_rejects_unknown_day(client, auth_headers):
    resp = client.post(
        "/api/activities",
        json=_payload(isPeriodic=True, dayOfWeek="monday"),
        headers=auth_headers,
    )
    assert resp.status_code == 422
    assert resp.json()["data"]["errors"][0]["field"] == "dayOfWeek"


def test_get_activity_is_open(client, activity):
    resp = client.get(f"/api/activities/{activity['id']}")
    assert resp.status_code == 200
    assert resp.json()["data"]["name"] == "Chess Club"
    assert resp.json()["data"]["dayOfWeek"] == "thursday"


def test_get_unknown_activity(client):
    resp = client.get("/api/activities/9999")
    assert resp.status_code == 404
    assert resp.json()["message"] == "Activity not found"


def test_list_activities_filter_by_active(client, auth_headers):
    client.post("/api/activities", json=_payload(name="Running"), headers=auth_headers)
    client.post("/api/activities", json=_payload(name="Old Event", isActive=False), headers=auth_headers)

    resp = client.get("/api/activities", params={"isActive": "false"})
    body = resp.json()
    assert [a["name"] for a in body["data"]] == ["Old Event"]
    assert body["pagination"]["total"] == 1

    resp = client.get("/api/activities")
    assert resp.json()["pagination"]["total"] == 2


def test_list_activities_sort_by_name(client, auth_headers):
    for name in ("Yoga", "Art", "Music"):
        client.post("/api/activities", json=_payload(name=name), headers=auth_headers)

    resp = client.get("/api/activities", params={"sortBy": "name"})
    assert [a["name"] for a in resp.json()["data"]] == ["Art", "Music", "Yoga"]


def test_list_activities_unknown_sort_field(client):
    resp = client.get("/api/activities", params={"sortBy": "createdBy"})
    assert resp.status_code == 422


def test_update_activity(client, auth_headers, activity):
    resp = client.put(
        f"/api/activities/{activity['id']}",
        json={"isActive": False, "emoji": "♟"},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["isActive"] is False
    assert data["emoji"] == "♟"
    assert data["name"] == "Chess Club"


def test_update_requires_token(client, activity):
    resp = client.put(f"/api/activities/{activity['id']}", json={"name": "X"})
    assert resp.status_code == 401


def test_delete_activity(client, auth_headers, activity):
    resp = client.delete(f"/api/activities/{activity['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert client.get(f"/api/activities/{activity['id']}").status_code == 404


def test_delete_activity_with_checkins_is_refused(client, auth_headers, member, activity):
    client.post(
        "/api/checkins",
        json={"registrationNumber": member["registrationNumber"], "activityId": activity["id"]},
    )

    resp = client.delete(f"/api/activities/{activity['id']}", headers=auth_headers)
    assert resp.status_code == 409
    assert resp.json()["message"] == "Cannot delete activity with associated check-ins"
    assert resp.json()["data"] == {"reason": "dependent_records"}
