from datetime import date, timedelta

from app.controllers.member import create_member, format_registration_number
from app.schemas.member import MemberCreate


def _create(client, headers, **fields):
    payload = {"firstName": "John", "lastName": "Doe"}
    payload.update(fields)
    resp = client.post("/api/members", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def test_format_registration_number():
    assert format_registration_number(7) == "ACMJN-000007"
    assert format_registration_number(123456) == "ACMJN-123456"
    assert format_registration_number(1234567) == "ACMJN-1234567"


def test_create_member_assigns_registration_number(client, auth_headers):
    resp = client.post(
        "/api/members",
        json={"firstName": "Jane", "lastName": "Smith", "birthDate": "1995-05-20", "occupation": "student"},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Member created successfully"
    data = body["data"]
    assert data["registrationNumber"] == format_registration_number(data["id"])
    assert data["occupation"] == "student"
    assert data["birthDate"] == "1995-05-20"


def test_registration_numbers_are_distinct(client, auth_headers):
    first = _create(client, auth_headers)
    second = _create(client, auth_headers)
    assert first["registrationNumber"] != second["registrationNumber"]


def test_get_by_registration_number_round_trip(client, auth_headers):
    created = _create(client, auth_headers)

    resp = client.get(f"/api/members/registration/{created['registrationNumber']}")
    assert resp.status_code == 200
    assert resp.json()["data"]["id"] == created["id"]


def test_get_by_unknown_registration_number(client):
    resp = client.get("/api/members/registration/ACMJN-999999")
    assert resp.status_code == 404
    assert resp.json()["message"] == "Member not found"


def test_create_requires_token(client):
    resp = client.post("/api/members", json={"firstName": "John", "lastName": "Doe"})
    assert resp.status_code == 401


def test_create_rejects_missing_name(client, auth_headers):
    resp = client.post("/api/members", json={"firstName": "John"}, headers=auth_headers)
    assert resp.status_code == 422
    fields = [e["field"] for e in resp.json()["data"]["errors"]]
    assert "lastName" in fields


def test_create_rejects_future_birth_date(client, auth_headers):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    resp = client.post(
        "/api/members",
        json={"firstName": "John", "lastName": "Doe", "birthDate": tomorrow},
        headers=auth_headers,
    )
    assert resp.status_code == 422
    assert resp.json()["data"]["errors"][0] == {"field": "birthDate", "message": "Date must be in the past"}


def test_create_rejects_unknown_occupation(client, auth_headers):
    resp = client.post(
        "/api/members",
        json={"firstName": "John", "lastName": "Doe", "occupation": "astronaut"},
        headers=auth_headers,
    )
    assert resp.status_code == 422


def test_snake_case_input_accepted(client, auth_headers):
    resp = client.post(
        "/api/members",
        json={"first_name": "John", "last_name": "Doe", "phone_number": "+1234567890"},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    assert resp.json()["data"]["phoneNumber"] == "+1234567890"


def test_get_by_id_requires_token(client, member):
    resp = client.get(f"/api/members/{member['id']}")
    assert resp.status_code == 401


def test_get_by_id(client, auth_headers, member):
    resp = client.get(f"/api/members/{member['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["firstName"] == "Ada"


def test_get_unknown_id(client, auth_headers):
    resp = client.get("/api/members/9999", headers=auth_headers)
    assert resp.status_code == 404


def test_get_id_beyond_integer_range(client, auth_headers):
    resp = client.get("/api/members/99999999999999999999", headers=auth_headers)
    assert resp.status_code == 422
    assert resp.json()["data"]["errors"][0]["field"] == "member_id"

    assert client.get("/api/members/0", headers=auth_headers).status_code == 422


def test_partial_update_leaves_other_fields(client, auth_headers):
    created = _create(client, auth_headers, address="1 Main St", occupation="student")

    resp = client.put(
        f"/api/members/{created['id']}",
        json={"occupation": "employee"},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["occupation"] == "employee"
    assert data["address"] == "1 Main St"
    assert data["firstName"] == "John"
    assert data["registrationNumber"] == created["registrationNumber"]


def test_update_can_clear_optional_field(client, auth_headers):
    created = _create(client, auth_headers, address="1 Main St")

    resp = client.put(f"/api/members/{created['id']}", json={"address": None}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["address"] is None


def test_update_ignores_null_required_field(client, auth_headers):
    created = _create(client, auth_headers)

    resp = client.put(f"/api/members/{created['id']}", json={"firstName": None}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["firstName"] == "John"


def test_update_unknown_member(client, auth_headers):
    resp = client.put("/api/members/9999", json={"firstName": "X"}, headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["message"] == "Member not found"


def test_delete_member(client, auth_headers, member):
    resp = client.delete(f"/api/members/{member['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Member deleted successfully"

    resp = client.get(f"/api/members/{member['id']}", headers=auth_headers)
    assert resp.status_code == 404


def test_delete_unknown_member(client, auth_headers):
    resp = client.delete("/api/members/9999", headers=auth_headers)
    assert resp.status_code == 404


def test_delete_member_with_checkins_is_refused(client, auth_headers, member, activity):
    resp = client.post(
        "/api/checkins",
        json={"registrationNumber": member["registrationNumber"], "activityId": activity["id"]},
    )
    assert resp.status_code == 201

    resp = client.delete(f"/api/members/{member['id']}", headers=auth_headers)
    assert resp.status_code == 409
    body = resp.json()
    assert body["message"] == "Cannot delete member with associated check-ins"
    assert body["data"] == {"reason": "dependent_records"}

    resp = client.get(f"/api/members/{member['id']}", headers=auth_headers)
    assert resp.status_code == 200


def test_delete_member_with_volunteer_record_is_refused(client, auth_headers, member):
    resp = client.post("/api/volunteers", json={"memberId": member["id"]}, headers=auth_headers)
    assert resp.status_code == 201

    resp = client.delete(f"/api/members/{member['id']}", headers=auth_headers)
    assert resp.status_code == 409
    assert resp.json()["data"]["reason"] == "dependent_records"


def test_list_members_pagination(client, auth_headers):
    for i in range(5):
        _create(client, auth_headers, firstName=f"Member{i}")

    resp = client.get("/api/members", params={"offset": 2, "limit": 2})
    assert resp.status_code == 200
    body = resp.json()
    assert [m["firstName"] for m in body["data"]] == ["Member2", "Member3"]
    assert body["pagination"] == {"offset": 2, "limit": 2, "total": 5, "hasMore": True}

    resp = client.get("/api/members", params={"offset": 4, "limit": 2})
    assert resp.json()["pagination"]["hasMore"] is False


def test_list_members_limit_is_capped(client):
    resp = client.get("/api/members", params={"limit": 500})
    assert resp.status_code == 200
    assert resp.json()["pagination"]["limit"] == 100


def test_capped_limit_still_reports_full_total(client, db):
    for i in range(150):
        create_member(db, MemberCreate(first_name=f"Member{i}", last_name="Bulk"))

    resp = client.get("/api/members", params={"limit": 500})
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["data"]) == 100
    assert body["pagination"] == {"offset": 0, "limit": 100, "total": 150, "hasMore": True}


def test_list_members_rejects_bad_window(client):
    assert client.get("/api/members", params={"limit": 0}).status_code == 422
    assert client.get("/api/members", params={"offset": -1}).status_code == 422


def test_list_members_search(client, auth_headers):
    _create(client, auth_headers, firstName="Alice", lastName="Martin")
    _create(client, auth_headers, firstName="Bob", lastName="Stone")
    _create(client, auth_headers, firstName="Carol", lastName="Alison")

    resp = client.get("/api/members", params={"search": "ali"})
    body = resp.json()
    assert sorted(m["firstName"] for m in body["data"]) == ["Alice", "Carol"]
    assert body["pagination"]["total"] == 2


def test_list_members_sorting(client, auth_headers):
    _create(client, auth_headers, lastName="Charlie")
    _create(client, auth_headers, lastName="Alpha")
    _create(client, auth_headers, lastName="Bravo")

    resp = client.get("/api/members", params={"sortBy": "lastName", "order": "desc"})
    assert [m["lastName"] for m in resp.json()["data"]] == ["Charlie", "Bravo", "Alpha"]


def test_list_members_sort_ties_break_on_id(client, auth_headers):
    ids = [_create(client, auth_headers, lastName="Same")["id"] for _ in range(3)]

    resp = client.get("/api/members", params={"sortBy": "lastName", "order": "desc"})
    assert [m["id"] for m in resp.json()["data"]] == ids


def test_list_members_unknown_sort_field(client):
    resp = client.get("/api/members", params={"sortBy": "password"})
    assert resp.status_code == 422
    assert resp.json()["data"]["errors"][0]["field"] == "sortBy"
