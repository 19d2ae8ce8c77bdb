from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from money_reminders.db.session import get_db
from money_reminders.main import app
from money_reminders.schemas.reminder import ReminderRead


def _parse(body) -> ReminderRead:
    return ReminderRead.model_validate(body)


def test_list_starts_empty(client):
    response = client.get("/api/reminders")
    assert response.status_code == 200
    assert response.json() == []


def test_example_scenario(client, rahul_payload):
    created = client.post("/api/reminders", json=rahul_payload)
    assert created.status_code == 201
    body = created.json()
    assert set(body) == {"id", "personName", "phoneNumber", "amount", "dueDate", "isPaid"}
    assert body["isPaid"] is False
    assert isinstance(body["id"], int)

    patched = client.patch(f"/api/reminders/{body['id']}", json={"isPaid": True})
    assert patched.status_code == 200
    after = patched.json()
    assert after["isPaid"] is True
    for key in ("id", "personName", "phoneNumber", "amount"):
        assert after[key] == body[key]
    assert _parse(after).due_date == _parse(body).due_date

    deleted = client.delete(f"/api/reminders/{body['id']}")
    assert deleted.status_code == 204
    assert deleted.content == b""
    assert all(r["id"] != body["id"] for r in client.get("/api/reminders").json())


def test_created_fields_round_trip(client, rahul_payload):
    created = client.post("/api/reminders", json=rahul_payload).json()
    fetched = client.get(f"/api/reminders/{created['id']}")
    assert fetched.status_code == 200
    reminder = _parse(fetched.json())
    assert reminder.person_name == rahul_payload["personName"]
    assert reminder.phone_number == rahul_payload["phoneNumber"]
    assert reminder.amount == rahul_payload["amount"]
    assert reminder.due_date == datetime.fromisoformat(rahul_payload["dueDate"])
    assert reminder.is_paid is False


def test_amount_zero_rejected_one_accepted(client, rahul_payload):
    response = client.post("/api/reminders", json={**rahul_payload, "amount": 0})
    assert response.status_code == 400
    assert response.json()["field"] == "amount"
    assert response.json()["message"]

    assert client.post("/api/reminders", json={**rahul_payload, "amount": 1}).status_code == 201


def test_empty_person_name_rejected(client, rahul_payload):
    response = client.post("/api/reminders", json={**rahul_payload, "personName": ""})
    assert response.status_code == 400
    assert response.json()["field"] == "personName"
    assert client.get("/api/reminders").json() == []


def test_missing_due_date_rejected(client, rahul_payload):
    payload = dict(rahul_payload)
    del payload["dueDate"]
    response = client.post("/api/reminders", json=payload)
    assert response.status_code == 400
    assert response.json()["field"] == "dueDate"


def test_only_first_error_reported(client):
    response = client.post("/api/reminders", json={"personName": "", "amount": 0})
    assert response.status_code == 400
    assert set(response.json()) == {"message", "field"}


def test_unknown_fields_rejected(client, rahul_payload):
    response = client.post("/api/reminders", json={**rahul_payload, "nickname": "Rahul"})
    assert response.status_code == 400
    assert response.json()["field"] == "nickname"


def test_create_with_is_paid(client, rahul_payload):
    response = client.post("/api/reminders", json={**rahul_payload, "isPaid": True})
    assert response.status_code == 201
    assert response.json()["isPaid"] is True


def test_list_is_due_date_descending(client, rahul_payload):
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)
    for days, name in ((0, "first"), (9, "last"), (3, "middle")):
        client.post("/api/reminders", json={**rahul_payload, "personName": name,
                                            "dueDate": (base + timedelta(days=days)).isoformat()})
    names = [r["personName"] for r in client.get("/api/reminders").json()]
    assert names == ["last", "middle", "first"]


def test_patch_partial_fields(client, rahul_payload):
    created = client.post("/api/reminders", json=rahul_payload).json()
    response = client.patch(f"/api/reminders/{created['id']}", json={"amount": 750, "personName": "Rahul S."})
    assert response.status_code == 200
    body = response.json()
    assert body["amount"] == 750
    assert body["personName"] == "Rahul S."
    assert body["phoneNumber"] == created["phoneNumber"]
    assert body["isPaid"] is False


def test_patch_validation(client, rahul_payload):
    created = client.post("/api/reminders", json=rahul_payload).json()
    url = f"/api/reminders/{created['id']}"

    response = client.patch(url, json={"amount": 0})
    assert response.status_code == 400
    assert response.json()["field"] == "amount"

    response = client.patch(url, json={"isPaid": None})
    assert response.status_code == 400
    assert response.json()["field"] == "isPaid"

    assert client.get(url).json()["amount"] == 500


def test_patch_unknown_id_is_404(client):
    response = client.patch("/api/reminders/9999", json={"isPaid": True})
    assert response.status_code == 404
    assert response.json() == {"message": "Reminder not found"}
    assert client.get("/api/reminders").json() == []


def test_get_unknown_id_is_404(client):
    response = client.get("/api/reminders/9999")
    assert response.status_code == 404
    assert response.json() == {"message": "Reminder not found"}


def test_delete_unknown_id_is_204(client):
    assert client.delete("/api/reminders/9999").status_code == 204


def test_non_numeric_id_rejected(client):
    response = client.patch("/api/reminders/abc", json={"isPaid": True})
    assert response.status_code == 400
    assert response.json()["field"] == "reminder_id"


def test_unexpected_error_is_generic_500():
    def broken_db():
        raise RuntimeError("database unavailable")
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = broken_db
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/api/reminders")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["database"] == "healthy"


def test_amount_beyond_integer_column_rejected(client, rahul_payload):
    response = client.post("/api/reminders", json={**rahul_payload, "amount": 3_000_000_000})
    assert response.status_code == 400
    assert response.json()["field"] == "amount"
    assert client.get("/api/reminders").json() == []


@pytest.mark.parametrize("field, value", [
    ("amount", "500"),
    ("amount", True),
    ("amount", 2.0),
    ("isPaid", "yes"),
    ("isPaid", 1),
    ("personName", 42),
    ("phoneNumber", 9876543210),
])
def test_wrongly_typed_values_rejected(client, rahul_payload, field, value):
    response = client.post("/api/reminders", json={**rahul_payload, field: value})
    assert response.status_code == 400
    assert response.json()["field"] == field
    assert client.get("/api/reminders").json() == []


@pytest.mark.parametrize("field, value", [("amount", "750"), ("isPaid", "true"), ("amount", 3_000_000_000)])
def test_patch_wrongly_typed_or_out_of_range_rejected(client, rahul_payload, field, value):
    created = client.post("/api/reminders", json=rahul_payload).json()
    response = client.patch(f"/api/reminders/{created['id']}", json={field: value})
    assert response.status_code == 400
    assert response.json()["field"] == field
    assert client.get(f"/api/reminders/{created['id']}").json() == created


def test_malformed_json_has_no_field(client):
    response = client.post(
        "/api/reminders",
        content=b'{"personName": ',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert "field" not in response.json()
    assert response.json()["message"]
