from __future__ import annotations

from datetime import date

from src.timekeeper.timekeeper.core.exceptions import StorageError
from src.timekeeper.timekeeper.shifts.model import Shift


def test_login_rejects_bad_password(client):
    resp = client.post("/api/login", json={"username": "alice", "password": "nope"})
    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "Invalid username or password."}


def test_endpoints_require_login(client):
    assert client.post("/api/punch-in").status_code == 401
    assert client.get("/api/admin/employees").status_code == 401


def test_employee_cannot_use_admin_endpoints(employee_client):
    assert employee_client.get("/api/admin/employees").status_code == 403


def test_punch_flow(employee_client):
    today = employee_client.get("/api/me/today").get_json()
    assert today["state"] == "NO_SHIFT"
    assert today["can_punch_in"] is True

    resp = employee_client.post("/api/punch-in")
    assert resp.status_code == 200
    assert resp.get_json()["time_in"] == "2025-01-20T09:00"

    again = employee_client.post("/api/punch-in")
    assert again.status_code == 409
    assert again.get_json()["message"] == "You have already punched in today."

    assert employee_client.post("/api/punch-out").status_code == 200
    assert employee_client.post("/api/punch-out").status_code == 409
    assert employee_client.get("/api/me/today").get_json()["state"] == "CLOCKED_OUT"


def test_my_period_lists_open_shift_without_pay(employee_client):
    employee_client.post("/api/punch-in")

    report = employee_client.get("/api/me/period").get_json()["report"]

    assert report["period"] == {"index": 1, "start": "2025-01-15", "end": "2025-01-28"}
    assert report["rows"][0]["pay"] == "0.00"
    assert report["rows"][0]["counted"] is False
    assert report["totals"] == {"hours": "0.00", "pay": "0.00"}


def test_admin_manages_employees(admin_client):
    resp = admin_client.post("/api/admin/employees", json={"username": "bob", "password": "pw", "hourly_rate": 22})
    assert resp.status_code == 201

    dup = admin_client.post("/api/admin/employees", json={"username": "bob", "password": "pw", "hourly_rate": 22})
    assert dup.status_code == 409

    bad = admin_client.post("/api/admin/employees", json={"username": "carol", "password": "pw", "hourly_rate": -1})
    assert bad.status_code == 400

    names = [e["username"] for e in admin_client.get("/api/admin/employees").get_json()["employees"]]
    assert names == ["alice", "bob"]

    rate = admin_client.put("/api/admin/employees/bob/rate", json={"hourly_rate": "23.5"})
    assert rate.get_json()["hourly_rate"] == "23.5"

    assert admin_client.delete("/api/admin/employees/bob").status_code == 200
    assert admin_client.delete("/api/admin/employees/bob").status_code == 404


def test_admin_adjusts_shift_and_sees_pay(app, admin_client):
    container = app.extensions["timekeeper"]
    container.shifts_repo.save(Shift(username="alice", work_date=date(2025, 1, 16)))

    resp = admin_client.put(
        "/api/admin/shifts/alice/2025-01-16/adjustments",
        json={"adj_time_in": "09:00", "adj_time_out": "17:15"},
    )
    assert resp.status_code == 200

    report = admin_client.get("/api/admin/employees/alice/period?index=1").get_json()["report"]
    assert report["rows"][0]["adj_time_in"] == "09:00"
    assert report["totals"] == {"hours": "8.25", "pay": "165.00"}


def test_adjusting_missing_shift_is_404(admin_client):
    resp = admin_client.put("/api/admin/shifts/alice/2025-01-02/adjustments", json={"adj_time_in": "09:00"})
    assert resp.status_code == 404


def test_admin_updates_pay_period_start(admin_client):
    assert admin_client.get("/api/admin/settings/pay-period-start").get_json()["pay_period_start"] == "2025-01-01"

    resp = admin_client.put("/api/admin/settings/pay-period-start", json={"pay_period_start": "2025-01-06"})
    assert resp.get_json()["pay_period_start"] == "2025-01-06"

    report = admin_client.get("/api/admin/employees/alice/period").get_json()["report"]
    assert report["period"]["start"] == "2025-01-20"

    bad = admin_client.put("/api/admin/settings/pay-period-start", json={"pay_period_start": "06/01/2025"})
    assert bad.status_code == 400


def test_storage_failure_is_generic_500(app, employee_client, monkeypatch):
    container = app.extensions["timekeeper"]

    def boom(*args, **kwargs):
        raise StorageError("connection lost")

    monkeypatch.setattr(container.store, "get", boom)

    resp = employee_client.post("/api/punch-in")
    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "System error while punching in"}
