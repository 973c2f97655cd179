from __future__ import annotations

from flask import Flask, request, session

from ..common.http import admin_required, current_role, handle_errors, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    @handle_errors("logging in")
    def login():
        data = request.get_json(silent=True) or {}
        s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))

        session.clear()
        session["username"] = s_user.username
        session["role"] = s_user.role.value
        return ok(username=s_user.username, role=s_user.role.value)

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok()

    @app.route("/api/admin/employees", methods=["GET"], endpoint="admin_employees")
    @admin_required
    @handle_errors("loading employees")
    def admin_employees():
        employees = container.user_service.get_all_employees()
        return ok(employees=[u.to_public_dict() for u in employees])

    @app.route("/api/admin/employees", methods=["POST"], endpoint="add_employee")
    @admin_required
    @handle_errors("adding employee")
    def add_employee():
        data = request.get_json(silent=True) or {}
        user = container.user_service.add_employee(
            current_role=current_role(),
            username=data.get("username", ""),
            password=data.get("password", ""),
            hourly_rate=data.get("hourly_rate"),
        )
        return ok(employee=user.to_public_dict(), message=f"Employee {user.username} added."), 201

    @app.route("/api/admin/employees/<username>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    @handle_errors("deleting employee")
    def delete_employee(username: str):
        removed = container.user_service.delete_employee(current_role=current_role(), username=username)
        return ok(message=f"{username} deleted.", removed_shifts=removed)

    @app.route("/api/admin/employees/<username>/rate", methods=["PUT"], endpoint="update_rate")
    @admin_required
    @handle_errors("updating hourly rate")
    def update_rate(username: str):
        data = request.get_json(silent=True) or {}
        rate = container.user_service.update_hourly_rate(
            current_role=current_role(),
            username=username,
            hourly_rate=data.get("hourly_rate"),
        )
        return ok(hourly_rate=str(rate), message="Hourly rate updated.")
