from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import admin_required, current_role, fail, handle_errors, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/employees/<username>/period", methods=["GET"], endpoint="admin_period")
    @admin_required
    @handle_errors("loading pay period")
    def admin_period(username: str):
        index_s = request.args.get("index")
        try:
            index = int(index_s) if index_s not in (None, "") else None
        except ValueError:
            return fail("Invalid period index", 400)

        report = container.payroll_report_service.build_period_report(username, index=index)
        return ok(report=report.to_dict())

    @app.route(
        "/api/admin/shifts/<username>/<work_date>/adjustments",
        methods=["PUT"],
        endpoint="adjust_shift",
    )
    @admin_required
    @handle_errors("saving adjustments")
    def adjust_shift(username: str, work_date: str):
        try:
            day = parse_iso_date(work_date)
        except ValueError:
            return fail("Invalid date (expected YYYY-MM-DD)", 400)

        data = request.get_json(silent=True) or {}
        container.shift_service.adjust(
            current_role=current_role(),
            username=username,
            work_date=day,
            adj_time_in=data.get("adj_time_in"),
            adj_time_out=data.get("adj_time_out"),
        )
        return ok(message="Adjustments saved.")

    @app.route("/api/admin/settings/pay-period-start", methods=["GET"], endpoint="get_pay_period_start")
    @admin_required
    @handle_errors("loading settings")
    def get_pay_period_start():
        anchor = container.settings_service.get_pay_period_start()
        return ok(pay_period_start=anchor.strftime("%Y-%m-%d"))

    @app.route("/api/admin/settings/pay-period-start", methods=["PUT"], endpoint="update_pay_period_start")
    @admin_required
    @handle_errors("updating pay period start")
    def update_pay_period_start():
        data = request.get_json(silent=True) or {}
        anchor = container.settings_service.update_pay_period_start(
            current_role=current_role(),
            new_start=data.get("pay_period_start") or "",
        )
        return ok(pay_period_start=anchor.strftime("%Y-%m-%d"))
