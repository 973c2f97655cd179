from __future__ import annotations

from flask import Flask, session

from ..common.datetime_utils import format_timestamp
from ..common.http import handle_errors, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/me/today", methods=["GET"], endpoint="today")
    @login_required
    @handle_errors("loading today's shift")
    def today():
        status = container.punch_service.today(session["username"])
        shift = status.shift
        return ok(
            date=status.work_date.strftime("%Y-%m-%d"),
            state=status.state.value,
            can_punch_in=status.can_punch_in,
            can_punch_out=status.can_punch_out,
            time_in=format_timestamp(shift.time_in) if shift else "",
            time_out=format_timestamp(shift.time_out) if shift else "",
        )

    @app.route("/api/punch-in", methods=["POST"], endpoint="punch_in")
    @login_required
    @handle_errors("punching in")
    def punch_in():
        shift = container.punch_service.punch_in(session["username"])
        return ok(time_in=format_timestamp(shift.time_in), message="Punched in.")

    @app.route("/api/punch-out", methods=["POST"], endpoint="punch_out")
    @login_required
    @handle_errors("punching out")
    def punch_out():
        time_out = container.punch_service.punch_out(session["username"])
        return ok(time_out=format_timestamp(time_out), message="Punched out.")

    @app.route("/api/me/period", methods=["GET"], endpoint="my_period")
    @login_required
    @handle_errors("loading pay period")
    def my_period():
        report = container.payroll_report_service.build_period_report(session["username"])
        return ok(report=report.to_dict())
