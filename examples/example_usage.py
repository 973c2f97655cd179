"""Example: use the service layer directly (no Flask).

Punches a demo employee in and out on an in-memory store and prints the
current pay-period report.
"""

from datetime import date, datetime

from src.timekeeper.timekeeper.container import build_container, build_store
from src.timekeeper.timekeeper.core.enums import Role


def main():
    container = build_container(store=build_store("memory"), default_anchor=date(2025, 1, 1))
    container.user_service.add_employee(current_role=Role.ADMIN, username="alice", password="pw", hourly_rate="20")

    container.punch_service.punch_in("alice", now=datetime(2025, 1, 20, 9, 0))
    container.punch_service.punch_out("alice", now=datetime(2025, 1, 20, 17, 15))

    report = container.payroll_report_service.build_period_report("alice", today=date(2025, 1, 20))
    print(report.to_dict())


if __name__ == "__main__":
    main()
