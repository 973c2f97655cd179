"""Timekeeper package.

Organized by feature modules (users, shifts, punches, payroll, ...) with a
thin Flask controller layer over service/repository layers that talk to a
pluggable document store.
"""
