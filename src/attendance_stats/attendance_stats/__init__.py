"""Attendance Stats package.

This package is organized by feature modules (punches, users, teams, sessions,
statistics, rollup, ...) with read-only repository adapters and pure service
layers. The query facade in ``query`` is the only entry point for callers.
"""
