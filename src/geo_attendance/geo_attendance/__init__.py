"""Geo Attendance package.

Feature modules (attendance, notifications, users, reports) with a thin Flask
JSON layer on top of plain service/repository layers. The punch rules live in
``attendance.engine``.
"""
