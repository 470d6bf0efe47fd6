"""Attendance Ledger package.

Organized by feature modules (roster, attendance, reports) with a thin Flask
JSON controller layer over service/repository layers backed by MySQL.
"""

__version__ = "1.0.0"
