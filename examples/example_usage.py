"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.attendance_ledger.attendance_ledger.container import build_container
from src.attendance_ledger.attendance_ledger.reports.service import build_summary_filter


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    container.attendance_service.mark(external_id="S1", status="present")
    for row in container.summary_service.summarize(build_summary_filter(external_id="S1")):
        print(row)


if __name__ == "__main__":
    main()
