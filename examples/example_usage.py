"""Example: use the service layer directly (without the command loop).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.payroll_system.payroll_system.container import build_container
from src.payroll_system.payroll_system.ingestion.config import DataSourceConfig


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_config=DataSourceConfig.from_settings(settings))
    container.loader.load_into(container.store)
    container.payroll_service.calculate_salaries()

    for row in container.payroll_service.list_salaries():
        print(row)
    print(container.report_service.total_hours_per_day(start_day=1, end_day=7))


if __name__ == "__main__":
    main()
