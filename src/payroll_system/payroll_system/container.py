from __future__ import annotations

from dataclasses import dataclass

from .ingestion.config import DataSourceConfig
from .ingestion.csv_loader import CsvDataLoader
from .payroll.service import PayrollService
from .reports.service import ReportService
from .store.memory_store import InMemoryRecordStore


@dataclass(frozen=True)
class Container:
    store: InMemoryRecordStore
    loader: CsvDataLoader

    payroll_service: PayrollService
    report_service: ReportService


def build_container(*, data_config: DataSourceConfig) -> Container:
    store = InMemoryRecordStore()
    loader = CsvDataLoader(data_config)

    payroll_service = PayrollService(store)
    report_service = ReportService(store)

    return Container(
        store=store,
        loader=loader,
        payroll_service=payroll_service,
        report_service=report_service,
    )
