from __future__ import annotations

import pytest

from src.payroll_system.payroll_system.core.enums import ProficiencyLevel
from src.payroll_system.payroll_system.core.exceptions import ValidationError
from src.payroll_system.payroll_system.employees.model import Employee
from src.payroll_system.payroll_system.reports.service import ReportService


class FakeStore:
    def __init__(self, employees):
        self._employees = employees

    def list_employees(self):
        return self._employees


def _employee(employee_id, *shifts):
    e = Employee(employee_id=employee_id, name="A", age=30, level=ProficiencyLevel.SENIOR)
    for day, start, end in shifts:
        e.schedule.mark_worked(day, start, end)
    return e


def test_daily_totals_with_tied_maximum():
    store = FakeStore([_employee(1, (2, 9, 17), (4, 8, 16)), _employee(2, (3, 9, 10))])
    report = ReportService(store).total_hours_per_day(start_day=1, end_day=4)

    assert report.totals == [(1, 0), (2, 8), (3, 1), (4, 8)]
    assert report.extremes.max_labels == [2, 4]
    assert report.extremes.min_labels == [1]


def test_single_day_is_both_max_and_min():
    report = ReportService(FakeStore([_employee(1, (30, 0, 5))])).total_hours_per_day(start_day=30, end_day=30)

    assert report.totals == [(30, 5)]
    assert report.extremes.max_labels == [30]
    assert report.extremes.min_labels == [30]


@pytest.mark.parametrize("start,end", [(0, 5), (5, 31), (6, 5)])
def test_invalid_day_range(start, end):
    with pytest.raises(ValidationError):
        ReportService(FakeStore([])).total_hours_per_day(start_day=start, end_day=end)


def test_hourly_presence_averages_and_extremes():
    store = FakeStore([_employee(1, (1, 9, 11), (2, 9, 10)), _employee(2, (1, 10, 11))])
    report = ReportService(store).employees_per_hour(start_hour=8, end_hour=11)

    assert [h for h, _ in report.averages] == [8, 9, 10]
    assert report.averages[1][1] == pytest.approx(2 / 30)
    assert report.extremes.max_labels == [9, 10]
    assert report.extremes.min_labels == [8]


@pytest.mark.parametrize("start,end", [(10, 5), (5, 5), (-1, 3), (20, 25)])
def test_invalid_hour_range(start, end):
    with pytest.raises(ValidationError):
        ReportService(FakeStore([])).employees_per_hour(start_hour=start, end_hour=end)
