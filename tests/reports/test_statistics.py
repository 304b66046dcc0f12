import pytest

from src.payroll_system.payroll_system.core.enums import ProficiencyLevel
from src.payroll_system.payroll_system.core.exceptions import EmptyTeamError, ScheduleRangeError
from src.payroll_system.payroll_system.employees.model import Employee
from src.payroll_system.payroll_system.reports.statistics import (
    average_employees_working_at_hour,
    min_max_over_range,
    team_average_working_hours,
    team_total_working_hours,
    total_worked_hours_on_day,
    working_employee_count,
)


def _employee(employee_id, *shifts):
    e = Employee(employee_id=employee_id, name=f"E{employee_id}", age=30, level=ProficiencyLevel.JUNIOR)
    for day, start, end in shifts:
        e.schedule.mark_worked(day, start, end)
    return e


@pytest.fixture
def employees():
    return [
        _employee(1, (1, 9, 17), (2, 9, 12)),
        _employee(2, (1, 10, 11), (30, 0, 24)),
        _employee(3),
    ]


def test_total_on_day_uses_zero_based_index(employees):
    assert total_worked_hours_on_day(employees, 0) == 9
    assert total_worked_hours_on_day(employees, 1) == 3
    assert total_worked_hours_on_day(employees, 29) == 24


def test_day_totals_sum_to_employee_totals(employees):
    by_day = sum(total_worked_hours_on_day(employees, d) for d in range(30))

    assert by_day == sum(e.total_working_hours for e in employees)


def test_day_index_out_of_range(employees):
    with pytest.raises(ScheduleRangeError):
        total_worked_hours_on_day(employees, 30)


def test_working_employee_count_counts_employee_day_pairs(employees):
    # hour 10: e1 day1, e1 day2, e2 day1, e2 day30
    assert working_employee_count(employees, 10) == 4
    assert working_employee_count(employees, 17) == 1
    assert average_employees_working_at_hour(employees, 10) == pytest.approx(4 / 30)


def test_queries_on_empty_workforce():
    assert total_worked_hours_on_day([], 0) == 0
    assert working_employee_count([], 5) == 0
    assert average_employees_working_at_hour([], 5) == 0


def test_min_max_reports_every_tied_label():
    result = min_max_over_range([5, 9, 1, 9, 1], ["a", "b", "c", "d", "e"])

    assert result.max_value == 9
    assert result.max_labels == ["b", "d"]
    assert result.min_value == 1
    assert result.min_labels == ["c", "e"]


def test_min_max_of_empty_sequence():
    result = min_max_over_range([], [])

    assert (result.max_value, result.min_value) == (0, 0)
    assert result.max_labels == [] and result.min_labels == []


def test_team_totals(employees):
    assert team_total_working_hours(employees) == 11 + 25
    assert team_average_working_hours(employees) == 36 // 3


def test_team_average_requires_members():
    with pytest.raises(EmptyTeamError):
        team_average_working_hours([])
