from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DAYS_IN_PERIOD, HOURS_PER_DAY
from ..core.exceptions import ValidationError
from ..store.repository import RecordStore
from .statistics import (
    MinMax,
    average_employees_working_at_hour,
    min_max_over_range,
    total_worked_hours_on_day,
    working_employee_count,
)


@dataclass(frozen=True)
class DailyHoursReport:
    totals: list[tuple[int, int]]
    extremes: MinMax


@dataclass(frozen=True)
class HourlyPresenceReport:
    averages: list[tuple[int, float]]
    extremes: MinMax


class ReportService:
    """Use case: working-hour statistics across the whole workforce."""

    def __init__(self, store: RecordStore):
        self._store = store

    def total_hours_per_day(self, *, start_day: int, end_day: int) -> DailyHoursReport:
        """Totals for days ``start_day``..``end_day`` inclusive (1-based day numbers)."""
        if not 1 <= start_day <= end_day <= DAYS_IN_PERIOD:
            raise ValidationError(f"day range must satisfy 1 <= start <= end <= {DAYS_IN_PERIOD}")

        employees = self._store.list_employees()
        days = list(range(start_day, end_day + 1))
        totals = [total_worked_hours_on_day(employees, day - 1) for day in days]
        return DailyHoursReport(totals=list(zip(days, totals)), extremes=min_max_over_range(totals, days))

    def employees_per_hour(self, *, start_hour: int, end_hour: int) -> HourlyPresenceReport:
        """Average presence for each hour in ``[start_hour, end_hour)``.

        Extremes are picked on raw occurrence counts, labelled by starting hour.
        """
        if start_hour >= end_hour or start_hour < 0 or end_hour > HOURS_PER_DAY:
            raise ValidationError(f"hour range must satisfy 0 <= start < end <= {HOURS_PER_DAY}")

        employees = self._store.list_employees()
        hours = list(range(start_hour, end_hour))
        averages = [(hour, average_employees_working_at_hour(employees, hour)) for hour in hours]
        counts = [working_employee_count(employees, hour) for hour in hours]
        return HourlyPresenceReport(averages=averages, extremes=min_max_over_range(counts, hours))
