"""Read-only aggregate queries over employee schedules.

All functions are pure: they never mutate the employees they are given.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Sequence

import numpy as np

from ..core.constants import DAYS_IN_PERIOD, HOURS_PER_DAY
from ..core.exceptions import EmptyTeamError, ScheduleRangeError
from ..employees.model import Employee


@dataclass(frozen=True)
class MinMax:
    max_value: float
    max_labels: list
    min_value: float
    min_labels: list


def _stack(employees: Sequence[Employee]) -> np.ndarray:
    """Shape (employees, days, hours)."""
    if not employees:
        return np.zeros((0, DAYS_IN_PERIOD, HOURS_PER_DAY), dtype=bool)
    return np.stack([e.schedule.as_array() for e in employees])


def _check_hour(hour: int) -> None:
    if not 0 <= hour < HOURS_PER_DAY:
        raise ScheduleRangeError(f"hour must be between 0 and {HOURS_PER_DAY - 1}, got {hour}")


def total_worked_hours_on_day(employees: Sequence[Employee], day_index: int) -> int:
    """Hours worked by everyone on grid row ``day_index`` (0-based)."""
    if not 0 <= day_index < DAYS_IN_PERIOD:
        raise ScheduleRangeError(f"day index must be between 0 and {DAYS_IN_PERIOD - 1}, got {day_index}")
    return int(_stack(employees)[:, day_index, :].sum())


def working_employee_count(employees: Sequence[Employee], hour: int) -> int:
    """Number of (employee, day) pairs in which ``hour`` was worked."""
    _check_hour(hour)
    return int(_stack(employees)[:, :, hour].sum())


def average_employees_working_at_hour(employees: Sequence[Employee], hour: int) -> float:
    return working_employee_count(employees, hour) / DAYS_IN_PERIOD


def min_max_over_range(values: Sequence[float], labels: Sequence[Hashable]) -> MinMax:
    """Max and min of ``values`` with every label that reaches them, in input order."""
    if len(values) != len(labels):
        raise ValueError("values and labels must have the same length")
    if not values:
        return MinMax(max_value=0, max_labels=[], min_value=0, min_labels=[])

    high = max(values)
    low = min(values)
    return MinMax(
        max_value=high,
        max_labels=[label for label, v in zip(labels, values) if v == high],
        min_value=low,
        min_labels=[label for label, v in zip(labels, values) if v == low],
    )


def team_total_working_hours(members: Sequence[Employee]) -> int:
    return sum(m.total_working_hours for m in members)


def team_average_working_hours(members: Sequence[Employee]) -> int:
    if not members:
        raise EmptyTeamError("Team has no members")
    return team_total_working_hours(members) // len(members)
