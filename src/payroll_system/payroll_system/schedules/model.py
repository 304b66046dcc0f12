from __future__ import annotations

import numpy as np

from ..core.constants import DAYS_IN_PERIOD, HOURS_PER_DAY
from ..core.exceptions import ScheduleRangeError


class ScheduleGrid:
    """Worked/not-worked matrix of one employee for the whole period.

    Rows are days (day 1 is row 0), columns are hours of the day (0..23).
    Every public method takes 1-indexed day numbers.
    """

    __slots__ = ("_slots",)

    def __init__(self) -> None:
        self._slots = np.zeros((DAYS_IN_PERIOD, HOURS_PER_DAY), dtype=bool)

    def _row(self, day: int) -> int:
        if not 1 <= day <= DAYS_IN_PERIOD:
            raise ScheduleRangeError(f"day must be between 1 and {DAYS_IN_PERIOD}, got {day}")
        return day - 1

    def mark_worked(self, day: int, start_hour: int, end_hour: int) -> None:
        """Mark hours [start_hour, end_hour) of ``day`` as worked."""
        row = self._row(day)
        if not 0 <= start_hour <= end_hour <= HOURS_PER_DAY:
            raise ScheduleRangeError(
                f"hour range must satisfy 0 <= start <= end <= {HOURS_PER_DAY}, got {start_hour}-{end_hour}"
            )
        self._slots[row, start_hour:end_hour] = True

    def is_worked(self, day: int, hour: int) -> bool:
        row = self._row(day)
        if not 0 <= hour < HOURS_PER_DAY:
            raise ScheduleRangeError(f"hour must be between 0 and {HOURS_PER_DAY - 1}, got {hour}")
        return bool(self._slots[row, hour])

    def hours_on_day(self, day: int) -> int:
        return int(self._slots[self._row(day)].sum())

    def total_worked_hours(self) -> int:
        return int(self._slots.sum())

    def absent_days(self) -> int:
        # a day is absent when none of its 24 slots is set
        return int((~self._slots.any(axis=1)).sum())

    def as_array(self) -> np.ndarray:
        view = self._slots.view()
        view.flags.writeable = False
        return view

    def __repr__(self) -> str:
        return f"ScheduleGrid(total_worked_hours={self.total_worked_hours()})"
