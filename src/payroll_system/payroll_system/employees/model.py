from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import ProficiencyLevel
from ..schedules.model import ScheduleGrid


@dataclass(eq=False)
class Employee:
    """Domain entity: Employee.

    Note: ``team_id`` is a lookup-only back-reference; the team owns membership.
    Salary figures are derived by the payroll service, not passed in.
    """

    employee_id: int
    name: str
    age: int
    level: ProficiencyLevel
    team_id: Optional[int] = None
    schedule: ScheduleGrid = field(default_factory=ScheduleGrid, repr=False)
    raw_salary: int = field(default=0, init=False)
    bonus_amount: int = field(default=0, init=False)
    tax_amount: int = field(default=0, init=False)

    @property
    def total_working_hours(self) -> int:
        return self.schedule.total_worked_hours()

    @property
    def absent_days(self) -> int:
        return self.schedule.absent_days()

    @property
    def total_earning(self) -> int:
        return self.raw_salary + self.bonus_amount - self.tax_amount
