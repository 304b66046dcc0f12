from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional, Union

from ..core.enums import ProficiencyLevel
from ..core.exceptions import (
    EmployeeNotFoundError,
    MissingSalaryConfigError,
    SalaryConfigNotFoundError,
    TeamNotFoundError,
)
from ..employees.model import Employee
from ..reports.statistics import team_average_working_hours, team_total_working_hours
from ..salary.model import SalaryConfig
from ..store.repository import RecordStore
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SalaryRow:
    employee_id: int
    name: str
    total_working_hours: int
    total_earning: int


@dataclass(frozen=True)
class MemberEarning:
    employee_id: int
    total_earning: int


@dataclass(frozen=True)
class TeamSalaryReport:
    team_id: int
    head_id: int
    head_name: str
    total_working_hours: int
    average_member_working_hours: int
    members: list[MemberEarning]


class PayrollService:
    """Use case: derive and report salaries, inspect and change salary configs.

    Note: derivation and config updates share one lock so the store stays
    consistent if it is ever used from more than one thread.
    """

    def __init__(self, store: RecordStore, *, calculator: Optional[SalaryCalculator] = None):
        self._store = store
        self._calculator = calculator or StandardSalaryCalculator()
        self._lock = threading.RLock()

    def calculate_salaries(self) -> int:
        """Write raw salary, bonus and tax onto every employee.

        Raises MissingSalaryConfigError if an employee's level has no config;
        no employee is modified in that case.
        """
        with self._lock:
            employees = self._store.list_employees()
            plan = []
            for employee in employees:
                config = self._store.find_salary_config(employee.level)
                if config is None:
                    raise MissingSalaryConfigError(
                        f"No salary config for level {employee.level.value!r} (employee {employee.employee_id})"
                    )
                plan.append((employee, self._calculator.calculate(employee.total_working_hours, config)))

            for employee, breakdown in plan:
                employee.raw_salary = breakdown.raw_salary
                employee.bonus_amount = breakdown.bonus_amount
                employee.tax_amount = breakdown.tax_amount

        logger.debug("Derived salaries for %d employee(s)", len(plan))
        return len(plan)

    def list_salaries(self) -> list[SalaryRow]:
        return [
            SalaryRow(
                employee_id=e.employee_id,
                name=e.name,
                total_working_hours=e.total_working_hours,
                total_earning=e.total_earning,
            )
            for e in self._store.list_employees()
        ]

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._store.find_employee_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def get_team_report(self, team_id: int) -> TeamSalaryReport:
        team = self._store.find_team_by_id(team_id)
        if team is None:
            raise TeamNotFoundError(f"Team {team_id} does not exist")

        head = self.get_employee(team.head_member_id)
        members = self._store.team_members(team)
        return TeamSalaryReport(
            team_id=team.team_id,
            head_id=head.employee_id,
            head_name=head.name,
            total_working_hours=team_total_working_hours(members),
            average_member_working_hours=team_average_working_hours(members),
            members=[MemberEarning(employee_id=m.employee_id, total_earning=m.total_earning) for m in members],
        )

    def get_salary_config(self, level: Union[ProficiencyLevel, str]) -> SalaryConfig:
        config = self._store.find_salary_config(level)
        if config is None:
            raise SalaryConfigNotFoundError(f"No salary config for level {level!r}")
        return config

    def update_salary_config(
        self,
        level: Union[ProficiencyLevel, str],
        *,
        base_salary: int,
        salary_per_hour: int,
        salary_per_extra_hour: int,
        official_working_hours: int,
        tax_percentage: int,
    ) -> SalaryConfig:
        """Change a level's parameters in place.

        Already derived salaries are left as they are until ``calculate_salaries`` runs again.
        """
        with self._lock:
            config = self.get_salary_config(level)
            config.update(
                base_salary=base_salary,
                salary_per_hour=salary_per_hour,
                salary_per_extra_hour=salary_per_extra_hour,
                official_working_hours=official_working_hours,
                tax_percentage=tax_percentage,
            )
        logger.info("Updated salary config for level %s", config.level.value)
        return config
