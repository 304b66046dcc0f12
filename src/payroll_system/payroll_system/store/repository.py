from __future__ import annotations

from typing import Optional, Protocol, Sequence, Union

from ..core.enums import ProficiencyLevel
from ..employees.model import Employee
from ..salary.model import SalaryConfig
from ..teams.model import Team


class RecordStore(Protocol):
    """Repository interface for employees, teams and salary configs.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def add_employee(self, employee: Employee) -> None:
        raise NotImplementedError

    def add_team(self, team: Team) -> None:
        """Store a team and point each member's back-reference at it."""

        raise NotImplementedError

    def add_salary_config(self, config: SalaryConfig) -> None:
        raise NotImplementedError

    def find_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def find_team_by_id(self, team_id: int) -> Optional[Team]:
        raise NotImplementedError

    def find_salary_config(self, level: Union[ProficiencyLevel, str]) -> Optional[SalaryConfig]:
        raise NotImplementedError

    def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_teams(self) -> Sequence[Team]:
        raise NotImplementedError

    def list_salary_configs(self) -> Sequence[SalaryConfig]:
        raise NotImplementedError

    def team_members(self, team: Team) -> Sequence[Employee]:
        raise NotImplementedError

    def mark_worked(self, employee_id: int, day: int, start_hour: int, end_hour: int) -> None:
        raise NotImplementedError
