from __future__ import annotations

from typing import Optional, Sequence, Union

from ..core.enums import ProficiencyLevel
from ..core.exceptions import EmployeeNotFoundError
from ..employees.model import Employee
from ..salary.model import SalaryConfig
from ..teams.model import Team


class InMemoryRecordStore:
    """Process-lifetime store that owns every employee and team.

    Collections keep insertion order. Duplicate ids are kept in the listings,
    while lookups resolve to the first entry added for an id.
    """

    def __init__(self) -> None:
        self._employees: list[Employee] = []
        self._employees_by_id: dict[int, Employee] = {}
        self._teams: list[Team] = []
        self._teams_by_id: dict[int, Team] = {}
        self._salary_configs: dict[ProficiencyLevel, SalaryConfig] = {}

    def add_employee(self, employee: Employee) -> None:
        self._employees.append(employee)
        self._employees_by_id.setdefault(employee.employee_id, employee)

    def add_team(self, team: Team) -> None:
        head = self.find_employee_by_id(team.head_member_id)
        if head is None:
            raise EmployeeNotFoundError(f"Team {team.team_id}: head member {team.head_member_id} does not exist")

        members = []
        for member_id in team.member_ids:
            member = self.find_employee_by_id(member_id)
            if member is None:
                raise EmployeeNotFoundError(f"Team {team.team_id}: member {member_id} does not exist")
            members.append(member)

        # last team to claim an employee wins
        for member in members:
            member.team_id = team.team_id

        self._teams.append(team)
        self._teams_by_id.setdefault(team.team_id, team)

    def add_salary_config(self, config: SalaryConfig) -> None:
        self._salary_configs[config.level] = config

    def find_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._employees_by_id.get(employee_id)

    def find_team_by_id(self, team_id: int) -> Optional[Team]:
        return self._teams_by_id.get(team_id)

    def find_salary_config(self, level: Union[ProficiencyLevel, str]) -> Optional[SalaryConfig]:
        try:
            key = ProficiencyLevel(level)
        except ValueError:
            return None
        return self._salary_configs.get(key)

    def list_employees(self) -> Sequence[Employee]:
        return list(self._employees)

    def list_teams(self) -> Sequence[Team]:
        return list(self._teams)

    def list_salary_configs(self) -> Sequence[SalaryConfig]:
        return list(self._salary_configs.values())

    def team_members(self, team: Team) -> Sequence[Employee]:
        members = []
        for member_id in team.member_ids:
            member = self.find_employee_by_id(member_id)
            if member is None:
                raise EmployeeNotFoundError(f"Team {team.team_id}: member {member_id} does not exist")
            members.append(member)
        return members

    def mark_worked(self, employee_id: int, day: int, start_hour: int, end_hour: int) -> None:
        employee = self.find_employee_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(f"Employee {employee_id} does not exist")
        employee.schedule.mark_worked(day, start_hour, end_hour)
