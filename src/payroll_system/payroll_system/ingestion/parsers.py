"""Row parsers for the input tables.

Each parser takes the cells of one data row (strings, or NaN for missing
trailing cells) and returns a typed record. Bad values raise ValidationError;
nothing is ever defaulted to zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..common.validators import require_in_range, require_int, require_non_empty
from ..core.constants import DAYS_IN_PERIOD, HOURS_PER_DAY
from ..core.enums import ProficiencyLevel
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..salary.model import SalaryConfig
from ..teams.model import Team

EMPLOYEE_COLUMNS = 4
WORKING_HOURS_COLUMNS = 3
TEAM_COLUMNS = 4
SALARY_CONFIG_COLUMNS = 6

MEMBER_SEPARATOR = "$"
HOUR_RANGE_SEPARATOR = "-"


@dataclass(frozen=True)
class WorkingHoursRow:
    employee_id: int
    day: int
    start_hour: int
    end_hour: int


def parse_level(value: object) -> ProficiencyLevel:
    text = require_non_empty(value, "level")
    try:
        return ProficiencyLevel(text)
    except ValueError:
        raise ValidationError(f"unknown proficiency level: {text!r}") from None


def parse_employee(cells: Sequence[object]) -> Employee:
    return Employee(
        employee_id=require_int(cells[0], "id"),
        name=require_non_empty(cells[1], "name"),
        age=require_int(cells[2], "age"),
        level=parse_level(cells[3]),
    )


def parse_working_hours(cells: Sequence[object]) -> WorkingHoursRow:
    employee_id = require_int(cells[0], "employee id")
    day = require_in_range(require_int(cells[1], "day"), "day", 1, DAYS_IN_PERIOD)

    interval = require_non_empty(cells[2], "working interval").split(HOUR_RANGE_SEPARATOR)
    if len(interval) != 2:
        raise ValidationError(f"working interval must look like start-end, got {cells[2]!r}")
    start_hour = require_in_range(require_int(interval[0], "start hour"), "start hour", 0, HOURS_PER_DAY)
    end_hour = require_in_range(require_int(interval[1], "end hour"), "end hour", 0, HOURS_PER_DAY)
    if start_hour > end_hour:
        raise ValidationError(f"start hour {start_hour} is after end hour {end_hour}")

    return WorkingHoursRow(employee_id=employee_id, day=day, start_hour=start_hour, end_hour=end_hour)


def parse_team(cells: Sequence[object]) -> Team:
    members = require_non_empty(cells[2], "member ids").split(MEMBER_SEPARATOR)
    return Team(
        team_id=require_int(cells[0], "team id"),
        head_member_id=require_int(cells[1], "head member id"),
        member_ids=tuple(require_int(m, "member id") for m in members),
        bonus_min_working_hours=require_int(cells[3], "bonus min working hours"),
    )


def parse_salary_config(cells: Sequence[object]) -> SalaryConfig:
    return SalaryConfig(
        level=parse_level(cells[0]),
        base_salary=require_int(cells[1], "base salary"),
        salary_per_hour=require_int(cells[2], "salary per hour"),
        salary_per_extra_hour=require_int(cells[3], "salary per extra hour"),
        official_working_hours=require_int(cells[4], "official working hours"),
        tax_percentage=require_int(cells[5], "tax percentage"),
    )
