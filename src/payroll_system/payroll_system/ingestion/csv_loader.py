from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence, TypeVar

import pandas as pd

from ..core.exceptions import RecordParseError, ValidationError
from ..employees.model import Employee
from ..salary.model import SalaryConfig
from ..store.repository import RecordStore
from ..teams.model import Team
from .config import DataSourceConfig
from .parsers import (
    EMPLOYEE_COLUMNS,
    SALARY_CONFIG_COLUMNS,
    TEAM_COLUMNS,
    WORKING_HOURS_COLUMNS,
    WorkingHoursRow,
    parse_employee,
    parse_salary_config,
    parse_team,
    parse_working_hours,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class LoadReport:
    loaded: dict[str, int] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def _is_blank(cells: Sequence[object]) -> bool:
    return all(not isinstance(c, str) or not c.strip() for c in cells)


def read_table(path: Path, *, columns: int, parse: Callable[[Sequence[object]], T]) -> list[T]:
    """Read a headered CSV file and parse every data row.

    The whole file is parsed before anything is returned, so a single bad row
    rejects the file. Raises FileNotFoundError / OSError / RecordParseError.
    """
    try:
        frame = pd.read_csv(
            path,
            header=None,
            skiprows=1,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError:
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise RecordParseError(str(exc), source=path.name) from exc

    if frame.shape[1] != columns:
        raise RecordParseError(f"expected {columns} columns, found {frame.shape[1]}", source=path.name)

    records: list[T] = []
    for index, cells in enumerate(frame.itertuples(index=False, name=None)):
        if _is_blank(cells):
            continue
        try:
            records.append(parse(cells))
        except ValidationError as exc:
            # +2: header line, 1-based numbering
            raise RecordParseError(str(exc), source=path.name, line=index + 2) from exc
    return records


class CsvDataLoader:
    """Populates a RecordStore from the four input tables.

    Order matters: working hours and teams reference employees.
    """

    def __init__(self, config: DataSourceConfig):
        self._config = config

    def load_into(self, store: RecordStore) -> LoadReport:
        report = LoadReport()
        steps = (
            ("employees", self._load_employees),
            ("working_hours", self._load_working_hours),
            ("teams", self._load_teams),
            ("salary_configs", self._load_salary_configs),
        )
        for name, step in steps:
            try:
                report.loaded[name] = step(store)
            except (OSError, RecordParseError) as exc:
                logger.error("Could not load %s: %s", name, exc)
                report.errors[name] = str(exc)
            else:
                logger.info("Loaded %d %s row(s)", report.loaded[name], name)
        return report

    def _load_employees(self, store: RecordStore) -> int:
        employees: list[Employee] = read_table(
            self._config.employees_path, columns=EMPLOYEE_COLUMNS, parse=parse_employee
        )
        for employee in employees:
            store.add_employee(employee)
        return len(employees)

    def _load_working_hours(self, store: RecordStore) -> int:
        path = self._config.working_hours_path
        rows: list[WorkingHoursRow] = read_table(path, columns=WORKING_HOURS_COLUMNS, parse=parse_working_hours)
        for row in rows:
            if store.find_employee_by_id(row.employee_id) is None:
                raise RecordParseError(f"unknown employee id {row.employee_id}", source=path.name)
        for row in rows:
            store.mark_worked(row.employee_id, row.day, row.start_hour, row.end_hour)
        return len(rows)

    def _load_teams(self, store: RecordStore) -> int:
        path = self._config.teams_path
        teams: list[Team] = read_table(path, columns=TEAM_COLUMNS, parse=parse_team)
        for team in teams:
            for employee_id in (team.head_member_id, *team.member_ids):
                if store.find_employee_by_id(employee_id) is None:
                    raise RecordParseError(f"team {team.team_id} references unknown employee id {employee_id}", source=path.name)
        for team in teams:
            store.add_team(team)
        return len(teams)

    def _load_salary_configs(self, store: RecordStore) -> int:
        configs: list[SalaryConfig] = read_table(
            self._config.salary_configs_path, columns=SALARY_CONFIG_COLUMNS, parse=parse_salary_config
        )
        for config in configs:
            store.add_salary_config(config)
        return len(configs)
