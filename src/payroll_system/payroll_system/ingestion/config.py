from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


@dataclass(frozen=True)
class DataSourceConfig:
    employees_path: Path
    working_hours_path: Path
    teams_path: Path
    salary_configs_path: Path

    @classmethod
    def from_directory(
        cls,
        data_dir: PathLike,
        *,
        employees_file: str = "employees.csv",
        working_hours_file: str = "working_hours.csv",
        teams_file: str = "teams.csv",
        salary_configs_file: str = "salary_configs.csv",
    ) -> "DataSourceConfig":
        base = Path(data_dir)
        return cls(
            employees_path=base / employees_file,
            working_hours_path=base / working_hours_file,
            teams_path=base / teams_file,
            salary_configs_path=base / salary_configs_file,
        )

    @classmethod
    def from_settings(cls, settings: object, *, data_dir: PathLike | None = None) -> "DataSourceConfig":
        """Build from a settings module (see ``config.get_settings_module``)."""
        return cls.from_directory(
            data_dir or getattr(settings, "DATA_DIR", "data"),
            employees_file=getattr(settings, "EMPLOYEES_FILE", "employees.csv"),
            working_hours_file=getattr(settings, "WORKING_HOURS_FILE", "working_hours.csv"),
            teams_file=getattr(settings, "TEAMS_FILE", "teams.csv"),
            salary_configs_file=getattr(settings, "SALARY_CONFIGS_FILE", "salary_configs.csv"),
        )
