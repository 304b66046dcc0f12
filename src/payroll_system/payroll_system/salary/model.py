from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ProficiencyLevel


@dataclass
class SalaryConfig:
    """Pay rules for one proficiency level. Mutable: updated in place at runtime."""

    level: ProficiencyLevel
    base_salary: int
    salary_per_hour: int
    salary_per_extra_hour: int
    official_working_hours: int
    tax_percentage: int

    def update(
        self,
        *,
        base_salary: int,
        salary_per_hour: int,
        salary_per_extra_hour: int,
        official_working_hours: int,
        tax_percentage: int,
    ) -> None:
        self.base_salary = base_salary
        self.salary_per_hour = salary_per_hour
        self.salary_per_extra_hour = salary_per_extra_hour
        self.official_working_hours = official_working_hours
        self.tax_percentage = tax_percentage
