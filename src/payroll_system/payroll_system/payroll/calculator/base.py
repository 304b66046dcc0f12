from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...salary.model import SalaryConfig


@dataclass(frozen=True)
class SalaryBreakdown:
    raw_salary: int
    bonus_amount: int
    tax_amount: int

    @property
    def total_earning(self) -> int:
        return self.raw_salary + self.bonus_amount - self.tax_amount


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, total_hours: int, config: SalaryConfig) -> SalaryBreakdown:
        raise NotImplementedError
