from __future__ import annotations

from ...salary.model import SalaryConfig
from .base import SalaryBreakdown, SalaryCalculator


def _div_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: hours above the official threshold are paid as bonus at the extra rate.

    Tax is a percentage of salary plus bonus, truncated toward zero.
    """

    def calculate(self, total_hours: int, config: SalaryConfig) -> SalaryBreakdown:
        official = config.official_working_hours
        if total_hours > official:
            raw_salary = config.base_salary + official * config.salary_per_hour
            bonus = (total_hours - official) * config.salary_per_extra_hour
        else:
            raw_salary = config.base_salary + config.salary_per_hour * total_hours
            bonus = 0

        tax = _div_toward_zero((raw_salary + bonus) * config.tax_percentage, 100)
        return SalaryBreakdown(raw_salary=raw_salary, bonus_amount=bonus, tax_amount=tax)
