from src.payroll_system.payroll_system.core.enums import ProficiencyLevel
from src.payroll_system.payroll_system.payroll.calculator.standard_calculator import StandardSalaryCalculator
from src.payroll_system.payroll_system.salary.model import SalaryConfig


def _config(**overrides):
    values = dict(
        level=ProficiencyLevel.SENIOR,
        base_salary=2000,
        salary_per_hour=20,
        salary_per_extra_hour=30,
        official_working_hours=15,
        tax_percentage=15,
    )
    values.update(overrides)
    return SalaryConfig(**values)


def test_hours_within_official_threshold_have_no_bonus():
    result = StandardSalaryCalculator().calculate(10, _config())

    assert result.raw_salary == 2000 + 10 * 20
    assert result.bonus_amount == 0
    assert result.tax_amount == (2200 * 15) // 100


def test_exactly_official_hours_is_not_overtime():
    result = StandardSalaryCalculator().calculate(15, _config())

    assert result.raw_salary == 2300
    assert result.bonus_amount == 0


def test_extra_hours_are_paid_as_bonus():
    result = StandardSalaryCalculator().calculate(24, _config())

    assert result.raw_salary == 2000 + 15 * 20
    assert result.bonus_amount == 9 * 30
    # 2570 * 15 / 100 = 385.5 -> truncated
    assert result.tax_amount == 385
    assert result.total_earning == 2300 + 270 - 385


def test_tax_truncates_toward_zero_for_negative_amounts():
    result = StandardSalaryCalculator().calculate(0, _config(base_salary=-105, tax_percentage=10))

    assert result.raw_salary == -105
    assert result.tax_amount == -10


def test_zero_tax_percentage():
    result = StandardSalaryCalculator().calculate(3, _config(tax_percentage=0))

    assert result.tax_amount == 0
    assert result.total_earning == result.raw_salary
