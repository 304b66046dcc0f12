from __future__ import annotations

from ..commands.dispatcher import CommandDispatcher, int_arg, str_arg
from ..container import Container
from ..core.constants import EMPLOYEE_NOT_FOUND, INVALID_LEVEL, OK, TEAM_NOT_FOUND
from ..core.exceptions import EmployeeNotFoundError, SalaryConfigNotFoundError, TeamNotFoundError


def register(dispatcher: CommandDispatcher, container: Container) -> None:
    payroll = container.payroll_service

    @dispatcher.command("report_salaries")
    def report_salaries(args: list[str]) -> list[str]:
        lines = []
        for row in payroll.list_salaries():
            lines += [
                f"ID: {row.employee_id}",
                f"Name: {row.name}",
                f"Total Working Hours: {row.total_working_hours}",
                f"Total Earning: {row.total_earning}",
                "---",
            ]
        return lines

    @dispatcher.command("report_employee_salary")
    def report_employee_salary(args: list[str]) -> list[str]:
        employee_id = int_arg(args, 0, "employee id")
        try:
            e = payroll.get_employee(employee_id)
        except EmployeeNotFoundError:
            return [EMPLOYEE_NOT_FOUND]

        return [
            f"ID: {e.employee_id}",
            f"Name: {e.name}",
            f"Age: {e.age}",
            f"Level: {e.level.value}",
            f"Team ID: {e.team_id if e.team_id is not None else 'N/A'}",
            f"Total Working Hours: {e.total_working_hours}",
            f"Absent Days: {e.absent_days}",
            f"Salary: {e.raw_salary}",
            f"Bonus: {e.bonus_amount}",
            f"Tax: {e.tax_amount}",
            f"Total Earning: {e.total_earning}",
        ]

    @dispatcher.command("report_team_salary")
    def report_team_salary(args: list[str]) -> list[str]:
        team_id = int_arg(args, 0, "team id")
        try:
            report = payroll.get_team_report(team_id)
        except TeamNotFoundError:
            return [TEAM_NOT_FOUND]

        lines = [
            f"ID: {report.team_id}",
            f"Head ID: {report.head_id}",
            f"Head Name: {report.head_name}",
            f"Team Total Working Hours: {report.total_working_hours}",
            f"Average Member Working Hours: {report.average_member_working_hours}",
            "---",
        ]
        for member in report.members:
            lines += [f"Member ID: {member.employee_id}", f"Total Earning: {member.total_earning}"]
        lines.append("---")
        return lines

    @dispatcher.command("show_salary_config")
    def show_salary_config(args: list[str]) -> list[str]:
        level = str_arg(args, 0, "level")
        try:
            config = payroll.get_salary_config(level)
        except SalaryConfigNotFoundError:
            return [INVALID_LEVEL]

        return [
            f"Base Salary: {config.base_salary}",
            f"Salary Per Hour: {config.salary_per_hour}",
            f"Salary Per Extra Hour: {config.salary_per_extra_hour}",
            f"Official Working Hours: {config.official_working_hours}",
            f"Tax Percentage: {config.tax_percentage}",
        ]

    @dispatcher.command("update_salary_parameters")
    def update_salary_parameters(args: list[str]) -> list[str]:
        level = str_arg(args, 0, "level")
        values = dict(
            base_salary=int_arg(args, 1, "base salary"),
            salary_per_hour=int_arg(args, 2, "salary per hour"),
            salary_per_extra_hour=int_arg(args, 3, "salary per extra hour"),
            official_working_hours=int_arg(args, 4, "official working hours"),
            tax_percentage=int_arg(args, 5, "tax percentage"),
        )
        try:
            payroll.update_salary_config(level, **values)
        except SalaryConfigNotFoundError:
            return [INVALID_LEVEL]
        return [OK]
