from __future__ import annotations

import numpy as np

from ..commands.dispatcher import CommandDispatcher, int_arg
from ..container import Container


def _labels(values) -> str:
    return " ".join(str(v) for v in values)


def format_average(value: float) -> str:
    """Shortest single-precision form: 0.1, 0.033333335, 1."""
    return np.format_float_positional(np.float32(value), unique=True, trim="-")


def register(dispatcher: CommandDispatcher, container: Container) -> None:
    reports = container.report_service

    @dispatcher.command("report_total_hours_per_day")
    def report_total_hours_per_day(args: list[str]) -> list[str]:
        report = reports.total_hours_per_day(
            start_day=int_arg(args, 0, "start day"),
            end_day=int_arg(args, 1, "end day"),
        )
        lines = [f"Day #{day}: {hours}" for day, hours in report.totals]
        lines += [
            f"Day(s) with Max Working Hours: {_labels(report.extremes.max_labels)}",
            f"Day(s) with Min Working Hours: {_labels(report.extremes.min_labels)}",
            "---",
        ]
        return lines

    @dispatcher.command("report_employee_per_hour")
    def report_employee_per_hour(args: list[str]) -> list[str]:
        report = reports.employees_per_hour(
            start_hour=int_arg(args, 0, "start hour"),
            end_hour=int_arg(args, 1, "end hour"),
        )
        lines = [f"{hour}-{hour + 1}: {format_average(average)}" for hour, average in report.averages]
        lines += [
            "---",
            f"Period(s) with Max Working Employees: {_labels(f'{h}-{h + 1}' for h in report.extremes.max_labels)}",
            f"Period(s) with Min Working Employees: {_labels(f'{h}-{h + 1}' for h in report.extremes.min_labels)}",
        ]
        return lines
