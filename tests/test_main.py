from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from src.payroll_system.payroll_system import main as main_module

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(main_module, "configure_logging", lambda level: None)


def test_main_answers_commands_and_exits_cleanly(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("report_employee_salary 9999\nreport_team_salary 2\n"))

    code = main_module.main(["--data-dir", str(DATA_DIR)])

    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "EMPLOYEE_NOT_FOUND"
    assert lines[1:4] == ["ID: 2", "Head ID: 3", "Head Name: Mina Rahimi"]


def test_main_with_empty_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert main_module.main(["--data-dir", str(DATA_DIR)]) == 0
    assert capsys.readouterr().out == ""


def test_missing_salary_config_aborts_startup(tmp_path, monkeypatch, capsys):
    for name in ("employees.csv", "working_hours.csv", "teams.csv"):
        (tmp_path / name).write_text((DATA_DIR / name).read_text(encoding="utf-8"), encoding="utf-8")
    (tmp_path / "salary_configs.csv").write_text(
        "level,base,ph,peh,official,tax\njunior,1000,10,15,10,10\n", encoding="utf-8"
    )
    monkeypatch.setattr("sys.stdin", io.StringIO("report_salaries\n"))

    assert main_module.main(["--data-dir", str(tmp_path)]) == 1
    assert capsys.readouterr().out == ""


def test_missing_files_still_start(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("report_salaries\nshow_salary_config junior\n"))

    assert main_module.main(["--data-dir", str(tmp_path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["INVALID_LEVEL"]


def test_settings_module_is_logged_after_logging_is_configured(monkeypatch, caplog):
    calls = []
    monkeypatch.setattr(main_module, "configure_logging", lambda level: calls.append(level))
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    caplog.set_level(logging.DEBUG)

    assert main_module.main(["--data-dir", str(DATA_DIR), "--log-level", "DEBUG"]) == 0

    assert calls == ["DEBUG"]
    assert "settings=config.testing" in caplog.text
