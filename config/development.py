import os

DATA_DIR = os.getenv("PAYROLL_DATA_DIR", "./data")

EMPLOYEES_FILE = os.getenv("EMPLOYEES_FILE", "employees.csv")
WORKING_HOURS_FILE = os.getenv("WORKING_HOURS_FILE", "working_hours.csv")
TEAMS_FILE = os.getenv("TEAMS_FILE", "teams.csv")
SALARY_CONFIGS_FILE = os.getenv("SALARY_CONFIGS_FILE", "salary_configs.csv")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
