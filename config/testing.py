import os

DATA_DIR = os.getenv("PAYROLL_DATA_DIR", "./tests/data")

EMPLOYEES_FILE = "employees.csv"
WORKING_HOURS_FILE = "working_hours.csv"
TEAMS_FILE = "teams.csv"
SALARY_CONFIGS_FILE = "salary_configs.csv"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
