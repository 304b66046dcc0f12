"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DAYS_IN_PERIOD = 30
HOURS_PER_DAY = 24

EMPLOYEE_NOT_FOUND = "EMPLOYEE_NOT_FOUND"
TEAM_NOT_FOUND = "TEAM_NOT_FOUND"
INVALID_LEVEL = "INVALID_LEVEL"
INVALID_ARGUMENTS = "INVALID_ARGUMENTS"
OK = "OK"
