class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ScheduleRangeError(ValidationError):
    """Raised when a day or hour falls outside the schedule grid."""


class RecordParseError(DomainError):
    """Raised when a row of an input table cannot be parsed."""

    def __init__(self, message: str, *, source: str = "", line: int = 0):
        self.source = source
        self.line = line
        if source:
            message = f"{source}:{line}: {message}" if line else f"{source}: {message}"
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a looked-up record does not exist."""


class EmployeeNotFoundError(NotFoundError):
    pass


class TeamNotFoundError(NotFoundError):
    pass


class SalaryConfigNotFoundError(NotFoundError):
    pass


class MissingSalaryConfigError(DomainError):
    """Raised when an employee's level has no salary config during derivation.

    This is a data integrity problem and aborts startup.
    """


class EmptyTeamError(DomainError):
    """Raised when a per-member average is requested for a team with no members."""
