class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimeFormat(ValidationError):
    """Raised when a wall-clock value is not a 24-hour "HH:MM" string."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid time {value!r}, expected HH:MM (24-hour)")


class AttendanceError(DomainError):
    """Base class for clock-in/clock-out rejections."""


class OutOfRange(AttendanceError):
    def __init__(self, location: str, radius: float, distance: float):
        self.location = location
        self.radius = radius
        self.distance = distance
        super().__init__(
            f"You are too far from your assigned location {location}: "
            f"{distance:.0f} m away, clock-in allowed within {radius:.0f} m"
        )


class NoShiftAssigned(AttendanceError):
    def __init__(self, employee_id: str, work_date):
        self.employee_id = employee_id
        self.work_date = work_date
        super().__init__(f"No shift assigned to {employee_id} on {work_date}")


class UnknownLocation(AttendanceError):
    def __init__(self, location: str):
        self.location = location
        super().__init__(f"Shift location {location!r} is not a known work site")


class NoOpenSession(AttendanceError):
    def __init__(self, employee_id: str, work_date):
        self.employee_id = employee_id
        self.work_date = work_date
        super().__init__(f"{employee_id} has not clocked in on {work_date}")


class AlreadyCompleted(AttendanceError):
    def __init__(self, employee_id: str, work_date, message: str | None = None):
        self.employee_id = employee_id
        self.work_date = work_date
        super().__init__(message or f"Attendance for {employee_id} on {work_date} is already completed")


class InvalidCheckinToken(AttendanceError):
    """Raised when a QR check-in token is missing, malformed or expired."""


class MissingSalaryBasis(DomainError):
    def __init__(self, employee_id: str, position: str | None = None):
        self.employee_id = employee_id
        self.position = position
        super().__init__(
            f"No salary basis for {employee_id}: no monthly salary set and no default for position {position!r}"
        )
