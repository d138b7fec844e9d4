"""
Validation-related domain exceptions.
"""


class ValidationError(Exception):
    """Base exception for invalid caller input."""

    pass


class RequiredFieldError(ValidationError):
    """Raised when required field is missing."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' is missing")


class InvalidFormatError(ValidationError):
    """Raised when field format is invalid."""

    def __init__(self, field_name: str, expected_format: str):
        self.field_name = field_name
        self.expected_format = expected_format
        super().__init__(
            f"Field '{field_name}' has invalid format, expected: {expected_format}"
        )


class InvalidRouteParameterError(ValidationError):
    """Raised when a route generation parameter is out of range."""

    def __init__(self, parameter: str, value, constraint: str):
        self.parameter = parameter
        self.value = value
        self.constraint = constraint
        super().__init__(f"Invalid {parameter}={value!r}: {constraint}")


class JobNotFoundError(ValidationError):
    """Raised when a job does not exist."""

    def __init__(self, job_id):
        self.job_id = job_id
        super().__init__(f"Job {job_id} not found")


class TechnicianNotFoundError(ValidationError):
    """Raised when a technician does not exist."""

    def __init__(self, technician_id):
        self.technician_id = technician_id
        super().__init__(f"Technician {technician_id} not found")
