class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str = "Resource", id: str = ""):
        super().__init__(f"{resource} not found: {id}" if id else f"{resource} not found")


class ValidationError(AppError):
    """Raised when a document is missing a required field."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"{field} must not be empty")
