"""Domain failures raised by the user operations."""


class UserError(Exception):
    """A user operation violated a business rule."""

    code = "USER_ERROR"

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class UserNotFoundError(UserError):
    """No user matches the requested identifier or national ID."""

    code = "USER_NOT_FOUND"

    def __init__(self, field: str, value: str) -> None:
        label = "DNI" if field == "dni" else "ID"
        super().__init__(
            f"User not found with {label}: {value}",
            details=f"No user record has {field} '{value}'",
        )
        self.field = field
        self.value = value
