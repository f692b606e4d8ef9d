from typing import Any, Mapping, Optional


class MealTrackerError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field names, offending ids)
        code: machine-readable error code, defaults to the class code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Error"
    default_code = "ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(MealTrackerError):
    """Raised when a required field is missing or malformed (InvalidInput)."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "INVALID_INPUT"


class NotFoundError(MealTrackerError):
    """Raised when a referenced team member or meal entry does not exist."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class ConflictError(MealTrackerError):
    """Raised on a uniqueness violation, e.g. a duplicate employee id (DuplicateKey)."""

    http_status = 409
    default_message = "Conflict"
    default_code = "DUPLICATE_KEY"
