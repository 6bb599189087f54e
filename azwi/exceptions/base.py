"""
Base exception classes for azwi.

All custom exceptions should inherit from AppError so that the workflow
engine can report any phase failure the same way.
"""
from typing import Optional


class AppError(Exception):
    """
    Base exception for all azwi errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional error details (optional)
    """

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[dict] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for structured output"""
        result = {
            "error": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class ConflictError(AppError):
    """Resource conflict - already exists"""

    def __init__(self, message: str = "Resource conflict"):
        super().__init__(message, "CONFLICT")


class ValidationError(AppError):
    """Input validation failed"""

    def __init__(self, message: str = "Validation failed", field: str = None):
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ServiceError(AppError):
    """External service error"""

    def __init__(self, message: str = "Service error", service_name: str = None):
        details = {"service": service_name} if service_name else {}
        super().__init__(message, "SERVICE_ERROR", details)
