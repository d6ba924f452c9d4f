"""
Error Definitions

Defines custom exception classes used in the application for unified error handling.
"""

from typing import Any, Optional


class AppError(Exception):
    """
    Application Base Exception

    Base class for all custom exceptions, containing error message, type, and code.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "app_error",
        code: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
        status_code: int = 500,
    ):
        """
        Initialize exception

        Args:
            message: Error message
            error_type: Error type
            code: Error code
            details: Extra error details
            status_code: HTTP status code
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.code = code
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """
        Convert to dictionary format (for API response)

        The browser client reads `message` directly, so it sits at the top level.

        Args:
            include_details: Whether to include the extra details

        Returns:
            dict: Error information dictionary
        """
        result: dict[str, Any] = {
            "message": self.message,
            "type": self.error_type,
            "code": self.code,
        }
        if include_details and self.details:
            result["details"] = self.details
        return result


class ValidationError(AppError):
    """
    Parameter Validation Error

    Raised when a required field or query parameter is missing or malformed.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        code: str = "validation_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="validation_error",
            code=code,
            details=details,
            status_code=400,
        )


class NotFoundError(AppError):
    """
    Resource Not Found Error

    Raised when the requested keyword does not exist.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        code: str = "not_found",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="not_found_error",
            code=code,
            details=details,
            status_code=404,
        )


class MethodNotAllowedError(AppError):
    """
    Method Not Allowed Error

    Raised when the resource is called with an unsupported HTTP verb.
    """

    def __init__(
        self,
        message: str = "Method Not Allowed",
        code: str = "method_not_allowed",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="method_not_allowed_error",
            code=code,
            details=details,
            status_code=405,
        )


class InfrastructureError(AppError):
    """
    Infrastructure Error

    Raised when the storage backend is unreachable or a database operation fails.
    """

    def __init__(
        self,
        message: str = "Server Error",
        code: str = "infrastructure_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="infrastructure_error",
            code=code,
            details=details,
            status_code=500,
        )
