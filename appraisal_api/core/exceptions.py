from typing import Any, Dict, Optional

class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

class NotFoundError(AppException):
    def __init__(self, message: str = "Entity not found"):
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND"
        )

class ConflictError(AppException):
    def __init__(self, message: str = "Entity already exists"):
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT"
        )

class BadRequestError(AppException):
    """Raised when a referenced band or review id cannot be resolved."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=400,
            error_code="BAD_REQUEST",
            details=details
        )

class NotModifiedError(AppException):
    """The entity was believed to exist but the write affected zero rows."""
    def __init__(self, message: str):
        super().__init__(
            message=message,
            status_code=304,
            error_code="NOT_MODIFIED"
        )

class StorageError(AppException):
    """Opaque wrapper around database failures. Driver details stay in the logs."""
    def __init__(self, message: str = "Database error"):
        super().__init__(
            message=message,
            status_code=500,
            error_code="INTERNAL_ERROR"
        )
