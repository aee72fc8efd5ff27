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


# --- 400: malformed input and domain rule violations ---

class ValidationError(AppException):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details
        )


class InvalidArgumentError(ValidationError):
    def __init__(self, message: str = "Days must be a positive number"):
        super().__init__(message)
        self.error_code = "INVALID_ARGUMENT"


class InsufficientBalanceError(AppException):
    def __init__(self, requested: int, available: int):
        super().__init__(
            message=f"Not enough vacation days available (requested {requested}, available {available})",
            status_code=400,
            error_code="INSUFFICIENT_BALANCE",
            details={"requested": requested, "available": available}
        )


class LeaveConflictError(AppException):
    def __init__(self, message: str = "The requested dates overlap an existing leave"):
        super().__init__(
            message=message,
            status_code=400,
            error_code="LEAVE_CONFLICT"
        )


class DuplicateResourceError(AppException):
    def __init__(self, message: str):
        super().__init__(
            message=message,
            status_code=400,
            error_code="DUPLICATE_RESOURCE"
        )


class DuplicateUsernameError(DuplicateResourceError):
    def __init__(self, username: str):
        super().__init__(f"Username '{username}' is already in use")


class ResourceNotFoundError(AppException):
    def __init__(self, resource: str, identifier: Any = None):
        message = f"{resource} not found" if identifier is None else f"{resource} not found: {identifier}"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND"
        )


class ConcurrentModificationError(AppException):
    def __init__(self, message: str = "The resource was modified by another request, retry the operation"):
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONCURRENT_MODIFICATION"
        )


# --- 401 / 403 ---

class AuthenticationError(AppException):
    def __init__(self, message: str = "Could not validate credentials", error_code: str = "AUTH_FAILED"):
        super().__init__(
            message=message,
            status_code=401,
            error_code=error_code
        )


class UserNotFoundError(AuthenticationError):
    def __init__(self, message: str = "User not found or disabled"):
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    def __init__(self, message: str = "Incorrect username or password"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, error_code="INVALID_TOKEN")


class TokenExpiredError(AuthenticationError):
    def __init__(self, message: str = "Token expired"):
        super().__init__(message, error_code="TOKEN_EXPIRED")


class AccessDeniedError(AppException):
    """Custom permission error. Named AccessDeniedError to avoid shadowing Python's built-in PermissionError."""
    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(
            message=message,
            status_code=403,
            error_code="PERMISSION_DENIED"
        )


# --- Programming errors (never mapped to a 4xx) ---

class NullSubjectError(ValueError):
    """Raised when a token check is asked to compare against a missing subject."""
