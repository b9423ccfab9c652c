from typing import Any, Dict, List, Optional

from fastapi import status


class BaseAPIError(Exception):
    """Base exception class for API errors"""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def to_content(self) -> Dict[str, Any]:
        return {"message": self.message}


class AuthenticationError(BaseAPIError):
    """Base class for authentication-related errors"""
    def __init__(
        self,
        message: str = "Authentication failed",
        status_code: int = status.HTTP_401_UNAUTHORIZED,
        error_code: str = "AUTH_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status_code,
            error_code=error_code,
            details=details
        )


class MissingTokenError(AuthenticationError):
    """Raised when a protected request carries no bearer token"""
    def __init__(self, message: str = "Access Denied: No Token Provided"):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            error_code="TOKEN_MISSING"
        )


class TokenError(AuthenticationError):
    """Raised for any malformed, forged or expired token.

    Callers get the same message whatever the reason; the reason itself is
    kept in ``details`` for server-side logging only.
    """
    def __init__(self, message: str = "Invalid Token", reason: Optional[str] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="TOKEN_INVALID",
            details={"reason": reason} if reason else None
        )


class InvalidCredentialsError(AuthenticationError):
    """Raised when a login email/password pair does not match"""
    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="INVALID_CREDENTIALS"
        )


class DuplicateResourceError(BaseAPIError):
    """Raised when attempting to create a duplicate resource"""
    def __init__(self, message: str = "Resource already exists"):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="DUPLICATE_RESOURCE"
        )


class ValidationFailed(BaseAPIError):
    """Raised when input validation fails; carries every violation found"""
    def __init__(self, errors: List[Dict[str, Any]], message: str = "Validation error"):
        self.errors = errors
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="VALIDATION_ERROR",
            details={"errors": errors}
        )

    def to_content(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class InternalServerError(BaseAPIError):
    """Generic failure returned in place of unexpected exceptions"""
    def __init__(self, message: str = "Internal server error"):
        super().__init__(message=message)
