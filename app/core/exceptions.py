"""
Custom application exceptions.
"""

from typing import Any, Optional

from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base application exception."""

    def __init__(self, detail: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(status_code=status_code, detail=detail)


class ValidationException(AppException):
    """Caller input is missing or invalid. Optionally echoes the offending payload."""

    def __init__(self, detail: str = "Invalid request", received: Optional[Any] = None):
        super().__init__(detail=detail, status_code=status.HTTP_400_BAD_REQUEST)
        self.received = received


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(detail=detail, status_code=status.HTTP_404_NOT_FOUND)


class UnauthorizedException(AppException):
    """Unauthorized access exception."""

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(detail=detail, status_code=status.HTTP_401_UNAUTHORIZED)


class StoreException(AppException):
    """The backing key-value store is unreachable or an operation on it failed."""

    def __init__(self, detail: str = "Key-value store unavailable"):
        super().__init__(detail=detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
