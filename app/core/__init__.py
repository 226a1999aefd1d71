"""Core module - config, database, logging, exceptions."""

from app.core.config import get_settings, Settings
from app.core.database import Database
from app.core.exceptions import (
    AppException,
    ValidationException,
    NotFoundException,
    UnauthorizedException,
    StoreException,
)

__all__ = [
    "get_settings",
    "Settings",
    "Database",
    "AppException",
    "ValidationException",
    "NotFoundException",
    "UnauthorizedException",
    "StoreException",
]
