"""
Shared infrastructure for Toolshelf backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository with store error translation

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import create_supabase_client
from .exceptions import (
    ToolshelfError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    UnavailableError,
    UnexpectedError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "create_supabase_client",
    "ToolshelfError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "UnavailableError",
    "UnexpectedError",
    "AuthenticatedUser",
]
