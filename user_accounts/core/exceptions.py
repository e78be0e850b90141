"""
Exception hierarchy for the user accounts service.

Use cases raise these; controllers map each kind to an HTTP status code
by type. Every exception carries an internal ``message`` and a
``user_message`` that is safe to return to clients.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class AccountError(Exception):
    """Base exception for all account service errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "Server error"
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation (400)
# -----------------------------------------------------------------------------


class ValidationError(AccountError):
    """Raised when client-supplied data is missing or malformed."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, user_message=message, details={"field": field})
        self.field = field


class UserAlreadyExistsError(ValidationError):
    """Raised when registering (or changing to) an email that is taken."""

    def __init__(self, email: str):
        super().__init__("User already exists", field="email")
        self.email = email


# -----------------------------------------------------------------------------
# Authentication (401)
# -----------------------------------------------------------------------------


class AuthError(AccountError):
    """Base exception for authentication failures."""
    pass


class InvalidTokenError(AuthError):
    """Raised when a bearer token is malformed, forged or expired."""

    def __init__(self, message: str):
        super().__init__(message, user_message="Invalid token")


class InvalidCredentialsError(AuthError):
    """Raised when an email/password pair does not match a user."""

    def __init__(self):
        super().__init__("Invalid credentials", user_message="Invalid credentials")


# -----------------------------------------------------------------------------
# Lookup (404)
# -----------------------------------------------------------------------------


class UserNotFoundError(AccountError):
    """Raised when the user referenced by a token no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            user_message="User not found",
            details={"user_id": user_id},
        )
        self.user_id = user_id


# -----------------------------------------------------------------------------
# Persistence (500)
# -----------------------------------------------------------------------------


class RepositoryError(AccountError):
    """Raised when the account store fails."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message, user_message="Server error", details={"operation": operation})
        self.operation = operation
