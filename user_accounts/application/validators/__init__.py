from .auth_validator import (
    validate_register,
    validate_login,
    validate_update,
    parse_dob,
    is_valid_email,
    is_strong_password,
)

__all__ = [
    "validate_register",
    "validate_login",
    "validate_update",
    "parse_dob",
    "is_valid_email",
    "is_strong_password",
]
