"""
Input validation for account payloads.

Each validator checks fields in a fixed order and raises ValidationError
for the first failing check. Validators have no side effects.
"""

# Standard library imports
import re
from datetime import date
from typing import Optional

# External package imports
from email_validator import EmailNotValidError, validate_email

# Local application imports
from ...core.exceptions import ValidationError
from ...domain.constants import UserFields
from ...domain.models.user import Gender
from ..dto.auth_dto import UserLoginRequest, UserRegistrationRequest
from ..dto.user_dto import UserUpdateRequest


MIN_NAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 8

VALID_GENDERS = frozenset(gender.value for gender in Gender)

_DATE_PATTERN = re.compile(r"^([0-9]{4})([-/])([0-9]{1,2})\2([0-9]{1,2})$")
_SYMBOL_PATTERN = re.compile(r"[-#!$@£%^&*()_+|~=`{}\[\]:\";'<>?,./\\ ]")


def parse_dob(value: Optional[str]) -> Optional[date]:
    """
    Parse a YYYY-MM-DD (or YYYY/MM/DD) string into a date.

    Returns None if the string is not a real calendar date.
    """
    if not value:
        return None
    match = _DATE_PATTERN.match(value.strip())
    if match is None:
        return None
    year, _, month, day = match.groups()
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_strong_password(value: str) -> bool:
    return (
        len(value) >= MIN_PASSWORD_LENGTH
        and re.search(r"[a-z]", value) is not None
        and re.search(r"[A-Z]", value) is not None
        and re.search(r"[0-9]", value) is not None
        and _SYMBOL_PATTERN.search(value) is not None
    )


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


# -----------------------------------------------------------------------------
# Field checks
# -----------------------------------------------------------------------------


def _check_name(name: Optional[str]) -> None:
    if _is_blank(name):
        raise ValidationError("Name is required", field=UserFields.NAME)
    if len(name.strip()) < MIN_NAME_LENGTH:
        raise ValidationError(
            f"Name must be at least {MIN_NAME_LENGTH} characters long", field=UserFields.NAME
        )


def _check_gender(gender: Optional[str]) -> None:
    if not gender or gender not in VALID_GENDERS:
        raise ValidationError("Gender must be Male, Female, or Other", field=UserFields.GENDER)


def _check_dob(dob: Optional[str]) -> None:
    if _is_blank(dob):
        raise ValidationError("Date of birth is required", field=UserFields.DOB)
    if parse_dob(dob) is None:
        raise ValidationError(
            "Date of birth must be a valid date (YYYY-MM-DD)", field=UserFields.DOB
        )


def _check_email(email: Optional[str]) -> None:
    if _is_blank(email):
        raise ValidationError("Email is required", field=UserFields.EMAIL)
    if not is_valid_email(email):
        raise ValidationError("Invalid email format", field=UserFields.EMAIL)


def _check_password_present(password: Optional[str]) -> None:
    if not password:
        raise ValidationError("Password is required", field=UserFields.PASSWORD)


# -----------------------------------------------------------------------------
# Payload validators
# -----------------------------------------------------------------------------


def validate_register(request: UserRegistrationRequest) -> None:
    """
    Validate a registration payload

    Raises:
        ValidationError: For the first failing check
    """
    _check_name(request.name)
    _check_gender(request.gender)
    _check_dob(request.dob)
    _check_email(request.email)
    _check_password_present(request.password)
    if not is_strong_password(request.password):
        raise ValidationError(
            "Password must be strong (min 8 chars, include uppercase, lowercase, number & symbol)",
            field=UserFields.PASSWORD,
        )


def validate_login(request: UserLoginRequest) -> None:
    """
    Validate a login payload.

    Password strength is not checked here so that passwords accepted
    under an older policy still work.

    Raises:
        ValidationError: For the first failing check
    """
    _check_email(request.email)
    _check_password_present(request.password)


def validate_update(request: UserUpdateRequest) -> None:
    """
    Validate the fields supplied in an account update

    Omitted fields are not checked. The password is not strength-checked;
    a blank password means "keep the current one".

    Raises:
        ValidationError: For the first failing check
    """
    if request.name is not None:
        _check_name(request.name)
    if request.gender is not None:
        _check_gender(request.gender)
    if request.dob is not None:
        _check_dob(request.dob)
    if request.email is not None:
        _check_email(request.email)
