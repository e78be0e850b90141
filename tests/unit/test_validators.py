"""
Unit tests for user_accounts.application.validators
"""
from datetime import date

import pytest
from user_accounts.application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest
from user_accounts.application.dto.user_dto import UserUpdateRequest
from user_accounts.application.validators import (
    is_strong_password,
    parse_dob,
    validate_login,
    validate_register,
    validate_update,
)
from user_accounts.core.exceptions import ValidationError


def _registration(**overrides):
    data = {
        "name": "Alice Smith",
        "gender": "female",
        "dob": "1990-01-01",
        "email": "a@b.com",
        "password": "Str0ng!Pass",
    }
    data.update(overrides)
    return UserRegistrationRequest(**data)


class TestValidateRegister:
    """Tests for validate_register"""

    def test_valid_payload_passes(self):
        validate_register(_registration())

    @pytest.mark.parametrize(
        "field, message",
        [
            ("name", "Name is required"),
            ("gender", "Gender must be Male, Female, or Other"),
            ("dob", "Date of birth is required"),
            ("email", "Email is required"),
            ("password", "Password is required"),
        ],
    )
    def test_missing_field_names_the_field(self, field, message):
        with pytest.raises(ValidationError) as exc_info:
            validate_register(_registration(**{field: None}))
        assert exc_info.value.user_message == message
        assert exc_info.value.field == field

    def test_blank_name_is_required(self):
        with pytest.raises(ValidationError, match="Name is required"):
            validate_register(_registration(name="   "))

    def test_short_name(self):
        with pytest.raises(ValidationError, match="at least 3 characters"):
            validate_register(_registration(name="Al"))

    def test_gender_is_case_sensitive(self):
        with pytest.raises(ValidationError, match="Gender"):
            validate_register(_registration(gender="Female"))

    @pytest.mark.parametrize("dob", ["1990-02-30", "01-01-1990", "yesterday", "1990-13-01"])
    def test_invalid_dob(self, dob):
        with pytest.raises(ValidationError, match="valid date"):
            validate_register(_registration(dob=dob))

    @pytest.mark.parametrize("email", ["not-an-email", "a@", "@b.com", "a b@c.com"])
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError, match="Invalid email format"):
            validate_register(_registration(email=email))

    def test_weak_password(self):
        with pytest.raises(ValidationError, match="Password must be strong"):
            validate_register(_registration(password="password"))

    def test_first_failing_check_wins(self):
        """Checks short-circuit in field order: name before email."""
        with pytest.raises(ValidationError) as exc_info:
            validate_register(_registration(name="Al", email="bad", password="weak"))
        assert exc_info.value.field == "name"


class TestValidateLogin:
    """Tests for validate_login"""

    def test_weak_password_is_accepted(self):
        validate_login(UserLoginRequest(email="a@b.com", password="old"))

    def test_missing_email(self):
        with pytest.raises(ValidationError, match="Email is required"):
            validate_login(UserLoginRequest(password="whatever"))

    def test_invalid_email(self):
        with pytest.raises(ValidationError, match="Invalid email format"):
            validate_login(UserLoginRequest(email="nope", password="whatever"))

    def test_missing_password(self):
        with pytest.raises(ValidationError, match="Password is required"):
            validate_login(UserLoginRequest(email="a@b.com", password=""))


class TestValidateUpdate:
    """Tests for validate_update"""

    def test_empty_update_passes(self):
        validate_update(UserUpdateRequest())

    def test_blank_password_passes(self):
        validate_update(UserUpdateRequest(password="  "))

    def test_weak_password_is_not_checked(self):
        validate_update(UserUpdateRequest(password="short"))

    def test_supplied_fields_are_checked(self):
        with pytest.raises(ValidationError, match="Gender"):
            validate_update(UserUpdateRequest(name="Alice Smith", gender="robot"))


class TestHelpers:
    """Tests for parse_dob and is_strong_password"""

    def test_parse_dob_formats(self):
        assert parse_dob("1990-01-01") == date(1990, 1, 1)
        assert parse_dob("1990/1/2") == date(1990, 1, 2)
        assert parse_dob("1990-01/02") is None
        assert parse_dob("") is None

    @pytest.mark.parametrize(
        "password, expected",
        [
            ("Str0ng!Pass", True),
            ("Sh0rt!", False),
            ("str0ng!pass", False),
            ("STR0NG!PASS", False),
            ("Strong!Pass", False),
            ("Str0ngPass1", False),
            ("Str٣ng!Pass", False),
        ],
    )
    def test_is_strong_password(self, password, expected):
        assert is_strong_password(password) is expected
