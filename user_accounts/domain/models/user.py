# Standard library imports
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class Gender(str, Enum):
    """Accepted gender values (stored lower-case)"""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies.

    The password is only ever held as a bcrypt hash.
    """
    id: Optional[str]
    name: str
    gender: Gender
    dob: date
    email: str
    hashed_password: str

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.name or len(self.name.strip()) < 3:
            raise ValueError("Name must be at least 3 characters long")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        self.gender = Gender(self.gender)
