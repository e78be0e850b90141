from datetime import date
from typing import Optional
from pydantic import BaseModel

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    gender: str
    dob: Optional[date] = None
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            name=user.name,
            gender=user.gender.value,
            dob=user.dob,
            email=user.email,
        )


class UserEnvelope(BaseModel):
    """DTO wrapping a single user"""
    user: UserResponse


class UserUpdateRequest(BaseModel):
    """DTO for account update request; omitted fields are left unchanged"""
    name: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class AccountUpdatedResponse(BaseModel):
    """DTO for successful account update"""
    message: str = "Account updated successfully"
    user: UserResponse


class MessageResponse(BaseModel):
    """DTO carrying only a message"""
    message: str
