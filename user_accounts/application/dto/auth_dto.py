from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request (checked by validate_register)"""
    name: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLoginRequest(BaseModel):
    """DTO for user login request (checked by validate_login)"""
    email: Optional[str] = None
    password: Optional[str] = None


class RegistrationResponse(BaseModel):
    """DTO for successful registration"""
    model_config = ConfigDict(populate_by_name=True)

    message: str = "User registered successfully"
    user_id: str = Field(alias="userId")


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    token: str


class TokenClaims(BaseModel):
    """Identity decoded from a verified bearer token"""
    id: str
    email: str
    name: str
