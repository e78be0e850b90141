from .auth_dto import (
    UserRegistrationRequest,
    UserLoginRequest,
    RegistrationResponse,
    TokenResponse,
    TokenClaims,
)
from .user_dto import (
    UserResponse,
    UserEnvelope,
    UserUpdateRequest,
    AccountUpdatedResponse,
    MessageResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "RegistrationResponse",
    "TokenResponse",
    "TokenClaims",
    "UserResponse",
    "UserEnvelope",
    "UserUpdateRequest",
    "AccountUpdatedResponse",
    "MessageResponse",
]
