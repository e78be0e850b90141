from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .account import (
    UpdateAccountUseCase,
    DeleteAccountUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "UpdateAccountUseCase",
    "DeleteAccountUseCase",
]
