from .update_account import UpdateAccountUseCase
from .delete_account import DeleteAccountUseCase

__all__ = ["UpdateAccountUseCase", "DeleteAccountUseCase"]
