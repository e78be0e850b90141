from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.account.update_account import UpdateAccountUseCase
from ...application.use_cases.account.delete_account import DeleteAccountUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AccountProvider:
    """Account management use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            UpdateAccountUseCase,
            lambda: UpdateAccountUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            DeleteAccountUseCase,
            lambda: DeleteAccountUseCase(
                user_repository=container.get(UserRepository)
            )
        )
