# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import UserNotFoundError
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for loading the authenticated user's own record"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        """
        Get current user by the ID from a verified token

        Args:
            user_id: ID claim of the bearer token

        Returns:
            UserResponse with user information (no password)

        Raises:
            UserNotFoundError: If the user was deleted after the token was issued
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        return UserResponse.from_user(user)
