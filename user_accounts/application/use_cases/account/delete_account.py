# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class DeleteAccountUseCase:
    """Use case for deleting the authenticated user's account"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> None:
        """
        Delete the user's record

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        deleted = await self.user_repository.delete(user_id)
        if not deleted:
            raise UserNotFoundError(user_id)
        logger.info("Deleted account %s", user_id)
