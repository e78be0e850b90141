# Standard library imports
import asyncio
import logging
from typing import Any, Dict

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....domain.models.user import Gender
from ....core.exceptions import UserNotFoundError
from ....core.security import hash_password
from ...dto.user_dto import UserUpdateRequest, UserResponse
from ...validators.auth_validator import validate_update, parse_dob

logger = logging.getLogger(__name__)


class UpdateAccountUseCase:
    """Use case for partially updating the authenticated user's account"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, request: UserUpdateRequest) -> UserResponse:
        """
        Apply the supplied fields to the user's record

        The password is re-hashed only when a non-blank value is given;
        otherwise the stored hash is left untouched.

        Args:
            user_id: ID claim of the bearer token
            request: Fields to change

        Returns:
            UserResponse with the updated user (no password)

        Raises:
            ValidationError: If a supplied field is invalid
            UserAlreadyExistsError: If the new email belongs to another user
            UserNotFoundError: If the user no longer exists
        """
        validate_update(request)

        changes: Dict[str, Any] = {}
        if request.name is not None:
            changes[UserFields.NAME] = request.name.strip()
        if request.gender is not None:
            changes[UserFields.GENDER] = Gender(request.gender)
        if request.dob is not None:
            changes[UserFields.DOB] = parse_dob(request.dob)
        if request.email is not None:
            changes[UserFields.EMAIL] = request.email
        if request.password and request.password.strip():
            changes[UserFields.HASHED_PASSWORD] = await asyncio.to_thread(
                hash_password, request.password
            )

        updated_user = await self.user_repository.update(user_id, changes)
        if updated_user is None:
            raise UserNotFoundError(user_id)

        logger.info("Updated account %s (fields: %s)", user_id, ", ".join(sorted(changes)) or "none")
        return UserResponse.from_user(updated_user)
