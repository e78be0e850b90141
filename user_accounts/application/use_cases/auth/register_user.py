# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User, Gender
from ....core.exceptions import UserAlreadyExistsError
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest, RegistrationResponse
from ...validators.auth_validator import validate_register, parse_dob

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> RegistrationResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            RegistrationResponse with the new user's ID

        Raises:
            ValidationError: If the payload is invalid
            UserAlreadyExistsError: If user with email already exists
        """
        validate_register(request)

        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise UserAlreadyExistsError(request.email)

        # bcrypt is CPU-bound; keep it off the event loop
        hashed_password = await asyncio.to_thread(hash_password, request.password)

        new_user = User(
            id=None,  # Will be set by repository
            name=request.name.strip(),
            gender=Gender(request.gender),
            dob=parse_dob(request.dob),
            email=request.email,
            hashed_password=hashed_password,
        )

        saved_user = await self.user_repository.create(new_user)
        logger.info("Registered user %s", saved_user.id)

        return RegistrationResponse(user_id=saved_user.id or "")
