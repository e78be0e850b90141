# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....core.exceptions import InvalidCredentialsError
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest, TokenResponse
from ...validators.auth_validator import validate_login

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> TokenResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            TokenResponse with a signed bearer token

        Raises:
            ValidationError: If the payload is invalid
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        validate_login(request)

        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        password_ok = await asyncio.to_thread(verify_password, request.password, user.hashed_password)
        if not password_ok:
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        token = create_jwt_token({
            UserFields.ID: user.id or "",
            UserFields.EMAIL: user.email,
            UserFields.NAME: user.name,
        })
        logger.info("User %s logged in", user.id)

        return TokenResponse(token=token)
