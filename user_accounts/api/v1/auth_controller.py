# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import (
    UserRegistrationRequest,
    UserLoginRequest,
    RegistrationResponse,
    TokenResponse,
    TokenClaims,
)
from ...application.dto.user_dto import UserEnvelope
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...core.exceptions import AuthError, UserNotFoundError, ValidationError
from ...di.container import get_container
from .dependencies import get_token_claims


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> RegistrationResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        RegistrationResponse with the new user's ID
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        return await register_use_case.execute(request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )


@router.post("/login", response_model=TokenResponse)
async def login_user(request: UserLoginRequest) -> TokenResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        TokenResponse with access token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        return await login_use_case.execute(request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    except AuthError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exception.user_message
        )


@router.get("/me", response_model=UserEnvelope)
async def get_me(claims: TokenClaims = Depends(get_token_claims)) -> UserEnvelope:
    """
    Get current authenticated user information

    Args:
        claims: Identity from the verified bearer token

    Returns:
        UserEnvelope with user information (no password)
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        user = await get_current_user_use_case.execute(claims.id)
    except UserNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.user_message
        )
    return UserEnvelope(user=user)
