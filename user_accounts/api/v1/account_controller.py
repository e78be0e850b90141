# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import TokenClaims
from ...application.dto.user_dto import (
    UserEnvelope,
    UserUpdateRequest,
    AccountUpdatedResponse,
    MessageResponse,
)
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.use_cases.account.update_account import UpdateAccountUseCase
from ...application.use_cases.account.delete_account import DeleteAccountUseCase
from ...core.exceptions import RepositoryError, UserNotFoundError, ValidationError
from ...di.container import get_container
from .dependencies import get_token_claims


logger = logging.getLogger(__name__)

router = APIRouter(tags=["account"])


@router.get("", response_model=UserEnvelope)
async def get_account(claims: TokenClaims = Depends(get_token_claims)) -> UserEnvelope:
    """
    Get the authenticated user's account details

    Same behaviour as GET /api/me; kept for existing clients.
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


@router.put("", response_model=AccountUpdatedResponse)
async def update_account(
    request: UserUpdateRequest,
    claims: TokenClaims = Depends(get_token_claims),
) -> AccountUpdatedResponse:
    """
    Update the authenticated user's account

    Args:
        request: Fields to change; omitted fields are kept
        claims: Identity from the verified bearer token

    Returns:
        AccountUpdatedResponse with the updated user (no password)
    """
    container = get_container()
    update_account_use_case = container.get(UpdateAccountUseCase)

    try:
        user = await update_account_use_case.execute(user_id=claims.id, request=request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    except UserNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.user_message
        )
    except RepositoryError as exception:
        logger.error("Error updating account %s", claims.id, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=exception.user_message
        ) from exception
    return AccountUpdatedResponse(user=user)


@router.delete("", response_model=MessageResponse)
async def delete_account(claims: TokenClaims = Depends(get_token_claims)) -> MessageResponse:
    """
    Delete the authenticated user's account

    Args:
        claims: Identity from the verified bearer token

    Returns:
        MessageResponse confirming deletion
    """
    container = get_container()
    delete_account_use_case = container.get(DeleteAccountUseCase)

    try:
        await delete_account_use_case.execute(claims.id)
    except UserNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.user_message
        )
    except RepositoryError as exception:
        logger.error("Error deleting account %s", claims.id, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=exception.user_message
        ) from exception
    return MessageResponse(message="Account deleted successfully")
