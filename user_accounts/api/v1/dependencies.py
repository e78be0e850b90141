# Standard library imports
from typing import Optional

# External package imports
from fastapi import Header, HTTPException, status
from pydantic import ValidationError as PydanticValidationError

# Local application imports
from ...application.dto.auth_dto import TokenClaims
from ...core.exceptions import InvalidTokenError
from ...core.security import decode_jwt_token, extract_bearer_token


async def get_token_claims(
    authorization: Optional[str] = Header(default=None),
) -> TokenClaims:
    """
    FastAPI dependency that authenticates the request from its bearer token

    Every protected route depends on this; the handler receives the
    decoded identity without a database lookup.

    Args:
        authorization: Raw Authorization header

    Returns:
        TokenClaims with the user's id, email and name

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided"
        )

    token = extract_bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )

    try:
        payload = decode_jwt_token(token)
        return TokenClaims.model_validate(payload)
    except (InvalidTokenError, PydanticValidationError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )
