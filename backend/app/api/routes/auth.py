"""Auth Routes — exchange the static API key for a bearer token.

Invariants:
    - POST /auth/token returns 200 with a token for the right key, 401 otherwise
    - The 401 body never says why the key was rejected
"""

import logging

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_token_issuer
from app.schemas.auth import TokenRequest, TokenResponse
from app.services.token_issuer import TokenIssuer

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["authentication"])


@router.post(
    "/token", response_model=TokenResponse, status_code=status.HTTP_200_OK,
    responses={401: {"description": "Invalid API key"}},
)
async def get_token(
    body: TokenRequest, issuer: TokenIssuer = Depends(get_token_issuer),
):
    """Get a JWT bearer token."""
    issued = issuer.issue(body.api_key)
    return TokenResponse(
        access_token=issued.access_token,
        token_type=issued.token_type,
        expires_in=issued.expires_in,
    )
