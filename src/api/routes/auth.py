"""Authentication routes (token issue, current principal)."""

import logging

from fastapi import APIRouter, Depends

from api.models import PrincipalResponse, TokenResponse
from api.security import create_access_token, get_current_principal

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token", response_model=TokenResponse)
async def issue_token(principal: str = Depends(get_current_principal)):
    """Exchange valid credentials for a bearer token.

    The gate has already authenticated the caller, with Basic credentials
    or an earlier token.
    """
    token, expires_in = create_access_token(principal)
    logger.info("Access token issued", extra={"principal": principal})
    return TokenResponse(access_token=token, expires_in=expires_in)


@router.get("/me", response_model=PrincipalResponse)
async def get_me(principal: str = Depends(get_current_principal)):
    """Get the authenticated principal."""
    return PrincipalResponse(username=principal)
