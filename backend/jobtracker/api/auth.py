"""
Session endpoints and the capability check applied to every API route.

The tracker serves a single user. Identity lives outside this service:
callers present a shared access token in the httpOnly `auth_token`
cookie or as a Bearer token. The core services never see it.

DEV MODE: when ACCESS_TOKEN is not configured every request passes.
"""
import hmac
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Response, Cookie

from jobtracker.config import settings
from jobtracker.schemas.auth import SessionResponse

logger = logging.getLogger(__name__)
router = APIRouter()

DEV_IDENTITY = "dev"
SESSION_IDENTITY = "owner"


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


# Authentication Dependencies
async def require_session(
    auth_token: Optional[str] = Cookie(None),
    authorization: Optional[str] = Header(None),
) -> str:
    """
    Dependency that rejects requests without a valid session.
    
    Returns:
        str: The caller identity ("dev" in dev mode)
    
    Raises:
        HTTPException 401: If no token or a wrong token was presented
    """
    if not settings.access_token:
        return DEV_IDENTITY
    
    # Either credential may carry the session (a stale cookie must not
    # shadow a valid Bearer header)
    candidates = [t for t in (auth_token, _bearer_token(authorization)) if t]
    if not candidates:
        raise HTTPException(status_code=401, detail="Not authenticated")

    expected = settings.access_token.encode()
    if any(hmac.compare_digest(token.encode(), expected) for token in candidates):
        return SESSION_IDENTITY

    logger.warning("Rejected request with invalid session token")
    raise HTTPException(status_code=401, detail="Invalid token.")


# Endpoints
@router.get("/session", response_model=SessionResponse)
async def get_session(identity: str = Depends(require_session)):
    """Report whether the caller holds a valid session."""
    return SessionResponse(
        authenticated=True,
        identity=identity,
        dev_mode=identity == DEV_IDENTITY,
    )


@router.post("/logout")
async def logout(response: Response):
    """
    Logout by clearing the authentication cookie.
    
    Returns:
        200: Successfully logged out
    """
    response.delete_cookie(
        key="auth_token",
        httponly=True,
        samesite="lax"
    )
    
    logger.info("Session cookie cleared")
    
    return {"message": "Successfully logged out"}
