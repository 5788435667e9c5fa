# RessourcesMG API - Authentication Router
# ========================================
"""Webmaster login and token verification."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ...auth import check_password, create_token, decode_token
from ...config import get_config
from ..models.requests import LoginRequest
from ..models.responses import envelope

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)


def _get_client_ip(request: Request) -> str:
    """Extract client IP from request."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip
    if request.client:
        return request.client.host
    return "unknown"


async def require_webmaster(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> dict:
    """Dependency for webmaster-only endpoints."""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "AUTH_REQUIRED", "message": "Non autorisé"},
            headers={"WWW-Authenticate": "Bearer"}
        )

    payload = decode_token(credentials.credentials)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "AUTH_INVALID", "message": "Session expirée ou invalide"},
            headers={"WWW-Authenticate": "Bearer"}
        )

    return payload


async def optional_webmaster(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[dict]:
    """Webmaster payload if a valid token is sent, None otherwise."""
    if not credentials:
        return None

    return decode_token(credentials.credentials)


# ============================================
# Endpoints
# ============================================

@router.post("/login")
async def login(body: LoginRequest, request: Request):
    """
    Exchange the webmaster password for a bearer token.

    Returns the token and its lifetime in seconds.
    """
    if not body.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": "PASSWORD_REQUIRED", "message": "Mot de passe requis"}
        )

    # ConfigurationError (no password or secret configured) is mapped to 503
    if not check_password(body.password):
        logger.warning(f"Failed webmaster login from {_get_client_ip(request)}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "AUTH_INVALID", "message": "Mot de passe incorrect"}
        )

    token = create_token()
    logger.info(f"Webmaster login from {_get_client_ip(request)}")

    return envelope({
        "token": token,
        "token_type": "bearer",
        "expires_in": get_config().token_expire_hours * 3600,
    })


@router.get("/verify")
async def verify(payload: Optional[dict] = Depends(optional_webmaster)):
    """Tell whether the bearer token is still valid (never fails with 401)."""
    return envelope({"valid": payload is not None})


@router.get("/me")
async def me(payload: dict = Depends(require_webmaster)):
    """Current session details."""
    return envelope({
        "sub": payload["sub"],
        "issued_at": payload["iat"],
        "expires_at": payload["exp"],
    })
