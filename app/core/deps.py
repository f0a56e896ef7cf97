"""
FastAPI dependencies for authentication and authorization.

Two access tiers exist: anonymous (no dependency) and role-gated
(Depends(require_role(...))). The role check runs before the handler body.
"""

from typing import Callable, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from app.core.config import Settings, get_settings
from app.core.security import decode_access_token
from app.schemas.user_info import Principal

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error=False so a missing header yields our own 401 instead of the scheme's default
security = HTTPBearer(auto_error=False)


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> Principal:
    """
    Extract and validate the caller from the bearer token.

    The principal is built from the token claims alone; no database lookup.

    Raises:
        HTTPException 401: If the token is missing, invalid or expired
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    try:
        payload = decode_access_token(credentials.credentials, settings)
        user_id = payload.get("id")
        email = payload.get("email")
        role = payload.get("role")
        if user_id is None or email is None or role is None:
            raise credentials_exception
        return Principal(user_id=int(user_id), email=email, role=role)

    except (JWTError, ValueError):
        raise credentials_exception


def require_role(role: str) -> Callable[..., Principal]:
    """
    Build a dependency that only lets through principals holding `role`.

    Usage:
        @router.get("/", dependencies=[Depends(require_role("Admin"))])

    Raises:
        HTTPException 403: If the caller is authenticated but lacks the role
    """

    async def role_checker(principal: Principal = Depends(get_current_principal)) -> Principal:
        if principal.role != role:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"{role} role required"
            )
        return principal

    return role_checker


async def get_admin_principal(
    principal: Principal = Depends(get_current_principal),
    settings: Settings = Depends(get_settings),
) -> Principal:
    """Role check against the configured ADMIN_ROLE."""
    return await require_role(settings.ADMIN_ROLE)(principal)
