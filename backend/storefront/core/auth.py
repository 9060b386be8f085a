"""
Authentication for the Storefront API
Validates HS256 JWT bearer tokens and provides the current user context
"""
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from pydantic import BaseModel

from storefront.core.config import settings


# Security scheme for bearer tokens
security = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """User identity extracted from the session token"""
    id: int
    email: str
    name: Optional[str] = None


class AuthConfig:
    """Authentication configuration"""

    @staticmethod
    def get_auth_secret() -> str:
        """Get the AUTH_SECRET from settings"""
        secret = settings.AUTH_SECRET
        if not secret:
            raise ValueError("AUTH_SECRET environment variable is not set")
        return secret

    @staticmethod
    def get_jwt_algorithm() -> str:
        return settings.JWT_ALGORITHM


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"}
    )


def decode_session_token(token: str) -> dict:
    """
    Decode and validate a session JWT.

    Expected payload:
    {
        "sub": "42",
        "id": 42,
        "email": "ada@example.com",
        "name": "Ada",
        "iat": 1234567890,
        "exp": 1234567890
    }
    """
    try:
        return jwt.decode(
            token,
            AuthConfig.get_auth_secret(),
            algorithms=[AuthConfig.get_jwt_algorithm()],
            options={"verify_aud": False}
        )
    except JWTError as e:
        if "expired" in str(e).lower():
            raise _unauthorized("Token has expired")
        raise _unauthorized(f"Invalid token: {str(e)}")


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> CurrentUser:
    """
    Dependency that extracts and validates the current user from JWT.

    Usage:
        @router.get("/protected")
        async def protected_route(user: CurrentUser = Depends(get_current_user)):
            return {"message": f"Hello {user.email}"}
    """
    if not credentials:
        raise _unauthorized("Authentication required")

    payload = decode_session_token(credentials.credentials)

    user_id = payload.get("id")
    if user_id is None:
        user_id = payload.get("sub")
    email = payload.get("email")

    if user_id is None or user_id == "" or not email:
        raise _unauthorized("Invalid token payload: missing user id or email")

    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        raise _unauthorized("Invalid token payload: user id is not numeric")

    return CurrentUser(id=user_id, email=email, name=payload.get("name"))
