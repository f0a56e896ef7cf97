"""
Pydantic schemas for account registration, administration and tokens.
"""

from pydantic import BaseModel, EmailStr, Field

from app.schemas.base import CamelModel


class UserModel(CamelModel):
    """Credentials for a new account."""
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)  # bcrypt limit


class TokenRequest(CamelModel):
    """
    Credentials presented to POST /Token.

    Any non-empty strings are accepted. A malformed email is simply an
    unknown account.
    """
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserInfoUpdateRequest(CamelModel):
    """Full replacement of an account. The password is re-hashed on save."""
    user_id: int
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)
    role: str = Field(..., min_length=1, max_length=50)


class UserInfoResponse(CamelModel):
    """Account as returned by the API (never includes the password hash)."""
    user_id: int
    email: str
    role: str


class Principal(BaseModel):
    """Authenticated caller, built from bearer token claims."""
    user_id: int
    email: str
    role: str
