"""
Bearer token issuance.

POST /Token exchanges an email/password pair for a signed JWT carrying the
account's id, email and role.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.security import create_access_token, verify_password
from app.crud import user_info as user_crud
from app.schemas.user_info import TokenRequest

router = APIRouter(prefix="/Token", tags=["Token"])
logger = logging.getLogger(__name__)


@router.post("", response_model=str)
def issue_token(
    credentials: TokenRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Authenticate and return a JWT bearer token as a JSON string.

    Missing fields are rejected by request validation (400).
    """
    user = user_crud.get_by_email(db, credentials.email)
    if not user:
        logger.warning(f"Token requested for unknown email {credentials.email}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials"
        )

    if not verify_password(credentials.password, user.password):
        logger.warning(f"Wrong password for {user.email}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Wrong password."
        )

    logger.info(f"Issued token for {user.email}")
    return create_access_token(settings, user.user_id, user.email, user.role)
