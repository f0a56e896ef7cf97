"""
Account endpoints.

- POST /UserInfo: anonymous registration
- GET/PUT/DELETE /UserInfo(/{id}): Admin role only
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.deps import get_admin_principal
from app.crud import user_info as user_crud
from app.schemas.user_info import UserModel, UserInfoUpdateRequest, UserInfoResponse

router = APIRouter(prefix="/UserInfo", tags=["UserInfo"])
logger = logging.getLogger(__name__)


@router.get(
    "",
    response_model=List[UserInfoResponse],
    dependencies=[Depends(get_admin_principal)]
)
def list_user_info(db: Session = Depends(get_db)):
    """List all accounts."""
    return user_crud.get_multi(db)


@router.get(
    "/{user_id}",
    response_model=UserInfoResponse,
    dependencies=[Depends(get_admin_principal)]
)
def get_user_info(user_id: int, db: Session = Depends(get_db)):
    user = user_crud.get_by_id(db, user_id)

    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    return user


@router.put(
    "/{user_id}",
    status_code=204,
    dependencies=[Depends(get_admin_principal)]
)
def update_user_info(
    user_id: int,
    data: UserInfoUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Replace an account. The supplied password is hashed before it is stored.
    """
    if user_id != data.user_id:
        raise HTTPException(status_code=400, detail="Route id does not match body id")

    other = user_crud.get_by_email(db, data.email)
    if other and other.user_id != user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")

    updated = user_crud.replace(db, user_id, data)

    if not updated:
        raise HTTPException(status_code=404, detail="User not found")

    logger.info(f"Updated user {user_id}")
    return None


@router.post("", status_code=201, response_model=UserInfoResponse)
def create_user_info(
    user_model: UserModel,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Register a new account. No authentication required.

    The password is stored as a salted bcrypt hash; the account gets the
    default role.
    """
    existing_user = user_crud.get_by_email(db, user_model.email)
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists"
        )

    try:
        user = user_crud.create(db, user_model.email, user_model.password, settings.DEFAULT_ROLE)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists"
        )

    response.headers["Location"] = str(request.url_for("get_user_info", user_id=user.user_id))

    logger.info(f"New user registered: {user.email}")
    return user


@router.delete(
    "/{user_id}",
    response_model=UserInfoResponse,
    dependencies=[Depends(get_admin_principal)]
)
def delete_user_info(user_id: int, db: Session = Depends(get_db)):
    """Delete an account and return it."""
    deleted = user_crud.delete(db, user_id)

    if not deleted:
        raise HTTPException(status_code=404, detail="User not found")

    logger.info(f"Deleted user {user_id}")
    return deleted
