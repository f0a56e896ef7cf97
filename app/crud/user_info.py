"""
CRUD operations for UserInfo accounts.

Passwords are hashed here, so callers only ever hand over plaintext from the
request and nothing above this layer sees or stores a hash.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from app.core.security import get_password_hash
from app.crud.base import commit_or_rollback, commit_versioned
from app.models.user_info import UserInfo
from app.schemas.user_info import UserInfoUpdateRequest


def get_by_id(db: Session, user_id: int) -> Optional[UserInfo]:
    return db.get(UserInfo, user_id)


def get_by_email(db: Session, email: str) -> Optional[UserInfo]:
    return db.query(UserInfo).filter(UserInfo.email == email).first()


def get_multi(db: Session) -> List[UserInfo]:
    return db.query(UserInfo).order_by(UserInfo.user_id).all()


def exists(db: Session, user_id: int) -> bool:
    return db.query(UserInfo.user_id).filter(UserInfo.user_id == user_id).first() is not None


def create(db: Session, email: str, password: str, role: str) -> UserInfo:
    """
    Store a new account with a bcrypt hash of `password`.

    Email uniqueness is the caller's check; the unique index turns a race
    into an IntegrityError.
    """
    user = UserInfo(
        email=email,
        password=get_password_hash(password),
        role=role,
    )

    db.add(user)
    commit_or_rollback(db)
    db.refresh(user)

    return user


def replace(db: Session, user_id: int, data: UserInfoUpdateRequest) -> Optional[UserInfo]:
    """
    Replace an account's email, password and role.

    Returns:
        Updated UserInfo, or None if it does not exist (or vanished mid-write)
    """
    user = get_by_id(db, user_id)
    if not user:
        return None

    user.email = data.email
    user.password = get_password_hash(data.password)
    user.role = data.role

    if not commit_versioned(db, lambda: exists(db, user_id)):
        return None
    db.refresh(user)
    return user


def set_role(db: Session, user: UserInfo, role: str) -> UserInfo:
    user.role = role
    commit_or_rollback(db)
    db.refresh(user)
    return user


def delete(db: Session, user_id: int) -> Optional[UserInfo]:
    """
    Delete an account by ID.

    Returns:
        The deleted UserInfo (detached), or None if not found
    """
    user = get_by_id(db, user_id)
    if not user:
        return None

    db.delete(user)
    if not commit_versioned(db, lambda: exists(db, user_id)):
        return None
    return user
