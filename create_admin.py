"""
Script to create an Admin account, or promote an existing account to Admin.

Self-registration through POST /api/UserInfo only ever creates ordinary
accounts, so the first administrator has to be bootstrapped here.

Run this script from the project root:
    python create_admin.py admin@example.com 'S3cret!'
"""

import argparse
import os
import sys
from sqlalchemy.orm import Session

# Add app to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.core.config import settings
from app.core.database import SessionLocal
from app.crud import user_info as user_crud
from app.models.user_info import UserInfo


def create_admin(db: Session, email: str, password: str, role: str = settings.ADMIN_ROLE) -> UserInfo:
    """
    Create the account with the admin role, or promote it if the email is
    already registered. An existing account keeps its password.
    """
    user = user_crud.get_by_email(db, email)
    if user:
        return user_crud.set_role(db, user, role)
    return user_crud.create(db, email, password, role)


def main() -> None:
    parser = argparse.ArgumentParser(description="Create or promote an Admin account")
    parser.add_argument("email")
    parser.add_argument("password")
    args = parser.parse_args()

    db = SessionLocal()
    try:
        user = create_admin(db, args.email, args.password)
        print(f"✓ {user.email} (ID: {user.user_id}) has role {user.role}")
    except Exception as e:
        db.rollback()
        print(f"\n✗ Error creating admin: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
