"""
Tests for the Admin bootstrap script.
"""

from app.core.security import verify_password
from app.crud import user_info as user_crud
from create_admin import create_admin


class TestCreateAdmin:

    def test_creates_new_admin(self, db_session):
        user = create_admin(db_session, "root@example.com", "RootPass1!")

        assert user.role == "Admin"
        assert verify_password("RootPass1!", user.password)

    def test_promotes_existing_account(self, db_session):
        existing = user_crud.create(db_session, "member@example.com", "MemberPass1!", "User")

        user = create_admin(db_session, "member@example.com", "IgnoredPass1!")

        assert user.user_id == existing.user_id
        assert user.role == "Admin"
        assert verify_password("MemberPass1!", user.password)
