"""
UserInfo model for password authentication and role-based access.
"""

from sqlalchemy import Column, Integer, String
from app.core.database import Base


class UserInfo(Base):
    """
    Account that can request bearer tokens.

    `password` always holds a bcrypt hash, never plaintext. Email uniqueness
    is checked before insert by the API and backed by a unique index.
    """
    __tablename__ = "user_info"

    user_id = Column(Integer, primary_key=True, index=True)

    # Authentication credentials
    email = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)

    role = Column(String, nullable=False, default="User")

    version = Column(Integer, nullable=False, default=1)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"<UserInfo(user_id={self.user_id}, email='{self.email}', role='{self.role}')>"
