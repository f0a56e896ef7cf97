"""
Shared Pydantic building blocks for request/response schemas.
"""

from typing import Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema serialised with camelCase keys (locationId, userId, ...).

    Requests accept either the camelCase alias or the snake_case field name.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True  # Allows conversion from SQLAlchemy models


def require_text(value: Optional[str], message: str) -> str:
    """Reject None, empty and whitespace-only strings with the given message."""
    if value is None or not value.strip():
        raise ValueError(message)
    return value
