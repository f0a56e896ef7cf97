from pydantic import Field, field_validator
from typing import Optional

from app.schemas.base import CamelModel, require_text


class LocationBase(CamelModel):
    """Fields shared by location requests. Only the title is required."""
    title: Optional[str] = Field(None, validate_default=True)
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zip: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_required(cls, v: Optional[str]) -> str:
        return require_text(v, "Title is required")


class LocationCreateRequest(LocationBase):
    id: Optional[int] = None


class LocationUpdateRequest(LocationBase):
    id: int


class LocationResponse(CamelModel):
    id: int
    title: str
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zip: Optional[str] = None
