from pydantic import Field, field_validator
from typing import Optional

from app.schemas.base import CamelModel, require_text


class DepartmentBase(CamelModel):
    title: Optional[str] = Field(None, validate_default=True)

    @field_validator("title")
    @classmethod
    def title_required(cls, v: Optional[str]) -> str:
        return require_text(v, "Title is required")


class DepartmentCreateRequest(DepartmentBase):
    """Schema for creating a department. Any client-supplied id is ignored."""
    id: Optional[int] = None


class DepartmentUpdateRequest(DepartmentBase):
    """Schema for replacing a department; id must match the path id."""
    id: int


class DepartmentResponse(CamelModel):
    id: int
    title: str
