from typing import Optional

from app.schemas.base import CamelModel


class JobCreateRequest(CamelModel):
    """
    Schema for creating a job.

    `code` is accepted for compatibility with existing clients but always
    replaced by a server-generated value.
    """
    id: Optional[int] = None
    code: Optional[str] = None
    location_id: int
    department_id: int


class JobUpdateRequest(CamelModel):
    """Schema for replacing a job. The code is server-owned and not updated."""
    id: int
    code: Optional[str] = None
    location_id: int
    department_id: int


class JobResponse(CamelModel):
    """Schema for job response"""
    id: int
    code: str
    location_id: int
    department_id: int
