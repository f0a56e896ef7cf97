"""
Database models package.
"""

from app.models.department import Department
from app.models.location import Location
from app.models.job import Job
from app.models.user_info import UserInfo

__all__ = ["Department", "Location", "Job", "UserInfo"]
