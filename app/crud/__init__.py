"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern.
"""

from app.crud import department, location, job, user_info

__all__ = ["department", "location", "job", "user_info"]
