"""
CRUD operations for Location model.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from app.crud.base import commit_or_rollback, commit_versioned
from app.models.location import Location
from app.schemas.location import LocationCreateRequest, LocationUpdateRequest

# Columns copied verbatim from requests on create and replace
_FIELDS = ("title", "city", "state", "country", "zip")


def create(db: Session, data: LocationCreateRequest) -> Location:
    db_location = Location(**{field: getattr(data, field) for field in _FIELDS})

    db.add(db_location)
    commit_or_rollback(db)
    db.refresh(db_location)

    return db_location


def get_by_id(db: Session, location_id: int) -> Optional[Location]:
    return db.get(Location, location_id)


def get_multi(db: Session) -> List[Location]:
    return db.query(Location).order_by(Location.id).all()


def exists(db: Session, location_id: int) -> bool:
    return db.query(Location.id).filter(Location.id == location_id).first() is not None


def replace(db: Session, location_id: int, data: LocationUpdateRequest) -> Optional[Location]:
    """
    Replace every field of a location. Optional fields left out of the
    request are cleared.
    """
    location = get_by_id(db, location_id)
    if not location:
        return None

    for field in _FIELDS:
        setattr(location, field, getattr(data, field))

    if not commit_versioned(db, lambda: exists(db, location_id)):
        return None
    db.refresh(location)
    return location


def delete(db: Session, location_id: int) -> bool:
    """
    Delete a location by ID.

    Raises:
        IntegrityError: If a job still references the location
    """
    location = get_by_id(db, location_id)
    if not location:
        return False

    db.delete(location)
    return commit_versioned(db, lambda: exists(db, location_id))
