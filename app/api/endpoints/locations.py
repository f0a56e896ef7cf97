import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.crud import location as location_crud
from app.schemas.location import (
    LocationCreateRequest,
    LocationUpdateRequest,
    LocationResponse,
)

router = APIRouter(prefix="/locations", tags=["Locations"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=LocationResponse)
def create_location(
    data: LocationCreateRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db)
):
    """Create a new location. Only the title is required."""
    location = location_crud.create(db, data)
    response.headers["Location"] = str(request.url_for("get_location_by_id", location_id=location.id))

    logger.info(f"Created location {location.id}: {location.title}")
    return location


@router.get("", response_model=List[LocationResponse])
def list_locations(db: Session = Depends(get_db)):
    return location_crud.get_multi(db)


@router.get("/{location_id}", response_model=LocationResponse)
def get_location_by_id(location_id: int, db: Session = Depends(get_db)):
    location = location_crud.get_by_id(db, location_id)

    if not location:
        raise HTTPException(status_code=404, detail="Location not found")

    return location


@router.put("/{location_id}", status_code=204)
def update_location(
    location_id: int,
    data: LocationUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Replace a location. Fields omitted from the body are cleared.
    """
    if location_id != data.id:
        raise HTTPException(status_code=400, detail="Route id does not match body id")

    updated = location_crud.replace(db, location_id, data)

    if not updated:
        raise HTTPException(status_code=404, detail="Location not found")

    logger.info(f"Updated location {location_id}")
    return None
