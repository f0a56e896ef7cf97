import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.crud import department as department_crud
from app.schemas.department import (
    DepartmentCreateRequest,
    DepartmentUpdateRequest,
    DepartmentResponse,
)

router = APIRouter(prefix="/departments", tags=["Departments"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=DepartmentResponse)
def create_department(
    data: DepartmentCreateRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Create a new department.

    Returns 400 with field errors if the title is missing.
    """
    department = department_crud.create(db, data)
    response.headers["Location"] = str(request.url_for("get_department", department_id=department.id))

    logger.info(f"Created department {department.id}: {department.title}")
    return department


@router.get("", response_model=List[DepartmentResponse])
def list_departments(db: Session = Depends(get_db)):
    """List all departments."""
    return department_crud.get_multi(db)


@router.get("/{department_id}", response_model=DepartmentResponse)
def get_department(department_id: int, db: Session = Depends(get_db)):
    """Retrieve a department by ID."""
    department = department_crud.get_by_id(db, department_id)

    if not department:
        raise HTTPException(status_code=404, detail="Department not found")

    return department


@router.put("/{department_id}", status_code=204)
def update_department(
    department_id: int,
    data: DepartmentUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Replace a department.

    The id in the body must match the id in the path.
    """
    if department_id != data.id:
        raise HTTPException(status_code=400, detail="Route id does not match body id")

    updated = department_crud.replace(db, department_id, data)

    if not updated:
        raise HTTPException(status_code=404, detail="Department not found")

    logger.info(f"Updated department {department_id}")
    return None
