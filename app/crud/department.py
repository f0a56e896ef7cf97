"""
CRUD operations for Department model.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from app.crud.base import commit_or_rollback, commit_versioned
from app.models.department import Department
from app.schemas.department import DepartmentCreateRequest, DepartmentUpdateRequest


def create(db: Session, data: DepartmentCreateRequest) -> Department:
    """Insert a new department; the id is assigned by the database."""
    db_department = Department(title=data.title)

    db.add(db_department)
    commit_or_rollback(db)
    db.refresh(db_department)

    return db_department


def get_by_id(db: Session, department_id: int) -> Optional[Department]:
    return db.get(Department, department_id)


def get_multi(db: Session) -> List[Department]:
    return db.query(Department).order_by(Department.id).all()


def exists(db: Session, department_id: int) -> bool:
    return db.query(Department.id).filter(Department.id == department_id).first() is not None


def replace(db: Session, department_id: int, data: DepartmentUpdateRequest) -> Optional[Department]:
    """
    Replace every field of a department.

    Returns:
        Updated Department, or None if it does not exist (or vanished mid-write)
    """
    department = get_by_id(db, department_id)
    if not department:
        return None

    department.title = data.title

    if not commit_versioned(db, lambda: exists(db, department_id)):
        return None
    db.refresh(department)
    return department


def delete(db: Session, department_id: int) -> bool:
    """
    Delete a department by ID.

    Raises:
        IntegrityError: If a job still references the department
    """
    department = get_by_id(db, department_id)
    if not department:
        return False

    db.delete(department)
    return commit_versioned(db, lambda: exists(db, department_id))
