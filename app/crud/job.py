"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from app.crud.base import commit_or_rollback, commit_versioned
from app.models.job import Job
from app.schemas.job import JobCreateRequest, JobUpdateRequest


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job in the database.

    The code is generated by the model's before_insert hook; whatever the
    client sent in job_data.code is discarded.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance with id and code

    Raises:
        IntegrityError: If the referenced location or department is missing
    """
    db_job = Job(
        location_id=job_data.location_id,
        department_id=job_data.department_id,
    )

    db.add(db_job)
    commit_or_rollback(db)
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: int) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Returns:
        Job instance if found, None otherwise
    """
    return db.get(Job, job_id)


def get_multi(db: Session) -> List[Job]:
    """Retrieve all jobs ordered by id."""
    return db.query(Job).order_by(Job.id).all()


def exists(db: Session, job_id: int) -> bool:
    return db.query(Job.id).filter(Job.id == job_id).first() is not None


def replace(db: Session, job_id: int, job_data: JobUpdateRequest) -> Optional[Job]:
    """
    Point an existing job at a new location/department. The code is kept.

    Returns:
        Updated Job instance if found, None otherwise
    """
    job = get_by_id(db, job_id)
    if not job:
        return None

    job.location_id = job_data.location_id
    job.department_id = job_data.department_id

    if not commit_versioned(db, lambda: exists(db, job_id)):
        return None
    db.refresh(job)
    return job


def delete(db: Session, job_id: int) -> bool:
    """
    Delete a job by ID.

    Returns:
        True if deleted, False if not found
    """
    job = get_by_id(db, job_id)
    if not job:
        return False

    db.delete(job)
    return commit_versioned(db, lambda: exists(db, job_id))
