import logging
from typing import Dict, List
from fastapi import APIRouter, HTTPException, Depends, Request, Response
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import ValidationProblem
from app.crud import department as department_crud
from app.crud import job as job_crud
from app.crud import location as location_crud
from app.schemas.job import JobCreateRequest, JobUpdateRequest, JobResponse

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


def _check_references(db: Session, location_id: int, department_id: int) -> None:
    """
    Reject a job whose location or department does not exist.

    Raises:
        ValidationProblem: 400 listing each missing reference
    """
    errors: Dict[str, List[str]] = {}
    if not location_crud.exists(db, location_id):
        errors["locationId"] = [f"Location {location_id} does not exist"]
    if not department_crud.exists(db, department_id):
        errors["departmentId"] = [f"Department {department_id} does not exist"]
    if errors:
        raise ValidationProblem(errors)


@router.post("", status_code=201, response_model=JobResponse)
def create_job(
    job_data: JobCreateRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Create a new job.

    The job code is generated server-side on insert; any code in the request
    body is ignored. Location and department must already exist.
    """
    _check_references(db, job_data.location_id, job_data.department_id)

    new_job = job_crud.create(db, job_data)
    response.headers["Location"] = str(request.url_for("get_job", job_id=new_job.id))

    logger.info(f"Created job {new_job.id} with code {new_job.code}")
    return new_job


@router.get("", response_model=List[JobResponse])
def list_jobs(db: Session = Depends(get_db)):
    """List all jobs."""
    return job_crud.get_multi(db)


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Retrieve a job by ID."""
    job = job_crud.get_by_id(db, job_id)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


@router.put("/{job_id}", status_code=204)
def update_job(
    job_id: int,
    job_data: JobUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Replace a job's location and department.

    The id in the body must match the path. The job code never changes.
    """
    if job_id != job_data.id:
        raise HTTPException(status_code=400, detail="Route id does not match body id")

    if not job_crud.exists(db, job_id):
        raise HTTPException(status_code=404, detail="Job not found")

    _check_references(db, job_data.location_id, job_data.department_id)

    updated = job_crud.replace(db, job_id, job_data)

    if not updated:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Updated job {job_id}")
    return None
