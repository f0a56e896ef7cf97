import uuid
from sqlalchemy import Column, Integer, String, ForeignKey, event
from sqlalchemy.orm import relationship
from app.core.database import Base


class Job(Base):
    """
    Job opening tied to one Location and one Department.

    The code is owned by the server: it is (re)generated on every insert and
    never taken from the client. Both foreign keys use ON DELETE RESTRICT so a
    location or department cannot be removed while a job still points at it.
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, unique=True, nullable=False, index=True)

    location_id = Column(
        Integer,
        ForeignKey("locations.id", ondelete="RESTRICT"),
        nullable=False,
        index=True
    )
    department_id = Column(
        Integer,
        ForeignKey("departments.id", ondelete="RESTRICT"),
        nullable=False,
        index=True
    )

    version = Column(Integer, nullable=False, default=1)

    # One-directional: Location/Department carry no collection of jobs, so the
    # ORM never tries to null out job foreign keys when a parent is deleted.
    location = relationship("Location")
    department = relationship("Department")

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"<Job(id={self.id}, code='{self.code}')>"


@event.listens_for(Job, "before_insert")
def assign_job_code(mapper, connection, target: Job) -> None:
    """Give every new job a fresh unique code, overwriting any supplied value."""
    target.code = str(uuid.uuid4())
