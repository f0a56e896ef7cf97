from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Department(Base):
    """
    Organisational department that jobs belong to.

    `version` is the concurrency token: every UPDATE/DELETE is filtered on the
    version loaded with the row, so a write against a row that changed or
    vanished in the meantime raises StaleDataError.
    """
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)

    version = Column(Integer, nullable=False, default=1)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"<Department(id={self.id}, title='{self.title}')>"
