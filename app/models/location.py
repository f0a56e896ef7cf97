from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Location(Base):
    """
    Physical site where a job is based.

    Only the title is required; the address parts are free text.
    """
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    city = Column(String, nullable=True)
    state = Column(String, nullable=True)
    country = Column(String, nullable=True)
    zip = Column(String, nullable=True)

    # Concurrency token (see Department)
    version = Column(Integer, nullable=False, default=1)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"<Location(id={self.id}, title='{self.title}')>"
