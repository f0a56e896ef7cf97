"""
Commit helpers shared by the entity CRUD modules.

Every write goes through one of these so a failed commit always leaves the
session rolled back and usable for the existence re-check that follows.
"""

import logging
from typing import Callable
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

logger = logging.getLogger(__name__)


def commit_or_rollback(db: Session) -> None:
    """
    Commit the session, rolling back before re-raising an integrity violation
    (foreign key, unique constraint).
    """
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise


def commit_versioned(db: Session, still_exists: Callable[[], bool]) -> bool:
    """
    Commit a write guarded by the row's version column.

    Returns:
        True if the write was committed, False if the row vanished after it
        was loaded (caller maps this to 404)

    Raises:
        StaleDataError: The row still exists but another writer changed it.
            Not retried.
    """
    try:
        commit_or_rollback(db)
    except StaleDataError:
        db.rollback()
        if not still_exists():
            return False
        logger.error("Concurrent modification detected; write rejected")
        raise
    return True
