# services/base.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import StoreError

logger = logging.getLogger(__name__)


def commit(db: Session, what: str) -> None:
    """Commit or roll back; database failures surface as StoreError with the driver's message."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error while %s", what)
        raise StoreError(str(e), original_error=e) from e
