"""SQLAlchemy implementation of the Unit of Work."""

import logging
from types import TracebackType

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from flashdeck.application.common.unit_of_work import UnitOfWork
from flashdeck.infrastructure.common.store_errors import translate_store_error

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of Work bound to the request's database session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Roll back on error; driver errors leave as classified application errors."""
        if exc_type is None:
            return
        try:
            self.rollback()
        except SQLAlchemyError as rollback_error:
            logger.warning(f"Rollback failed: {rollback_error}")
        if isinstance(exc_val, SQLAlchemyError):
            raise translate_store_error(exc_val) from exc_val
