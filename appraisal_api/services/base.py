import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from appraisal_api.core.exceptions import AppException, StorageError


class BaseService:
    """
    Common plumbing for the store services.

    Each service works on the request-scoped Session it is given; nothing here
    holds state across requests.
    """

    def __init__(self, db: Session):
        self.db = db
        self._logger = logging.getLogger(self.__class__.__module__)

    def _execute(self, statement) -> int:
        """Run a single INSERT/UPDATE/DELETE and return the affected row count."""
        result = self.db.execute(statement)
        return result.rowcount

    @contextmanager
    def _storage(self, action: str) -> Iterator[None]:
        """
        Wrap a unit of work: roll back on any failure and hide driver errors
        behind StorageError.
        """
        try:
            yield
        except AppException:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            self._logger.error(f"Database error while {action}: {e}", exc_info=True)
            raise StorageError(f"Database error while {action}") from e
        except Exception:
            self.db.rollback()
            raise
