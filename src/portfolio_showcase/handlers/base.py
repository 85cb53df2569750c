# ABOUTME: Shared plumbing for the entity handlers.
# ABOUTME: Opens sessions and logs failed store operations before re-raising them unchanged.

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from portfolio_showcase.database import DatabaseService


class BaseHandler:
    """Base class for handlers that read and write one entity table."""

    def __init__(self, db_service: DatabaseService) -> None:
        """Initialize the handler.

        Args:
            db_service: Database service providing sessions.
        """
        self._db_service = db_service
        self._logger = logging.getLogger(type(self).__module__)

    @contextmanager
    def _session(self, action: str) -> Generator[Session, None, None]:
        """Open a session for one handler operation.

        Store failures are logged and propagate to the caller as raised;
        no retry happens here.

        Args:
            action: Short description of the operation, used in log messages.

        Yields:
            SQLModel Session for the operation.
        """
        try:
            with self._db_service.get_session() as session:
                yield session
        except SQLAlchemyError:
            self._logger.exception("%s failed", action)
            raise
