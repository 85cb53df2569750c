# ABOUTME: Database service for managing SQLite connections and sessions.
# ABOUTME: Owns the engine shared by all entity handlers and creates the schema on demand.

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

import portfolio_showcase.models  # noqa: F401  registers tables on SQLModel.metadata


class DatabaseService:
    """Service for managing database connections and sessions."""

    DEFAULT_DB_PATH = Path.home() / ".portfolio-showcase" / "data.db"

    def __init__(self, db_path: Path | None = None, echo: bool = False) -> None:
        """Initialize the database service.

        Args:
            db_path: Path to the SQLite database file. Defaults to ~/.portfolio-showcase/data.db
            echo: If True, log every SQL statement through SQLAlchemy.
        """
        self.db_path = db_path if db_path is not None else self.DEFAULT_DB_PATH
        # The API server handles requests on worker threads.
        self._engine = create_engine(
            f"sqlite:///{self.db_path}",
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    @property
    def engine(self) -> Engine:
        """The SQLAlchemy engine backing this service."""
        return self._engine

    def init_db(self) -> None:
        """Initialize the database by creating tables and parent directories."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        SQLModel.metadata.create_all(self._engine)

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Get a database session as a context manager.

        Yields:
            SQLModel Session for database operations.
        """
        with Session(self._engine) as session:
            yield session

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
