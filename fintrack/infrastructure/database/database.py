"""
SQLite ledger storage.

Repositories never hold a session: every call opens one through
``Database.session_scope``, which commits when the block ends and rolls
back when it raises. One pooled connection is shared, so an in-memory
ledger lives as long as its ``Database``.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from structlog import get_logger

from .models import Base

logger = get_logger(__name__)

IN_MEMORY = ":memory:"


class Database:
    """
    Owns the engine and session factory of one ledger file.

    Args:
        db_path: Ledger file, created with its parent folders when
            missing, or ``":memory:"``.
        echo: Log every emitted SQL statement.
    """

    def __init__(self, db_path: Path | str = IN_MEMORY, echo: bool = False):
        self.db_path = str(db_path)
        self.echo = echo
        self.engine: Engine = self._build_engine()
        Base.metadata.create_all(self.engine)
        self._sessions = sessionmaker(
            bind=self.engine,
            autoflush=False,
            # Entities are mapped before the session closes
            expire_on_commit=False,
        )
        logger.info(f"Ledger opened at {self.db_path}")

    @property
    def is_in_memory(self) -> bool:
        return self.db_path == IN_MEMORY

    def _build_engine(self) -> Engine:
        if not self.is_in_memory:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        return create_engine(
            f"sqlite:///{self.db_path}",
            connect_args={"check_same_thread": False, "timeout": 15},
            echo=self.echo,
            poolclass=StaticPool,
        )

    def get_session(self) -> Session:
        """Unmanaged session; the caller commits and closes it."""
        return self._sessions()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """One unit of work: commit on success, roll back on error."""
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Ledger write rolled back: {e}")
            raise
        finally:
            session.close()

    def close(self) -> None:
        """Release the pooled connection; an in-memory ledger is lost."""
        self.engine.dispose()
        logger.info(f"Ledger closed at {self.db_path}")

    def clear_all(self) -> None:
        """Drop every operation and summary, keeping the schema."""
        Base.metadata.drop_all(self.engine)
        Base.metadata.create_all(self.engine)
        logger.warning(f"Ledger cleared at {self.db_path}")


def create_database(db_path: Path | str = IN_MEMORY, echo: bool = False) -> Database:
    """Open the ledger at ``db_path``, creating its tables if needed."""
    return Database(db_path, echo=echo)
