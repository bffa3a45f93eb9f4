import logging
from contextlib import contextmanager
from typing import Generator, List

from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class PostgreSQLDatabase:
    """Engine and session factory for the puzzle store.

    Any SQLAlchemy URL is accepted; production runs on PostgreSQL and the
    test suite uses in-memory SQLite.
    """

    def __init__(self, database_url: str, **engine_kwargs):
        self.engine = create_engine(database_url, pool_pre_ping=True, **engine_kwargs)
        self.session_factory = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )
        logger.info(f"Database engine created for {self.engine.url.render_as_string(hide_password=True)}")

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        session = self.session_factory()
        try:
            yield session
        finally:
            session.close()

    def list_tables(self) -> List[str]:
        """Names of the tables in the backing store, sorted."""
        return sorted(inspect(self.engine).get_table_names())

    def teardown(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")
