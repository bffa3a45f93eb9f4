from w4ffle.config import get_settings
from w4ffle.db.interfaces.postgresql import PostgreSQLDatabase


def make_database() -> PostgreSQLDatabase:
    """
    Create the database handle from settings.

    Returns:
        PostgreSQLDatabase: engine + session factory for the puzzle store
    """
    settings = get_settings()
    return PostgreSQLDatabase(database_url=settings.postgres_database_url)
