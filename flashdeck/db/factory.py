from flashdeck.config import get_settings
from flashdeck.db.interfaces.postgresql import PostgreSQLDatabase


def make_database(url: str | None = None) -> PostgreSQLDatabase:
    """
    Build the database interface from settings.

    An explicit ``url`` wins over ``POSTGRES_DATABASE_URL``.
    """
    settings = get_settings()
    database = PostgreSQLDatabase(
        url=url or settings.postgres_database_url,
        echo=settings.database_echo,
    )
    if settings.auto_create_tables:
        database.create_tables()
    return database
