from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    """
    Database connection settings.
    Loaded from .env with prefix DB_*

    Production runs on PostgreSQL (postgresql+asyncpg://...);
    SQLite is used for local development and tests.
    """

    database_url: str = "sqlite+aiosqlite:///./storeadmin.db"

    # Connection pool settings (ignored for SQLite)
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = 30
    pool_recycle: int = 3600  # 1 hour

    # Echo SQL (for debugging)
    echo_sql: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "DB_",
        "extra": "ignore",
    }
