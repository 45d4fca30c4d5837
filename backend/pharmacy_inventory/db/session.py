"""Database session. SQLite compatible with connection pooling."""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

from pharmacy_inventory.core.config import settings


def build_engine(database_url: str) -> Engine:
    """Create an engine for `database_url` with pooling suited to its backend."""
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite+pysqlite://"):
            # In-memory: every session must share the one connection holding the data
            return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
        # SQLite file: Use NullPool for thread-safety
        return create_engine(database_url, connect_args=connect_args, poolclass=NullPool)

    # PostgreSQL/MySQL: Use QueuePool with sensible defaults
    return create_engine(
        database_url,
        pool_size=5,  # Number of persistent connections
        max_overflow=10,  # Max temporary connections
        pool_timeout=30,  # Seconds to wait for connection
        pool_recycle=3600,  # Recycle connections after 1 hour
        pool_pre_ping=True  # Verify connection health
    )


def build_sessionmaker(bind: Engine) -> sessionmaker:
    # expire_on_commit=False so records can be read after the session closes
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = build_sessionmaker(engine)
