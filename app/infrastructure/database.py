"""
Database engine setup.

SQLAlchemy Core (not ORM) is used: the user store is a single table
and the repository works with plain statements and immutable entities,
so there is no benefit from sessions or identity maps.
"""

import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.infrastructure.users.schema import metadata

logger = logging.getLogger(__name__)


def create_db_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """Build a SQLAlchemy engine for the user store.

    Args:
        url: DSN to connect to. Defaults to the configured database URL.
        echo: Echo SQL statements. Defaults to `settings.database_echo`.

    SQLite connections are shared across threads (FastAPI runs sync
    routes in a threadpool); in-memory SQLite uses a single static
    connection so every caller sees the same database.
    """
    url = url or settings.get_database_url()
    echo = settings.database_echo if echo is None else echo

    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)

    return create_engine(url, echo=echo, pool_pre_ping=True)


def init_database(engine: Engine) -> None:
    """Create the user tables if they do not exist. Idempotent."""
    metadata.create_all(engine)
    logger.info("User store ready at %s", engine.url.render_as_string(hide_password=True))


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Return the process-wide engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = create_db_engine()
    return _engine
