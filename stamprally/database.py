"""Database configuration and session management."""

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from stamprally.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()
settings.ensure_db_dir()

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"

if settings.is_sqlite:
    engine = create_engine(
        settings.sqlalchemy_url,
        connect_args={"check_same_thread": False},
    )
else:
    engine = create_engine(
        settings.sqlalchemy_url,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(database_url: str | None = None) -> None:
    """Initialize the database by creating all tables."""
    # Import all models here so they are registered with Base.metadata
    from stamprally import models  # noqa: F401

    Base.metadata.create_all(bind=create_engine(database_url) if database_url else engine)


def run_migrations(database_url: str | None = None) -> None:
    """Apply all pending Alembic migrations to the configured database, or to
    ``database_url`` when given.

    Falls back to ``create_all`` when the package runs without its
    ``alembic.ini`` (e.g. installed as a wheel).
    """
    if not ALEMBIC_INI.exists():
        logger.warning(f"{ALEMBIC_INI} not found, creating tables from metadata")
        init_db(database_url)
        return

    from alembic import command
    from alembic.config import Config

    config = Config(str(ALEMBIC_INI))
    config.set_main_option("script_location", str(ALEMBIC_INI.parent / "alembic"))
    config.attributes["configure_logger"] = False
    config.attributes["database_url"] = database_url or settings.sqlalchemy_url
    command.upgrade(config, "head")
    logger.info("Database migrations applied")
