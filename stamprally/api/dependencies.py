"""FastAPI dependencies for services and rally configuration."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from stamprally.config import get_settings
from stamprally.database import get_db
from stamprally.services.catalog import RallyCatalog
from stamprally.services.completion_service import CompletionService


@lru_cache
def get_catalog() -> RallyCatalog:
    """Get the rally catalog, built once from settings."""
    return RallyCatalog.from_settings(get_settings())


def get_completion_service(
    db: Annotated[Session, Depends(get_db)],
) -> CompletionService:
    """Get completion service with dependencies."""
    return CompletionService(db)
