from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from typing import Generator, Optional
from pathlib import Path
import logging

from .config import settings
from .exceptions import StorageError

logger = logging.getLogger(__name__)


def build_engine(database_url: str):
    """Create an engine; SQLite connections are shared across the threadpool."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        # Concurrent writers wait for the file lock instead of failing fast
        connect_args["timeout"] = 30
        database = make_url(database_url).database
        if database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(database_url, connect_args=connect_args)


engine = build_engine(settings.get_database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Database dependency
def get_db() -> Generator[Session, None, None]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def commit_or_raise(db: Session, on_conflict: Optional[Exception] = None) -> None:
    """
    Commit the current unit of work, rolling back and raising StorageError on failure.

    If ``on_conflict`` is given, a unique-constraint violation raises it instead.
    """
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if on_conflict is not None:
            raise on_conflict from exc
        logger.error(f"Commit failed on integrity check, unit of work rolled back: {exc}")
        raise StorageError() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Commit failed, unit of work rolled back: {exc}")
        raise StorageError() from exc

# Database initialization
def init_db(bind=None):
    """Initialize database tables."""
    # Register every model on Base.metadata before creating tables
    from .. import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
