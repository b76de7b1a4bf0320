"""Database setup and session management for the local catalog."""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from velo_altitude.config import settings

# Create engine with SQLite-specific settings
connect_args = {}
if settings.database_url.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(settings.database_url, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    """Create all database tables."""
    # Import models to ensure they're registered with Base
    from velo_altitude.models import content_item  # noqa: F401

    Base.metadata.create_all(bind=engine)
