"""Database models."""

from velo_altitude.models.database import Base, engine, get_db
from velo_altitude.models.content_item import ContentItem

__all__ = ["Base", "engine", "get_db", "ContentItem"]
