"""Content item database model for the local fallback catalog."""

import json
from datetime import datetime

from sqlalchemy import Column, String, Text, DateTime, Integer

from velo_altitude.models.database import Base


class ContentItem(Base):
    """A col, program, nutrition entry or challenge kept for offline browsing."""

    __tablename__ = "content_items"

    id = Column(String, primary_key=True, index=True)
    category = Column(String, nullable=False, index=True)
    slug = Column(String, nullable=True, index=True)
    position = Column(Integer, default=0)  # order within the category
    # Store JSON as text for SQLite compatibility
    _subcategories = Column("subcategories", Text, nullable=True)
    _payload = Column("payload", Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def subcategories(self) -> list[str]:
        """Get subcategory keys as list."""
        if self._subcategories:
            return json.loads(self._subcategories)
        return []

    @subcategories.setter
    def subcategories(self, value: list[str] | None):
        """Set subcategory keys from list."""
        self._subcategories = json.dumps(value) if value else None

    @property
    def payload(self) -> dict:
        """Get the item record as dict."""
        return json.loads(self._payload)

    @payload.setter
    def payload(self, value: dict):
        """Set the item record from dict."""
        self._payload = json.dumps(value, ensure_ascii=False)

    def __repr__(self):
        return f"<ContentItem(id='{self.id}', category='{self.category}', slug='{self.slug}')>"
