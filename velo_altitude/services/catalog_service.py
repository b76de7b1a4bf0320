"""Local catalog service backing offline and demo browsing."""

from sqlalchemy import or_
from sqlalchemy.orm import Session

from velo_altitude.models.content_item import ContentItem


class CatalogService:
    """Service for reading the local content catalog."""

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def get_fallback_data(
        self, category: str, subcategory: str | None = None
    ) -> list[dict]:
        """Get the local item list of a category, optionally narrowed to a subcategory."""
        rows = (
            self.db.query(ContentItem)
            .filter(ContentItem.category == category)
            .order_by(ContentItem.position, ContentItem.id)
            .all()
        )
        if subcategory:
            rows = [row for row in rows if subcategory in row.subcategories]
        return [row.payload for row in rows]

    def get_item(self, category: str, item_id: str) -> dict | None:
        """Get an item by id or slug."""
        row = (
            self.db.query(ContentItem)
            .filter(ContentItem.category == category)
            .filter(or_(ContentItem.id == item_id, ContentItem.slug == item_id))
            .first()
        )
        return row.payload if row else None

    def count(self, category: str | None = None) -> int:
        """Count items, optionally within one category."""
        query = self.db.query(ContentItem)
        if category:
            query = query.filter(ContentItem.category == category)
        return query.count()
