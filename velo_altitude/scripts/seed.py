"""Local catalog export and import utilities.

Usage:
    # Export the local catalog to a seed file
    python -m velo_altitude.scripts.seed export

    # Load seed data into the local catalog
    python -m velo_altitude.scripts.seed load

    # Load seed data (clear existing first)
    python -m velo_altitude.scripts.seed load --clear

    # Insert the built-in demo catalog
    python -m velo_altitude.scripts.seed demo
"""

import json
import sys
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy.orm import Session

from velo_altitude.data.fallback_data import ensure_fallback_catalog
from velo_altitude.models.content_item import ContentItem
from velo_altitude.models.database import create_tables, get_db

SEED_FILE = Path.cwd() / "seed_data.json"


def export_seed_data(db: Session, output_path: Path = SEED_FILE) -> dict:
    """Export all local catalog items to JSON."""
    items = []
    for row in db.query(ContentItem).order_by(ContentItem.category, ContentItem.position).all():
        items.append({
            "id": row.id,
            "category": row.category,
            "slug": row.slug,
            "position": row.position,
            "subcategories": row.subcategories,
            "payload": row.payload,
        })

    seed_data = {
        "exported_at": datetime.now(timezone.utc).isoformat(),
        "version": "1.0",
        "items": items,
    }

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(seed_data, f, indent=2, ensure_ascii=False)

    print(f"Exported seed data to {output_path}")
    print(f"  Items: {len(items)}")

    return seed_data


def load_seed_data(db: Session, input_path: Path = SEED_FILE, clear_existing: bool = False) -> dict:
    """Load seed data from JSON into the local catalog.

    Args:
        db: Database session
        input_path: Path to seed JSON file
        clear_existing: If True, delete all existing items first

    Returns:
        Dict with counts of loaded and skipped items

    Raises:
        FileNotFoundError: If the seed file does not exist
    """
    if not input_path.exists():
        raise FileNotFoundError(f"Seed file not found: {input_path}")

    with open(input_path, encoding="utf-8") as f:
        seed_data = json.load(f)

    if clear_existing:
        print("Clearing existing items...")
        db.query(ContentItem).delete()
        db.commit()

    stats = {"items": 0, "skipped": 0}

    existing_ids = {row.id for row in db.query(ContentItem.id).all()}
    for item_data in seed_data.get("items", []):
        if item_data["id"] in existing_ids:
            stats["skipped"] += 1
            continue
        row = ContentItem(
            id=item_data["id"],
            category=item_data["category"],
            slug=item_data.get("slug"),
            position=item_data.get("position", 0),
        )
        row.subcategories = item_data.get("subcategories")
        row.payload = item_data["payload"]
        db.add(row)
        existing_ids.add(row.id)
        stats["items"] += 1
    db.commit()

    print(f"Loaded seed data from {input_path}")
    print(f"  Items: {stats['items']} new, {stats['skipped']} skipped (already exist)")

    return stats


def main():
    """CLI entry point."""
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    command = sys.argv[1]
    create_tables()
    db = next(get_db())

    try:
        if command == "export":
            export_seed_data(db)
        elif command == "load":
            try:
                load_seed_data(db, clear_existing="--clear" in sys.argv)
            except FileNotFoundError as e:
                print(f"Error: {e}")
                sys.exit(1)
        elif command == "demo":
            print(f"Inserted {ensure_fallback_catalog(db)} demo items")
        else:
            print(f"Unknown command: {command}")
            print(__doc__)
            sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
