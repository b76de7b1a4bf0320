"""FastMCP server exposing Velo-Altitude browsing as LLM tools."""

import json

import httpx
from fastmcp import FastMCP

from velo_altitude.config import settings
from velo_altitude.data.categories import get_all_categories
from velo_altitude.models.database import get_db
from velo_altitude.services.browse_service import BrowseService
from velo_altitude.services.catalog_service import CatalogService
from velo_altitude.services.category_service import build_summary
from velo_altitude.services.data_service import ContentClient, ContentFetchError
from velo_altitude.utils.localization import normalize_language

# Initialize FastMCP server
mcp = FastMCP(
    "Velo-Altitude Catalog",
    instructions="Tools for browsing the Velo-Altitude cycling catalog: mountain passes (cols), training programs, nutrition and challenges. Use list_categories to discover filters, then browse_category with a query string such as 'region=alps&altitude_min=2000'.",
)


def get_db_session():
    """Get a database session."""
    return next(get_db())


@mcp.tool()
def list_categories(language: str | None = None) -> str:
    """List content categories and their subcategories.

    Args:
        language: Display language ('fr' or 'en'); the configured default when omitted

    Returns:
        JSON string with one entry per category
    """
    language = normalize_language(language)
    summaries = [
        build_summary(config, language).model_dump()
        for config in get_all_categories().values()
    ]
    return json.dumps(summaries, ensure_ascii=False, indent=2)


@mcp.tool()
async def browse_category(
    category: str,
    subcategory: str | None = None,
    query: str = "",
    language: str | None = None,
    source: str = "remote",
) -> str:
    """Browse one page of a category.

    Args:
        category: Category key ('cols', 'programs', 'nutrition', 'challenges')
        subcategory: Optional subcategory key (e.g., 'alps', 'famous')
        query: Filter/sort/page query string (e.g., 'difficulty=5&sort=altitude_desc&page=2')
        language: Display language ('fr' or 'en'); the configured default when omitted
        source: 'remote' for the content backend, 'local' for the demo catalog

    Returns:
        JSON string with the visible items, counts and pagination links
    """
    db = get_db_session()
    try:
        async with httpx.AsyncClient(timeout=settings.request_timeout_seconds) as http:
            service = BrowseService(ContentClient(http), CatalogService(db))
            result = await service.browse(
                category,
                subcategory,
                query=query,
                language=normalize_language(language),
                source="local" if source == "local" else "remote",
            )
        return result.model_dump_json(indent=2)
    except ContentFetchError as e:
        return json.dumps({"error": str(e)})
    finally:
        db.close()


@mcp.tool()
async def get_related_content(category: str, item_id: str, language: str | None = None) -> str:
    """Get items related to a content item, grouped by relation type.

    Args:
        category: Category key of the item
        item_id: Item id or slug
        language: Display language ('fr' or 'en'); the configured default when omitted

    Returns:
        JSON string mapping relation type to items (empty when unavailable)
    """
    async with httpx.AsyncClient(timeout=settings.request_timeout_seconds) as http:
        relations = await ContentClient(http).fetch_related_content(
            category, item_id=item_id, language=normalize_language(language)
        )
    return json.dumps(relations, ensure_ascii=False, indent=2)


if __name__ == "__main__":
    mcp.run()
