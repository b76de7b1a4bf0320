"""Content item, related content, recommendation and search endpoints."""

from fastapi import APIRouter, HTTPException, Query, status

from velo_altitude.dependencies import ContentApi, CurrentViewer, DbSession
from velo_altitude.schemas.content import (
    ContentItemResponse,
    ItemListResponse,
    RelatedContentResponse,
)
from velo_altitude.services.catalog_service import CatalogService
from velo_altitude.services.category_service import relation_label
from velo_altitude.services.data_service import ContentFetchError, ContentNotFoundError
from velo_altitude.utils.localization import normalize_language

router = APIRouter()


@router.get("/search", response_model=ItemListResponse)
async def search_content(
    client: ContentApi,
    viewer: CurrentViewer,
    q: str = Query(..., min_length=1, description="Search terms"),
    lang: str | None = Query(None, description="Display language (fr, en); defaults to DEFAULT_LANGUAGE"),
):
    """Search every category."""
    try:
        items = await client.search_content(q, normalize_language(lang))
    except ContentFetchError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Search is currently unavailable: {e}",
        )
    return ItemListResponse(items=items, total=len(items))


@router.get("/related/{category}/{item_id}", response_model=RelatedContentResponse)
async def get_related_content(
    category: str,
    item_id: str,
    client: ContentApi,
    viewer: CurrentViewer,
    subcategory: str | None = Query(None, description="Subcategory of the item"),
    lang: str | None = Query(None, description="Display language (fr, en); defaults to DEFAULT_LANGUAGE"),
):
    """Get related items grouped by relation type.

    Returns empty relations when the backend cannot provide them.
    """
    language = normalize_language(lang)
    relations = await client.fetch_related_content(category, subcategory, item_id, language)
    return RelatedContentResponse(
        category=category,
        item_id=item_id,
        relations=relations,
        labels={relation: relation_label(relation, language) for relation in relations},
    )


@router.get("/recommendations/{category}", response_model=ItemListResponse)
@router.get("/recommendations/{category}/{subcategory}", response_model=ItemListResponse)
async def get_recommendations(
    category: str,
    client: ContentApi,
    viewer: CurrentViewer,
    subcategory: str | None = None,
    lang: str | None = Query(None, description="Display language (fr, en); defaults to DEFAULT_LANGUAGE"),
):
    """Get recommended items of a category."""
    items = await client.fetch_recommendations(category, subcategory, normalize_language(lang))
    return ItemListResponse(items=items, total=len(items))


@router.get("/{category}/{item_id}", response_model=ContentItemResponse)
async def get_item(
    category: str,
    item_id: str,
    client: ContentApi,
    db: DbSession,
    viewer: CurrentViewer,
    source: str = Query("remote", pattern="^(remote|local)$", description="Item source"),
):
    """Get a single item by id or slug."""
    if source == "local":
        item = CatalogService(db).get_item(category, item_id)
        if not item:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Item '{item_id}' not found in {category}",
            )
        return item

    try:
        return await client.fetch_item(category, item_id)
    except ContentNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Item '{item_id}' not found in {category}",
        )
    except ContentFetchError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )
