"""Category API endpoints."""

from fastapi import APIRouter, HTTPException, Query, status

from velo_altitude.data.categories import get_all_categories, get_category_config
from velo_altitude.dependencies import CurrentViewer
from velo_altitude.schemas.category import CategoryResponse, CategorySummary, LocalizedFilter
from velo_altitude.services.category_service import (
    build_category_response,
    build_summary,
    localize_filters,
)
from velo_altitude.utils.localization import normalize_language

router = APIRouter()


@router.get("", response_model=list[CategorySummary])
async def list_categories(
    viewer: CurrentViewer,
    lang: str | None = Query(None, description="Display language (fr, en); defaults to DEFAULT_LANGUAGE"),
):
    """List all categories with their sub-navigation."""
    language = normalize_language(lang)
    return [build_summary(config, language) for config in get_all_categories().values()]


@router.get("/{category_key}", response_model=CategoryResponse)
async def get_category(
    category_key: str,
    viewer: CurrentViewer,
    lang: str | None = Query(None, description="Display language (fr, en); defaults to DEFAULT_LANGUAGE"),
):
    """Get the localized configuration of a category."""
    config = get_category_config(category_key)

    if not config:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category '{category_key}' not found",
        )

    return build_category_response(config, normalize_language(lang))


@router.get("/{category_key}/filters", response_model=list[LocalizedFilter])
async def get_category_filters(
    category_key: str,
    viewer: CurrentViewer,
    lang: str | None = Query(None, description="Display language (fr, en); defaults to DEFAULT_LANGUAGE"),
):
    """Get filter definitions in a format suitable for building filter UIs.

    Unknown categories have no filters.
    """
    return localize_filters(get_category_config(category_key), normalize_language(lang))
