"""Category browsing endpoints."""

from typing import Literal

from fastapi import APIRouter, HTTPException, Query, Request, status

from velo_altitude.dependencies import Browser, CurrentViewer
from velo_altitude.schemas.content import BrowseResponse, NavigateRequest, NavigateResponse
from velo_altitude.services.browse_service import apply_navigation
from velo_altitude.services.data_service import ContentFetchError
from velo_altitude.utils.localization import normalize_language

router = APIRouter()


async def _browse(
    request: Request,
    service,
    category: str,
    subcategory: str | None,
    lang: str | None,
    source: str,
) -> BrowseResponse:
    try:
        return await service.browse(
            category,
            subcategory,
            query=request.url.query,
            language=normalize_language(lang),
            source=source,
        )
    except ContentFetchError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Content for '{category}' is currently unavailable: {e}",
        )


@router.get("/{category}", response_model=BrowseResponse)
async def browse_category(
    category: str,
    request: Request,
    service: Browser,
    viewer: CurrentViewer,
    lang: str | None = Query(None, description="Display language (fr, en); defaults to DEFAULT_LANGUAGE"),
    source: Literal["remote", "local"] = Query("remote", description="Item source"),
):
    """Render one page of a category.

    Filters, sort and page are read from the query string, e.g.
    ?region=alps&altitude_min=2000&sort=altitude_desc&page=2
    """
    return await _browse(request, service, category, None, lang, source)


@router.get("/{category}/{subcategory}", response_model=BrowseResponse)
async def browse_subcategory(
    category: str,
    subcategory: str,
    request: Request,
    service: Browser,
    viewer: CurrentViewer,
    lang: str | None = Query(None, description="Display language (fr, en); defaults to DEFAULT_LANGUAGE"),
    source: Literal["remote", "local"] = Query("remote", description="Item source"),
):
    """Render one page of a subcategory."""
    return await _browse(request, service, category, subcategory, lang, source)


@router.post("/{category}/navigate", response_model=NavigateResponse)
async def navigate_category(
    category: str,
    body: NavigateRequest,
    viewer: CurrentViewer,
):
    """Apply a filter, sort, page or reset action and return the new URL.

    Filter and sort changes always return to page 1.
    """
    try:
        return apply_navigation(category, body)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
