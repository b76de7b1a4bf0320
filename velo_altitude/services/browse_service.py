"""Category browsing: configuration, fetch, filter/sort/paginate and links."""

import logging
from typing import Literal

from velo_altitude.config import settings
from velo_altitude.data.categories import get_category_config, get_default_sort
from velo_altitude.schemas.content import (
    ActiveFilterChip,
    BrowseResponse,
    NavigateRequest,
    NavigateResponse,
    PaginationLinks,
)
from velo_altitude.services.catalog_service import CatalogService
from velo_altitude.services.category_service import (
    build_header,
    localize_filters,
    localize_sort_options,
)
from velo_altitude.services.data_service import ContentClient, ContentFetchError
from velo_altitude.services.filter_service import describe_active_filters, run_pipeline
from velo_altitude.services.url_service import (
    ViewState,
    build_pagination_links,
    build_url,
    navigate,
    parse_view_state,
    serialize_view_state,
)

logger = logging.getLogger(__name__)

Source = Literal["remote", "local"]


def category_path(category: str, subcategory: str | None = None) -> str:
    """Public path of a category page."""
    return f"/{category}/{subcategory}" if subcategory else f"/{category}"


class BrowseService:
    """Service assembling one rendered page of a category listing."""

    def __init__(
        self,
        client: ContentClient,
        catalog: CatalogService,
        page_size: int | None = None,
        fallback_on_error: bool | None = None,
    ):
        """Initialize with the remote client and the local catalog."""
        self.client = client
        self.catalog = catalog
        self.page_size = page_size or settings.page_size
        self.fallback_on_error = (
            settings.fallback_on_fetch_error if fallback_on_error is None else fallback_on_error
        )

    async def load_items(
        self, category: str, subcategory: str | None, source: Source
    ) -> tuple[list[dict], Source]:
        """Fetch raw items from the requested source.

        Raises:
            ContentFetchError: If the remote fetch fails and fallback is off
        """
        if source == "local":
            return self.catalog.get_fallback_data(category, subcategory), "local"

        try:
            return await self.client.fetch_category_data(category, subcategory), "remote"
        except ContentFetchError as e:
            if not self.fallback_on_error:
                raise
            logger.warning(f"Remote fetch failed for {category}, serving local catalog: {e}")
            return self.catalog.get_fallback_data(category, subcategory), "local"

    async def browse(
        self,
        category: str,
        subcategory: str | None = None,
        query: str = "",
        language: str = "fr",
        source: Source = "remote",
    ) -> BrowseResponse:
        """Build the page described by a query string.

        Args:
            category: Category key
            subcategory: Optional subcategory key
            query: Query string (page, sort and filter parameters)
            language: Display language
            source: "remote" for the content backend, "local" for the demo catalog

        Returns:
            BrowseResponse with the visible items and pagination links

        Raises:
            ContentFetchError: If items cannot be loaded
        """
        config = get_category_config(category)
        if config is None:
            logger.info(f"No configuration for category '{category}', rendering minimal header")
        default_sort = get_default_sort(config)
        state = parse_view_state(query, config)

        items, used_source = await self.load_items(category, subcategory, source)

        result = run_pipeline(
            items,
            state.filters,
            state.sort,
            page=state.page,
            page_size=self.page_size,
            language=language,
        )
        # The effective page can differ when the request pointed past the end
        state = state.with_page(result.page)

        base_path = category_path(category, subcategory)
        links = build_pagination_links(base_path, state, result.total_pages, default_sort)

        return BrowseResponse(
            header=build_header(category, config, language, subcategory),
            items=result.visible_items,
            total=result.total_count,
            filtered_total=result.filtered_count,
            page=result.page,
            page_size=result.page_size,
            total_pages=result.total_pages,
            sort=state.sort,
            filters=state.filters,
            active_filters=[
                ActiveFilterChip(**chip)
                for chip in describe_active_filters(config, state.filters, language)
            ],
            available_filters=localize_filters(config, language),
            sort_options=localize_sort_options(config, language),
            query_string=serialize_view_state(state, default_sort),
            links=PaginationLinks(**links),
            is_empty=result.filtered_count == 0,
            source=used_source,
        )


def apply_navigation(category: str, request: NavigateRequest) -> NavigateResponse:
    """Apply a user action to the state encoded in request.query.

    Raises:
        ValueError: If the action lacks its argument
    """
    config = get_category_config(category)
    default_sort = get_default_sort(config)
    state: ViewState = parse_view_state(request.query, config)
    state = navigate(
        state,
        request.action,
        filters=request.filters,
        sort=request.sort,
        page=request.page,
    )
    # Drop anything the category does not know about
    state = parse_view_state(serialize_view_state(state, default_sort), config)
    base_path = category_path(category, request.subcategory)
    return NavigateResponse(
        query_string=serialize_view_state(state, default_sort),
        url=build_url(base_path, state, default_sort),
        page=state.page,
        sort=state.sort,
        filters=state.filters,
    )
