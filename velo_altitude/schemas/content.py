"""Pydantic schemas for content items and browse results."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from velo_altitude.schemas.category import CategoryHeader, LocalizedFilter, LocalizedOption


class ContentItemResponse(BaseModel):
    """A content item; category-specific attributes pass through unchanged."""

    model_config = ConfigDict(extra="allow")

    id: str | int | None = None
    slug: str | None = None
    name: str | dict[str, str | None] | None = None
    description: str | dict[str, str | None] | None = None
    tags: list[Any] | None = None
    featured: Any = None


class PaginationLinks(BaseModel):
    """Canonical URL and adjacent page links."""

    canonical: str
    prev: str | None = None
    next: str | None = None


class ActiveFilterChip(BaseModel):
    """Readable description of one active filter."""

    key: str
    label: str


class BrowseResponse(BaseModel):
    """One rendered page of a category listing."""

    header: CategoryHeader
    items: list[ContentItemResponse]
    total: int
    filtered_total: int
    page: int
    page_size: int
    total_pages: int
    sort: str
    filters: dict[str, Any]
    active_filters: list[ActiveFilterChip]
    available_filters: list[LocalizedFilter]
    sort_options: list[LocalizedOption]
    query_string: str
    links: PaginationLinks
    is_empty: bool
    source: Literal["remote", "local"]


class NavigateRequest(BaseModel):
    """A user action applied to the current view state."""

    query: str = ""
    action: Literal["filter", "sort", "page", "reset"]
    filters: dict[str, Any] | None = None
    sort: str | None = None
    page: int | None = Field(None, ge=1)
    subcategory: str | None = None


class NavigateResponse(BaseModel):
    """Navigation target after applying an action."""

    query_string: str
    url: str
    page: int
    sort: str
    filters: dict[str, Any]


class RelatedContentResponse(BaseModel):
    """Related items grouped by relation type."""

    category: str
    item_id: str
    relations: dict[str, list[ContentItemResponse]]
    labels: dict[str, str]


class ItemListResponse(BaseModel):
    """Plain list of items (recommendations, search)."""

    items: list[ContentItemResponse]
    total: int
