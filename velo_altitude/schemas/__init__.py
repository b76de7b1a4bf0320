"""Pydantic schemas for request/response validation."""

from velo_altitude.schemas.category import (
    CategoryConfig,
    CategoryHeader,
    CategoryResponse,
    CategorySummary,
    FilterDefinition,
)
from velo_altitude.schemas.content import (
    BrowseResponse,
    ContentItemResponse,
    ItemListResponse,
    NavigateRequest,
    NavigateResponse,
    RelatedContentResponse,
)

__all__ = [
    "CategoryConfig",
    "CategoryHeader",
    "CategoryResponse",
    "CategorySummary",
    "FilterDefinition",
    "BrowseResponse",
    "ContentItemResponse",
    "ItemListResponse",
    "NavigateRequest",
    "NavigateResponse",
    "RelatedContentResponse",
]
