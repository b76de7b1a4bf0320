"""Business logic services."""

from velo_altitude.services.browse_service import BrowseService
from velo_altitude.services.catalog_service import CatalogService
from velo_altitude.services.data_service import ContentClient, ContentFetchError

__all__ = [
    "BrowseService",
    "CatalogService",
    "ContentClient",
    "ContentFetchError",
]
