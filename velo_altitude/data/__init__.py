"""Static category configuration and demo data."""

from velo_altitude.data.categories import CATEGORY_REGISTRY, get_all_categories, get_category_config
from velo_altitude.data.fallback_data import FALLBACK_DATA, ensure_fallback_catalog

__all__ = [
    "CATEGORY_REGISTRY",
    "get_all_categories",
    "get_category_config",
    "FALLBACK_DATA",
    "ensure_fallback_catalog",
]
