"""Utility modules."""

from velo_altitude.utils.auth import Viewer, get_current_viewer, verify_api_key
from velo_altitude.utils.localization import localize, normalize_language

__all__ = [
    "Viewer",
    "get_current_viewer",
    "verify_api_key",
    "localize",
    "normalize_language",
]
