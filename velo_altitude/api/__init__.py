"""API routers."""

from velo_altitude.api import browse, categories, content

__all__ = ["browse", "categories", "content"]
