"""Client for the remote content backend."""

import logging
from typing import Any

import httpx

from velo_altitude.config import settings

logger = logging.getLogger(__name__)


class ContentFetchError(Exception):
    """Raised when the content backend cannot be reached or returns bad data."""


class ContentNotFoundError(ContentFetchError):
    """Raised when the content backend answers 404."""


def _extract_items(payload: Any) -> list[dict]:
    """Accept a bare list or an object wrapping it under items/data."""
    items = None
    if isinstance(payload, list):
        items = payload
    elif isinstance(payload, dict):
        for key in ("items", "data"):
            if isinstance(payload.get(key), list):
                items = payload[key]
                break
    if items is None:
        raise ContentFetchError("Unexpected response shape from content backend")
    if not all(isinstance(item, dict) for item in items):
        raise ContentFetchError("Content backend returned a non-object item")
    return items


class ContentClient:
    """Async wrapper around the content REST API.

    One request per call; no caching and no retries. The underlying
    httpx.AsyncClient is injected so its lifetime belongs to the caller.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize with an HTTP client and backend location."""
        self.http = http
        self.base_url = (base_url or settings.content_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds

    def _url(self, *parts: str | None) -> str:
        path = "/".join(p.strip("/") for p in parts if p)
        return f"{self.base_url}/{path}"

    async def _get_json(self, url: str, params: dict[str, str] | None = None) -> Any:
        try:
            response = await self.http.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise ContentNotFoundError(f"Not found: {url}") from e
            raise ContentFetchError(f"Failed to fetch {url}: {e}") from e
        except httpx.HTTPError as e:
            raise ContentFetchError(f"Failed to fetch {url}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise ContentFetchError(f"Invalid JSON from {url}: {e}") from e

    async def fetch_category_data(
        self, category: str, subcategory: str | None = None
    ) -> list[dict]:
        """Fetch the unfiltered item list of a category.

        Args:
            category: Category key (cols, programs, nutrition, challenges)
            subcategory: Optional subcategory key

        Returns:
            List of content items

        Raises:
            ContentFetchError: On network, status or decoding failure
        """
        url = self._url(category, subcategory)
        logger.info(f"Fetching category data from {url}")
        return _extract_items(await self._get_json(url))

    async def fetch_item(self, category: str, item_id: str) -> dict:
        """Fetch a single item by id or slug."""
        payload = await self._get_json(self._url(category, item_id))
        if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
            return payload["data"]
        if not isinstance(payload, dict):
            raise ContentFetchError("Unexpected response shape from content backend")
        return payload

    async def fetch_related_content(
        self,
        category: str,
        subcategory: str | None = None,
        item_id: str | None = None,
        language: str = "fr",
    ) -> dict[str, list[dict]]:
        """Fetch related items grouped by relation type (same_region, popular...).

        Never raises: any failure yields an empty mapping so related panels
        stay optional.
        """
        params = {"lang": language}
        if subcategory:
            params["subcategory"] = subcategory
        url = self._url("related", category, item_id)
        try:
            payload = await self._get_json(url, params=params)
        except ContentFetchError as e:
            logger.warning(f"Related content unavailable for {category}/{item_id}: {e}")
            return {}

        if not isinstance(payload, dict):
            logger.warning(f"Ignoring related content with unexpected shape from {url}")
            return {}
        return {
            relation: [item for item in items if isinstance(item, dict)]
            for relation, items in payload.items()
            if isinstance(items, list)
        }

    async def fetch_recommendations(
        self, category: str, subcategory: str | None = None, language: str = "fr"
    ) -> list[dict]:
        """Fetch recommended items; an empty list on failure."""
        url = self._url("recommendations", category, subcategory)
        try:
            return _extract_items(await self._get_json(url, params={"lang": language}))
        except ContentFetchError as e:
            logger.warning(f"Recommendations unavailable for {category}: {e}")
            return []

    async def search_content(self, query: str, language: str = "fr") -> list[dict]:
        """Full-text search across every category.

        Raises:
            ContentFetchError: On network, status or decoding failure
        """
        payload = await self._get_json(
            self._url("search"), params={"q": query, "lang": language}
        )
        return _extract_items(payload)
