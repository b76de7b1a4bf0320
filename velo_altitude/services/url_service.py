"""Map browsing view state to and from query strings."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any
from urllib.parse import parse_qsl, urlencode

from velo_altitude.data.categories import DEFAULT_SORT, get_default_sort
from velo_altitude.schemas.category import (
    CategoryConfig,
    MultiSelectFilter,
    RangeFilter,
)
from velo_altitude.services.filter_service import format_number, is_empty_value, to_number

PAGE_PARAM = "page"
SORT_PARAM = "sort"
RESERVED_PARAMS = (PAGE_PARAM, SORT_PARAM, "lang", "source")

NAVIGATION_ACTIONS = ("filter", "sort", "page", "reset")


@dataclass(frozen=True)
class ViewState:
    """Active filters, sort key and current page of a category page."""

    filters: dict[str, Any] = field(default_factory=dict)
    sort: str = DEFAULT_SORT
    page: int = 1

    def __hash__(self) -> int:
        # Multi-select values are lists; hash them as tuples
        frozen_filters = frozenset(
            (key, tuple(value) if isinstance(value, list) else value)
            for key, value in self.filters.items()
        )
        return hash((frozen_filters, self.sort, self.page))

    def with_filters(self, filters: dict[str, Any]) -> "ViewState":
        """Replace the active filters; always returns to page 1."""
        cleaned = {k: v for k, v in filters.items() if not is_empty_value(v)}
        return replace(self, filters=cleaned, page=1)

    def with_sort(self, sort: str) -> "ViewState":
        return replace(self, sort=sort, page=1)

    def with_page(self, page: int) -> "ViewState":
        return replace(self, page=max(int(page), 1))

    def reset_filters(self) -> "ViewState":
        return replace(self, filters={}, page=1)


def _serialize_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


def serialize_view_state(state: ViewState, default_sort: str = DEFAULT_SORT) -> str:
    """Build the canonical query string (without "?") for a view state.

    Page 1 and the default sort are omitted, so the default state
    serializes to an empty string.
    """
    params = []
    for key, value in state.filters.items():
        if is_empty_value(value):
            continue
        params.append((key, _serialize_value(value)))
    if state.page > 1:
        params.append((PAGE_PARAM, str(state.page)))
    if state.sort and state.sort != default_sort:
        params.append((SORT_PARAM, state.sort))
    return urlencode(params, safe=",")


def _parse_number(raw: str) -> int | float | None:
    number = to_number(raw)
    if number is None:
        return None
    return int(number) if number.is_integer() else number


def _parse_page(raw: str | None) -> int:
    if raw is None:
        return 1
    try:
        page = int(raw)
    except ValueError:
        return 1
    return page if page > 1 else 1


def _query_pairs(query: str | Mapping[str, str] | None) -> dict[str, str]:
    if not query:
        return {}
    if isinstance(query, Mapping):
        return {str(k): str(v) for k, v in query.items()}
    # Last occurrence wins for repeated keys
    return dict(parse_qsl(query.lstrip("?"), keep_blank_values=False))


def parse_view_state(
    query: str | Mapping[str, str] | None, config: CategoryConfig | None
) -> ViewState:
    """Parse a query string back into a view state.

    Only keys known to the category configuration become filters;
    multiSelect values are split on commas and range bounds parsed as
    numbers. Without a configuration only page and sort are read.
    """
    params = _query_pairs(query)
    default_sort = get_default_sort(config)
    sort = params.get(SORT_PARAM) or default_sort
    page = _parse_page(params.get(PAGE_PARAM))

    filters: dict[str, Any] = {}
    if config:
        definitions = {f.key: f for f in config.filters}
        range_keys = {}
        for definition in config.filters:
            if isinstance(definition, RangeFilter):
                range_keys[definition.min_key] = definition
                range_keys[definition.max_key] = definition

        for key, raw in params.items():
            if key in RESERVED_PARAMS or raw == "":
                continue
            if key in range_keys:
                number = _parse_number(raw)
                if number is not None:
                    filters[key] = number
                continue
            definition = definitions.get(key)
            if definition is None or isinstance(definition, RangeFilter):
                continue
            if isinstance(definition, MultiSelectFilter):
                values = [v for v in raw.split(",") if v]
                if values:
                    filters[key] = values
            else:
                filters[key] = raw

    return ViewState(filters=filters, sort=sort, page=page)


def build_url(base_path: str, state: ViewState, default_sort: str = DEFAULT_SORT) -> str:
    query = serialize_view_state(state, default_sort)
    return f"{base_path}?{query}" if query else base_path


def build_pagination_links(
    base_path: str,
    state: ViewState,
    total_pages: int,
    default_sort: str = DEFAULT_SORT,
) -> dict[str, str | None]:
    """Canonical URL plus rel="prev" / rel="next" targets for a page."""
    links: dict[str, str | None] = {
        "canonical": build_url(base_path, state, default_sort),
        "prev": None,
        "next": None,
    }
    if state.page > 1:
        links["prev"] = build_url(base_path, state.with_page(state.page - 1), default_sort)
    if state.page < total_pages:
        links["next"] = build_url(base_path, state.with_page(state.page + 1), default_sort)
    return links


def navigate(
    state: ViewState,
    action: str,
    filters: dict[str, Any] | None = None,
    sort: str | None = None,
    page: int | None = None,
) -> ViewState:
    """Apply one user action to a view state.

    Raises:
        ValueError: If the action is unknown or lacks its argument
    """
    if action == "filter":
        return state.with_filters(filters or {})
    if action == "sort":
        if not sort:
            raise ValueError("Sort action requires a sort key")
        return state.with_sort(sort)
    if action == "page":
        if page is None:
            raise ValueError("Page action requires a page number")
        return state.with_page(page)
    if action == "reset":
        return state.reset_filters()
    raise ValueError(
        f"Unknown navigation action '{action}'. Expected one of: {', '.join(NAVIGATION_ACTIONS)}"
    )
