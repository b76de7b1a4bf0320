"""Filter, sort and paginate content item lists.

Every function here is pure: items are plain dicts as returned by the
content backend and are never mutated.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from velo_altitude.schemas.category import (
    CategoryConfig,
    MultiSelectFilter,
    RangeFilter,
    SelectFilter,
)
from velo_altitude.utils.localization import localize

SEARCH_KEY = "search"
MIN_SUFFIX = "_min"
MAX_SUFFIX = "_max"
DEFAULT_PAGE_SIZE = 12

# Bare sort keys that order numerically, highest first
BARE_NUMERIC_SORTS = ("altitude", "difficulty", "gradient")
DATE_FIELDS = ("last_updated", "createdAt")


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of one filter -> sort -> paginate run."""

    visible_items: list[dict]
    filtered_count: int
    total_count: int
    total_pages: int
    page: int
    page_size: int


def is_empty_value(value: Any) -> bool:
    """Absent, blank and empty-list values impose no constraint."""
    return value is None or value == "" or (isinstance(value, (list, tuple)) and not value)


def to_number(value: Any) -> float | None:
    """Coerce a value to float, None when it is not numeric."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def _values_equal(item_value: Any, filter_value: Any) -> bool:
    # Query strings carry "5" where items carry 5
    left, right = to_number(item_value), to_number(filter_value)
    if left is not None and right is not None:
        return left == right
    if item_value is None:
        return False
    return str(item_value) == str(filter_value)


def search_text(item: dict, language: str = "fr") -> str:
    """Lower-cased concatenation of localized name, description and tags."""
    parts = [
        localize(item.get("name"), language),
        localize(item.get("description"), language),
    ]
    tags = item.get("tags") or []
    parts.extend(str(tag) for tag in tags)
    return " ".join(parts).casefold()


def matches_filter(item: dict, key: str, value: Any, language: str = "fr") -> bool:
    """Check one active filter entry against an item."""
    if is_empty_value(value):
        return True

    if isinstance(value, (list, tuple, set)):
        field = item.get(key)
        if field is None:
            return False
        field_values = field if isinstance(field, (list, tuple)) else [field]
        return any(_values_equal(f, v) for f in field_values for v in value)

    if key.endswith(MIN_SUFFIX):
        field = to_number(item.get(key[: -len(MIN_SUFFIX)]))
        bound = to_number(value)
        return field is not None and bound is not None and field >= bound

    if key.endswith(MAX_SUFFIX):
        field = to_number(item.get(key[: -len(MAX_SUFFIX)]))
        bound = to_number(value)
        return field is not None and bound is not None and field <= bound

    if key == SEARCH_KEY:
        return str(value).strip().casefold() in search_text(item, language)

    return _values_equal(item.get(key), value)


def apply_filters(
    items: list[dict], active_filters: dict[str, Any], language: str = "fr"
) -> list[dict]:
    """Keep items that satisfy every active filter entry."""
    if not active_filters:
        return list(items)
    return [
        item
        for item in items
        if all(
            matches_filter(item, key, value, language)
            for key, value in active_filters.items()
        )
    ]


def _item_date(item: dict) -> float | None:
    for field in DATE_FIELDS:
        raw = item.get(field)
        if not raw:
            continue
        if isinstance(raw, datetime):
            return raw.timestamp()
        number = to_number(raw)
        if number is not None:
            return number
        try:
            return datetime.fromisoformat(str(raw).replace("Z", "+00:00")).timestamp()
        except ValueError:
            continue
    return None


def _sort_by_number(items: list[dict], getter, descending: bool) -> list[dict]:
    """Stable numeric sort, items without a value keep their order at the end."""
    present = [item for item in items if getter(item) is not None]
    missing = [item for item in items if getter(item) is None]
    return sorted(present, key=getter, reverse=descending) + missing


def sort_items(items: list[dict], sort_key: str | None, language: str = "fr") -> list[dict]:
    """Stable sort of items by a sort key.

    Supported keys: featured, name_asc, name_desc, date_asc, date_desc,
    <field>_asc, <field>_desc, and the bare keys altitude, difficulty and
    gradient (highest first). Anything else keeps input order.
    """
    items = list(items)
    if not sort_key:
        return items

    if sort_key == "featured":
        return _sort_by_number(items, lambda i: to_number(i.get("featured")), True)

    if sort_key in ("name_asc", "name_desc"):
        return sorted(
            items,
            key=lambda i: localize(i.get("name"), language).casefold(),
            reverse=sort_key == "name_desc",
        )

    if sort_key in ("date_asc", "date_desc"):
        return _sort_by_number(items, _item_date, sort_key == "date_desc")

    if sort_key in BARE_NUMERIC_SORTS:
        return _sort_by_number(items, lambda i: to_number(i.get(sort_key)), True)

    field, _, direction = sort_key.rpartition("_")
    if field and direction in ("asc", "desc"):
        return _sort_by_number(
            items, lambda i: to_number(i.get(field)), direction == "desc"
        )

    return items


def count_pages(item_count: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    return math.ceil(item_count / page_size) if item_count > 0 else 0


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp a requested page into [1, total_pages] (page 1 when empty)."""
    if page < 1:
        return 1
    return min(page, max(total_pages, 1))


def paginate(
    items: list[dict], page: int, page_size: int = DEFAULT_PAGE_SIZE
) -> tuple[list[dict], int, int]:
    """Slice one page of items.

    Returns:
        Tuple of (page items, total pages, effective page)
    """
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    total_pages = count_pages(len(items), page_size)
    page = clamp_page(page, total_pages)
    start = (page - 1) * page_size
    return items[start : start + page_size], total_pages, page


def run_pipeline(
    items: list[dict],
    active_filters: dict[str, Any],
    sort_key: str | None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    language: str = "fr",
) -> PipelineResult:
    """Filter, then sort, then paginate."""
    filtered = apply_filters(items, active_filters, language)
    ordered = sort_items(filtered, sort_key, language)
    visible, total_pages, effective_page = paginate(ordered, page, page_size)
    return PipelineResult(
        visible_items=visible,
        filtered_count=len(filtered),
        total_count=len(items),
        total_pages=total_pages,
        page=effective_page,
        page_size=page_size,
    )


def range_filter_entries(
    definition: RangeFilter, low: float | None, high: float | None
) -> dict[str, float]:
    """Derive <key>_min / <key>_max entries for a range selection.

    A bound is only kept when it narrows the definition's default range.
    """
    entries = {}
    if low is not None and low > definition.min:
        entries[definition.min_key] = low
    if high is not None and high < definition.max:
        entries[definition.max_key] = high
    return entries


def format_number(value: Any) -> str:
    """Render 2000.0 as "2000" and 6.5 as "6.5"."""
    number = to_number(value)
    if number is None:
        return str(value)
    if number.is_integer():
        return str(int(number))
    return str(number)


def describe_active_filters(
    config: CategoryConfig | None, active_filters: dict[str, Any], language: str = "fr"
) -> list[dict[str, str]]:
    """Human-readable labels for the active filters, one per entry."""
    if not config:
        return []

    definitions = {f.key: f for f in config.filters}
    chips = []
    for key, value in active_filters.items():
        if is_empty_value(value):
            continue

        if key.endswith(MIN_SUFFIX) or key.endswith(MAX_SUFFIX):
            base_key = key[:-4]
            definition = definitions.get(base_key)
            name = localize(definition.label, language) if definition else base_key
            operator = "≥" if key.endswith(MIN_SUFFIX) else "≤"
            unit = f" {definition.unit}" if definition and getattr(definition, "unit", None) else ""
            chips.append({"key": key, "label": f"{name} {operator} {format_number(value)}{unit}"})
            continue

        definition = definitions.get(key)
        if definition is None:
            continue
        name = localize(definition.label, language)

        if isinstance(definition, (SelectFilter, MultiSelectFilter)):
            labels = {o.value: localize(o.label, language) for o in definition.options}
            values = value if isinstance(value, (list, tuple)) else [value]
            text = ", ".join(labels.get(str(v), str(v)) for v in values)
            chips.append({"key": key, "label": f"{name}: {text}"})
        else:
            chips.append({"key": key, "label": f"{name}: {value}"})

    return chips
