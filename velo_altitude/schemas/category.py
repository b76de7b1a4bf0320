"""Pydantic schemas for category configuration."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator

LocalizedText = dict[str, str]


class FilterOption(BaseModel):
    """One selectable value of a select or multiSelect filter."""

    value: str
    label: LocalizedText


class SearchFilter(BaseModel):
    """Free-text search over name, description and tags."""

    type: Literal["search"] = "search"
    key: str
    label: LocalizedText


class SelectFilter(BaseModel):
    """Single value from an enumerated option list."""

    type: Literal["select"] = "select"
    key: str
    label: LocalizedText
    options: list[FilterOption]


class RangeFilter(BaseModel):
    """Numeric [min, max] range, stored as <key>_min / <key>_max when narrowed."""

    type: Literal["range"] = "range"
    key: str
    label: LocalizedText
    min: float
    max: float
    step: float = 1
    unit: str | None = None

    @property
    def min_key(self) -> str:
        return f"{self.key}_min"

    @property
    def max_key(self) -> str:
        return f"{self.key}_max"


class MultiSelectFilter(BaseModel):
    """Set of values; an item matches if any selected value is present."""

    type: Literal["multiSelect"] = "multiSelect"
    key: str
    label: LocalizedText
    options: list[FilterOption]


FilterDefinition = Annotated[
    Union[SearchFilter, SelectFilter, RangeFilter, MultiSelectFilter],
    Field(discriminator="type"),
]


class SortOption(BaseModel):
    """Sort key with its display label."""

    value: str
    label: LocalizedText


class Subcategory(BaseModel):
    """Sub-navigation entry of a category."""

    key: str
    label: LocalizedText
    description: LocalizedText


class CategoryConfig(BaseModel):
    """Static configuration of a content category."""

    key: str
    label: LocalizedText
    description: LocalizedText
    filters: list[FilterDefinition] = Field(default_factory=list)
    sort_options: list[SortOption] = Field(default_factory=list)
    subcategories: list[Subcategory] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_keys(self) -> "CategoryConfig":
        filter_keys = [f.key for f in self.filters]
        if len(filter_keys) != len(set(filter_keys)):
            raise ValueError(f"Duplicate filter key in category '{self.key}'")
        sort_keys = [s.value for s in self.sort_options]
        if len(sort_keys) != len(set(sort_keys)):
            raise ValueError(f"Duplicate sort key in category '{self.key}'")
        return self


class CategoryHeader(BaseModel):
    """Localized heading of a category page."""

    category: str
    label: str
    description: str | None = None
    subcategory: str | None = None
    subcategory_label: str | None = None
    subcategory_description: str | None = None
    has_configuration: bool = True


class CategorySummary(BaseModel):
    """Category entry in the category listing."""

    key: str
    label: str
    description: str
    subcategories: list[dict[str, str]]


class LocalizedOption(BaseModel):
    """Option or sort entry rendered for one language."""

    value: str
    label: str


class LocalizedFilter(BaseModel):
    """Filter definition rendered for one language."""

    key: str
    type: str
    label: str
    options: list[LocalizedOption] | None = None
    min: float | None = None
    max: float | None = None
    step: float | None = None
    unit: str | None = None


class CategoryResponse(BaseModel):
    """Full localized configuration of a category."""

    key: str
    label: str
    description: str
    filters: list[LocalizedFilter]
    sort_options: list[LocalizedOption]
    default_sort: str
    subcategories: list[dict[str, str]]
