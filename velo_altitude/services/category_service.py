"""Render category configuration for a display language."""

from velo_altitude.data.categories import (
    get_default_sort,
    get_subcategory,
    subcategory_entries,
)
from velo_altitude.schemas.category import (
    CategoryConfig,
    CategoryHeader,
    CategoryResponse,
    CategorySummary,
    LocalizedFilter,
    LocalizedOption,
    RangeFilter,
)
from velo_altitude.utils.localization import localize

RELATION_LABELS = {
    "same_region": {"fr": "Dans la même région", "en": "In the same region"},
    "similar_difficulty": {"fr": "Difficulté similaire", "en": "Similar difficulty"},
    "complementary_training": {
        "fr": "Programmes d'entraînement complémentaires",
        "en": "Complementary training programs",
    },
    "nearby_cols": {"fr": "Cols à proximité", "en": "Nearby mountain passes"},
    "related_nutrition": {"fr": "Nutrition recommandée", "en": "Recommended nutrition"},
    "similar_challenge": {"fr": "Défis similaires", "en": "Similar challenges"},
    "recommended_challenges": {"fr": "Défis recommandés", "en": "Recommended challenges"},
    "training_for_col": {"fr": "Entraînements pour ce col", "en": "Training for this pass"},
    "popular": {"fr": "Populaires", "en": "Popular"},
    "recommended": {"fr": "Recommandés", "en": "Recommended"},
    "recent": {"fr": "Récents", "en": "Recent"},
}


def relation_label(relation: str, language: str) -> str:
    """Display label of a relation type, the raw key when unknown."""
    labels = RELATION_LABELS.get(relation)
    return localize(labels, language) if labels else relation


def localize_filters(config: CategoryConfig | None, language: str) -> list[LocalizedFilter]:
    if not config:
        return []

    rendered = []
    for definition in config.filters:
        entry = LocalizedFilter(
            key=definition.key,
            type=definition.type,
            label=localize(definition.label, language),
        )
        if isinstance(definition, RangeFilter):
            entry.min = definition.min
            entry.max = definition.max
            entry.step = definition.step
            entry.unit = definition.unit
        elif hasattr(definition, "options"):
            entry.options = [
                LocalizedOption(value=o.value, label=localize(o.label, language))
                for o in definition.options
            ]
        rendered.append(entry)
    return rendered


def localize_sort_options(config: CategoryConfig | None, language: str) -> list[LocalizedOption]:
    if not config:
        return []
    return [
        LocalizedOption(value=o.value, label=localize(o.label, language))
        for o in config.sort_options
    ]


def build_header(
    category: str,
    config: CategoryConfig | None,
    language: str,
    subcategory: str | None = None,
) -> CategoryHeader:
    """Page heading; a minimal header when the category is not configured."""
    if not config:
        return CategoryHeader(
            category=category,
            label=category,
            subcategory=subcategory,
            has_configuration=False,
        )

    header = CategoryHeader(
        category=category,
        label=localize(config.label, language),
        description=localize(config.description, language),
        subcategory=subcategory,
    )
    sub = get_subcategory(config, subcategory)
    if sub:
        header.subcategory_label = localize(sub.label, language)
        header.subcategory_description = localize(sub.description, language)
    return header


def build_summary(config: CategoryConfig, language: str) -> CategorySummary:
    return CategorySummary(
        key=config.key,
        label=localize(config.label, language),
        description=localize(config.description, language),
        subcategories=subcategory_entries(config, language),
    )


def build_category_response(config: CategoryConfig, language: str) -> CategoryResponse:
    """Full localized configuration of a category."""
    return CategoryResponse(
        key=config.key,
        label=localize(config.label, language),
        description=localize(config.description, language),
        filters=localize_filters(config, language),
        sort_options=localize_sort_options(config, language),
        default_sort=get_default_sort(config),
        subcategories=subcategory_entries(config, language),
    )
