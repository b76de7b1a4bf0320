"""Category configuration registry.

Filters, sort options and sub-navigation for each content category, with
French and English labels.
"""

from velo_altitude.schemas.category import CategoryConfig, Subcategory
from velo_altitude.utils.localization import localize

DEFAULT_SORT = "featured"

DIFFICULTY_OPTIONS = [
    {"value": "1", "label": {"fr": "Facile (1/5)", "en": "Easy (1/5)"}},
    {"value": "2", "label": {"fr": "Modérée (2/5)", "en": "Moderate (2/5)"}},
    {"value": "3", "label": {"fr": "Intermédiaire (3/5)", "en": "Intermediate (3/5)"}},
    {"value": "4", "label": {"fr": "Difficile (4/5)", "en": "Difficult (4/5)"}},
    {"value": "5", "label": {"fr": "Très difficile (5/5)", "en": "Very difficult (5/5)"}},
]

FEATURED_SORT = {"value": "featured", "label": {"fr": "Recommandés", "en": "Featured"}}
NAME_SORTS = [
    {"value": "name_asc", "label": {"fr": "Nom (A-Z)", "en": "Name (A-Z)"}},
    {"value": "name_desc", "label": {"fr": "Nom (Z-A)", "en": "Name (Z-A)"}},
]

CATEGORY_DEFINITIONS = {
    "cols": {
        "label": {"fr": "Cols", "en": "Mountain Passes"},
        "description": {
            "fr": "Découvrez notre catalogue complet de cols à travers l'Europe, avec profils d'élévation, difficulté, météo et points d'intérêt.",
            "en": "Explore our comprehensive catalog of mountain passes across Europe, with elevation profiles, difficulty, weather, and points of interest.",
        },
        "filters": [
            {
                "key": "search",
                "type": "search",
                "label": {"fr": "Rechercher un col", "en": "Search for a pass"},
            },
            {
                "key": "region",
                "type": "select",
                "label": {"fr": "Région", "en": "Region"},
                "options": [
                    {"value": "alps", "label": {"fr": "Alpes", "en": "Alps"}},
                    {"value": "pyrenees", "label": {"fr": "Pyrénées", "en": "Pyrenees"}},
                    {"value": "massif-central", "label": {"fr": "Massif Central", "en": "Massif Central"}},
                    {"value": "jura", "label": {"fr": "Jura", "en": "Jura"}},
                    {"value": "vosges", "label": {"fr": "Vosges", "en": "Vosges"}},
                    {"value": "dolomites", "label": {"fr": "Dolomites", "en": "Dolomites"}},
                    {"value": "carpathians", "label": {"fr": "Carpates", "en": "Carpathians"}},
                ],
            },
            {
                "key": "difficulty",
                "type": "select",
                "label": {"fr": "Difficulté", "en": "Difficulty"},
                "options": DIFFICULTY_OPTIONS,
            },
            {
                "key": "altitude",
                "type": "range",
                "label": {"fr": "Altitude", "en": "Altitude"},
                "min": 500,
                "max": 3000,
                "step": 100,
                "unit": "m",
            },
            {
                "key": "length",
                "type": "range",
                "label": {"fr": "Longueur", "en": "Length"},
                "min": 0,
                "max": 30,
                "step": 1,
                "unit": "km",
            },
            {
                "key": "gradient",
                "type": "range",
                "label": {"fr": "Pente moyenne", "en": "Average gradient"},
                "min": 4,
                "max": 12,
                "step": 0.5,
                "unit": "%",
            },
        ],
        "sort_options": [
            FEATURED_SORT,
            *NAME_SORTS,
            {"value": "altitude_desc", "label": {"fr": "Altitude (décroissante)", "en": "Altitude (descending)"}},
            {"value": "altitude_asc", "label": {"fr": "Altitude (croissante)", "en": "Altitude (ascending)"}},
            {"value": "difficulty_desc", "label": {"fr": "Difficulté (décroissante)", "en": "Difficulty (descending)"}},
            {"value": "difficulty_asc", "label": {"fr": "Difficulté (croissante)", "en": "Difficulty (ascending)"}},
        ],
        "subcategories": [
            {
                "key": "alps",
                "label": {"fr": "Alpes", "en": "Alps"},
                "description": {
                    "fr": "Découvrez les cols mythiques des Alpes françaises, italiennes et suisses.",
                    "en": "Discover the mythical passes of the French, Italian and Swiss Alps.",
                },
            },
            {
                "key": "pyrenees",
                "label": {"fr": "Pyrénées", "en": "Pyrenees"},
                "description": {
                    "fr": "Explorez les cols emblématiques des Pyrénées, entre la France et l'Espagne.",
                    "en": "Explore the iconic passes of the Pyrenees, between France and Spain.",
                },
            },
            {
                "key": "famous",
                "label": {"fr": "Cols mythiques", "en": "Famous passes"},
                "description": {
                    "fr": "Les cols rendus célèbres par les grands tours et les courses professionnelles.",
                    "en": "Passes made famous by grand tours and professional races.",
                },
            },
            {
                "key": "easy",
                "label": {"fr": "Cols faciles", "en": "Easy passes"},
                "description": {
                    "fr": "Cols accessibles aux cyclistes débutants ou intermédiaires.",
                    "en": "Passes accessible to beginner or intermediate cyclists.",
                },
            },
            {
                "key": "challenge",
                "label": {"fr": "Cols difficiles", "en": "Challenging passes"},
                "description": {
                    "fr": "Les cols les plus redoutables, un vrai défi même pour les cyclistes expérimentés.",
                    "en": "The most formidable passes, a real challenge even for experienced cyclists.",
                },
            },
        ],
    },
    "programs": {
        "label": {"fr": "Programmes d'entraînement", "en": "Training Programs"},
        "description": {
            "fr": "Programmes d'entraînement spécifiques pour préparer l'ascension des cols.",
            "en": "Specific training programs to prepare for climbing mountain passes.",
        },
        "filters": [
            {
                "key": "search",
                "type": "search",
                "label": {"fr": "Rechercher un programme", "en": "Search for a program"},
            },
            {
                "key": "level",
                "type": "select",
                "label": {"fr": "Niveau", "en": "Level"},
                "options": [
                    {"value": "1", "label": {"fr": "Débutant (1/5)", "en": "Beginner (1/5)"}},
                    {"value": "2", "label": {"fr": "Intermédiaire bas (2/5)", "en": "Low intermediate (2/5)"}},
                    {"value": "3", "label": {"fr": "Intermédiaire (3/5)", "en": "Intermediate (3/5)"}},
                    {"value": "4", "label": {"fr": "Avancé (4/5)", "en": "Advanced (4/5)"}},
                    {"value": "5", "label": {"fr": "Expert (5/5)", "en": "Expert (5/5)"}},
                ],
            },
            {
                "key": "duration",
                "type": "select",
                "label": {"fr": "Durée", "en": "Duration"},
                "options": [
                    {"value": weeks, "label": {"fr": f"{weeks} semaines", "en": f"{weeks} weeks"}}
                    for weeks in ("4", "6", "8", "12", "16")
                ],
            },
            {
                "key": "goal",
                "type": "multiSelect",
                "label": {"fr": "Objectif", "en": "Goal"},
                "options": [
                    {"value": "endurance", "label": {"fr": "Endurance", "en": "Endurance"}},
                    {"value": "power", "label": {"fr": "Puissance", "en": "Power"}},
                    {"value": "climbing", "label": {"fr": "Escalade", "en": "Climbing"}},
                    {"value": "recovery", "label": {"fr": "Récupération", "en": "Recovery"}},
                    {"value": "weight-loss", "label": {"fr": "Perte de poids", "en": "Weight loss"}},
                ],
            },
        ],
        "sort_options": [
            FEATURED_SORT,
            *NAME_SORTS,
            {"value": "level_asc", "label": {"fr": "Niveau (croissant)", "en": "Level (ascending)"}},
            {"value": "level_desc", "label": {"fr": "Niveau (décroissant)", "en": "Level (descending)"}},
            {"value": "duration_asc", "label": {"fr": "Durée (croissante)", "en": "Duration (ascending)"}},
            {"value": "duration_desc", "label": {"fr": "Durée (décroissante)", "en": "Duration (descending)"}},
        ],
        "subcategories": [
            {
                "key": "col-specific",
                "label": {"fr": "Spécifique cols", "en": "Pass specific"},
                "description": {
                    "fr": "Programmes conçus pour préparer l'ascension des cols de montagne.",
                    "en": "Programs designed to prepare for climbing mountain passes.",
                },
            },
            {
                "key": "beginner",
                "label": {"fr": "Débutants", "en": "Beginners"},
                "description": {
                    "fr": "Programmes adaptés aux cyclistes débutants.",
                    "en": "Programs adapted for beginner cyclists.",
                },
            },
            {
                "key": "advanced",
                "label": {"fr": "Avancés", "en": "Advanced"},
                "description": {
                    "fr": "Programmes intensifs pour cyclistes confirmés.",
                    "en": "Intensive programs for confirmed cyclists.",
                },
            },
            {
                "key": "recovery",
                "label": {"fr": "Récupération", "en": "Recovery"},
                "description": {
                    "fr": "Programmes de récupération entre les périodes d'entraînement intense.",
                    "en": "Recovery programs between intense training periods.",
                },
            },
        ],
    },
    "nutrition": {
        "label": {"fr": "Nutrition", "en": "Nutrition"},
        "description": {
            "fr": "Recettes et plans nutritionnels adaptés aux besoins des cyclistes de montagne.",
            "en": "Recipes and nutritional plans adapted to the needs of mountain cyclists.",
        },
        "filters": [
            {"key": "search", "type": "search", "label": {"fr": "Rechercher", "en": "Search"}},
            {
                "key": "type",
                "type": "select",
                "label": {"fr": "Type", "en": "Type"},
                "options": [
                    {"value": "recipe", "label": {"fr": "Recette", "en": "Recipe"}},
                    {"value": "plan", "label": {"fr": "Plan nutritionnel", "en": "Nutritional plan"}},
                    {"value": "supplement", "label": {"fr": "Supplément", "en": "Supplement"}},
                ],
            },
            {
                "key": "timing",
                "type": "select",
                "label": {"fr": "Moment", "en": "Timing"},
                "options": [
                    {"value": "before", "label": {"fr": "Avant effort", "en": "Before effort"}},
                    {"value": "during", "label": {"fr": "Pendant effort", "en": "During effort"}},
                    {"value": "after", "label": {"fr": "Après effort", "en": "After effort"}},
                    {"value": "daily", "label": {"fr": "Quotidien", "en": "Daily"}},
                ],
            },
            {
                "key": "prepTime",
                "type": "range",
                "label": {"fr": "Temps de préparation", "en": "Preparation time"},
                "min": 0,
                "max": 60,
                "step": 5,
                "unit": "min",
            },
            {
                "key": "dietary",
                "type": "multiSelect",
                "label": {"fr": "Régime alimentaire", "en": "Dietary restrictions"},
                "options": [
                    {"value": "vegetarian", "label": {"fr": "Végétarien", "en": "Vegetarian"}},
                    {"value": "vegan", "label": {"fr": "Végétalien", "en": "Vegan"}},
                    {"value": "gluten-free", "label": {"fr": "Sans gluten", "en": "Gluten-free"}},
                    {"value": "dairy-free", "label": {"fr": "Sans lactose", "en": "Dairy-free"}},
                    {"value": "high-protein", "label": {"fr": "Riche en protéines", "en": "High-protein"}},
                    {"value": "low-carb", "label": {"fr": "Faible en glucides", "en": "Low-carb"}},
                ],
            },
        ],
        "sort_options": [
            FEATURED_SORT,
            *NAME_SORTS,
            {"value": "prepTime_asc", "label": {"fr": "Temps de préparation (croissant)", "en": "Prep time (ascending)"}},
            {"value": "calories_asc", "label": {"fr": "Calories (croissant)", "en": "Calories (ascending)"}},
            {"value": "date_desc", "label": {"fr": "Plus récents", "en": "Most recent"}},
        ],
        "subcategories": [
            {
                "key": "cycling-specific",
                "label": {"fr": "Spécifique cyclisme", "en": "Cycling specific"},
                "description": {
                    "fr": "Recettes et plans conçus pour les besoins des cyclistes.",
                    "en": "Recipes and plans designed for cyclists' needs.",
                },
            },
            {
                "key": "col-day",
                "label": {"fr": "Jour de col", "en": "Pass day"},
                "description": {
                    "fr": "Nutrition pour le jour d'ascension: avant, pendant et après l'effort.",
                    "en": "Nutrition for climbing day: before, during, and after the effort.",
                },
            },
            {
                "key": "recovery",
                "label": {"fr": "Récupération", "en": "Recovery"},
                "description": {
                    "fr": "Nutrition pour la récupération après des efforts intenses en montagne.",
                    "en": "Nutrition for recovery after intense mountain efforts.",
                },
            },
            {
                "key": "long-distance",
                "label": {"fr": "Longue distance", "en": "Long distance"},
                "description": {
                    "fr": "Stratégies nutritionnelles pour les sorties longue distance.",
                    "en": "Nutritional strategies for long-distance rides.",
                },
            },
        ],
    },
    "challenges": {
        "label": {"fr": "Défis", "en": "Challenges"},
        "description": {
            "fr": "Défis cyclistes variés, du concept \"Les 7 Majeurs\" aux challenges régionaux.",
            "en": "Various cycling challenges, from \"The 7 Majors\" concept to regional challenges.",
        },
        "filters": [
            {
                "key": "search",
                "type": "search",
                "label": {"fr": "Rechercher un défi", "en": "Search for a challenge"},
            },
            {
                "key": "difficulty",
                "type": "select",
                "label": {"fr": "Difficulté", "en": "Difficulty"},
                "options": DIFFICULTY_OPTIONS,
            },
            {
                "key": "region",
                "type": "select",
                "label": {"fr": "Région", "en": "Region"},
                "options": [
                    {"value": "alps", "label": {"fr": "Alpes", "en": "Alps"}},
                    {"value": "pyrenees", "label": {"fr": "Pyrénées", "en": "Pyrenees"}},
                    {"value": "massif-central", "label": {"fr": "Massif Central", "en": "Massif Central"}},
                    {"value": "europe", "label": {"fr": "Europe", "en": "Europe"}},
                ],
            },
            {
                "key": "colCount",
                "type": "range",
                "label": {"fr": "Nombre de cols", "en": "Number of passes"},
                "min": 1,
                "max": 10,
                "step": 1,
            },
            {
                "key": "totalDistance",
                "type": "range",
                "label": {"fr": "Distance totale", "en": "Total distance"},
                "min": 0,
                "max": 500,
                "step": 50,
                "unit": "km",
            },
        ],
        "sort_options": [
            FEATURED_SORT,
            *NAME_SORTS,
            {"value": "difficulty_asc", "label": {"fr": "Difficulté (croissante)", "en": "Difficulty (ascending)"}},
            {"value": "difficulty_desc", "label": {"fr": "Difficulté (décroissante)", "en": "Difficulty (descending)"}},
            {"value": "colCount_desc", "label": {"fr": "Nombre de cols (décroissant)", "en": "Number of passes (descending)"}},
        ],
        "subcategories": [
            {
                "key": "seven-majors",
                "label": {"fr": "Les 7 Majeurs", "en": "The 7 Majors"},
                "description": {
                    "fr": "Créez votre propre défi en sélectionnant 7 cols prestigieux à conquérir.",
                    "en": "Create your own challenge by selecting 7 prestigious passes to conquer.",
                },
            },
            {
                "key": "alps",
                "label": {"fr": "Alpes", "en": "Alps"},
                "description": {
                    "fr": "Défis regroupant les plus beaux cols des Alpes.",
                    "en": "Challenges featuring the most beautiful passes of the Alps.",
                },
            },
            {
                "key": "pyrenees",
                "label": {"fr": "Pyrénées", "en": "Pyrenees"},
                "description": {
                    "fr": "Défis à travers les cols emblématiques des Pyrénées.",
                    "en": "Challenges across the iconic passes of the Pyrenees.",
                },
            },
            {
                "key": "tour-inspired",
                "label": {"fr": "Inspirés du Tour", "en": "Tour inspired"},
                "description": {
                    "fr": "Défis inspirés des étapes mythiques du Tour de France.",
                    "en": "Challenges inspired by mythical stages of the Tour de France.",
                },
            },
        ],
    },
}


def _build_registry(definitions: dict) -> dict[str, CategoryConfig]:
    """Validate raw definitions; raises on duplicate filter or sort keys."""
    return {
        key: CategoryConfig.model_validate({"key": key, **definition})
        for key, definition in definitions.items()
    }


CATEGORY_REGISTRY = _build_registry(CATEGORY_DEFINITIONS)


def get_category_config(category_key: str) -> CategoryConfig | None:
    """Look up a category configuration, None for unknown keys."""
    return CATEGORY_REGISTRY.get(category_key)


def get_all_categories() -> dict[str, CategoryConfig]:
    """Get every category configuration keyed by category."""
    return dict(CATEGORY_REGISTRY)


def get_default_sort(config: CategoryConfig | None) -> str:
    """Default sort key of a category (the first sort option)."""
    if config and config.sort_options:
        return config.sort_options[0].value
    return DEFAULT_SORT


def get_subcategory(config: CategoryConfig | None, key: str | None) -> Subcategory | None:
    if not config or not key:
        return None
    for subcategory in config.subcategories:
        if subcategory.key == key:
            return subcategory
    return None


def subcategory_entries(config: CategoryConfig, language: str) -> list[dict[str, str]]:
    """Sub-navigation entries rendered for a language."""
    return [
        {
            "key": sub.key,
            "label": localize(sub.label, language),
            "description": localize(sub.description, language),
        }
        for sub in config.subcategories
    ]
