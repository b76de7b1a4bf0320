"""Demo catalog used when browsing without the content backend."""

from sqlalchemy.orm import Session

from velo_altitude.models.content_item import ContentItem


def _col(slug, fr, en, region, altitude, length, gradient, difficulty, featured=None, tags=(), subs=()):
    return {
        "id": slug,
        "slug": slug,
        "name": {"fr": fr, "en": en},
        "description": {
            "fr": f"{fr}, {altitude} m d'altitude, {length} km à {gradient}% de moyenne.",
            "en": f"{en}, {altitude} m high, {length} km at {gradient}% average.",
        },
        "region": region,
        "altitude": altitude,
        "length": length,
        "gradient": gradient,
        "difficulty": difficulty,
        "featured": featured,
        "tags": list(tags),
        "subcategories": [region, *subs],
        "last_updated": "2024-03-01T00:00:00Z",
    }


FALLBACK_DATA = {
    "cols": [
        _col("col-du-tourmalet", "Col du Tourmalet", "Col du Tourmalet", "pyrenees", 2115, 19.0, 7.4, 5, 10, ("tour de france",), ("famous", "challenge")),
        _col("col-du-galibier", "Col du Galibier", "Col du Galibier", "alps", 2642, 18.1, 6.9, 5, 9, ("tour de france",), ("famous", "challenge")),
        _col("passo-dello-stelvio", "Passo dello Stelvio", "Stelvio Pass", "alps", 2758, 24.3, 7.4, 5, 8, ("giro",), ("famous", "challenge")),
        _col("alpe-d-huez", "Alpe d'Huez", "Alpe d'Huez", "alps", 1860, 13.8, 8.1, 4, 7, ("tour de france", "21 lacets"), ("famous",)),
        _col("mont-ventoux", "Mont Ventoux", "Mont Ventoux", "alps", 1910, 21.5, 7.5, 5, 6, ("géant de provence",), ("famous", "challenge")),
        _col("col-d-aubisque", "Col d'Aubisque", "Col d'Aubisque", "pyrenees", 1709, 16.6, 7.2, 4, None, (), ()),
        _col("col-d-izoard", "Col d'Izoard", "Col d'Izoard", "alps", 2360, 19.0, 5.7, 4, 5, ("casse déserte",), ("famous",)),
        _col("col-de-la-faucille", "Col de la Faucille", "Col de la Faucille", "jura", 1323, 11.7, 5.2, 2, None, (), ("easy",)),
        _col("grand-ballon", "Grand Ballon", "Grand Ballon", "vosges", 1424, 13.5, 5.2, 2, None, (), ("easy",)),
        _col("puy-mary", "Pas de Peyrol (Puy Mary)", "Pas de Peyrol (Puy Mary)", "massif-central", 1589, 5.4, 8.1, 3, None, (), ()),
        _col("passo-gavia", "Passo di Gavia", "Gavia Pass", "dolomites", 2621, 17.3, 7.9, 5, None, ("giro",), ("challenge",)),
        _col("transfagarasan", "Transfăgărășan", "Transfagarasan", "carpathians", 2042, 26.0, 5.4, 3, None, (), ()),
    ],
    "programs": [
        {
            "id": "prog-first-col",
            "slug": "prog-first-col",
            "name": {"fr": "Mon premier col", "en": "My first pass"},
            "description": {"fr": "Huit semaines pour gravir son premier col.", "en": "Eight weeks to climb your first pass."},
            "level": 1,
            "duration": 8,
            "goal": ["endurance", "climbing"],
            "featured": 3,
            "subcategories": ["beginner", "col-specific"],
            "createdAt": "2024-01-15T00:00:00Z",
        },
        {
            "id": "prog-alpine-power",
            "slug": "prog-alpine-power",
            "name": {"fr": "Puissance alpine", "en": "Alpine power"},
            "description": {"fr": "Blocs au seuil pour les longues ascensions.", "en": "Threshold blocks for long climbs."},
            "level": 4,
            "duration": 12,
            "goal": ["power", "climbing"],
            "featured": 2,
            "subcategories": ["advanced", "col-specific"],
            "createdAt": "2024-02-10T00:00:00Z",
        },
        {
            "id": "prog-active-recovery",
            "slug": "prog-active-recovery",
            "name": {"fr": "Récupération active", "en": "Active recovery"},
            "description": {"fr": "Quatre semaines de régénération.", "en": "Four weeks of regeneration."},
            "level": 2,
            "duration": 4,
            "goal": ["recovery"],
            "subcategories": ["recovery"],
            "createdAt": "2023-11-02T00:00:00Z",
        },
        {
            "id": "prog-grand-tour",
            "slug": "prog-grand-tour",
            "name": {"fr": "Préparation grand tour", "en": "Grand tour preparation"},
            "description": {"fr": "Seize semaines pour enchaîner les cols.", "en": "Sixteen weeks to link passes."},
            "level": 5,
            "duration": 16,
            "goal": ["endurance", "power", "climbing"],
            "featured": 1,
            "subcategories": ["advanced"],
            "createdAt": "2024-04-20T00:00:00Z",
        },
    ],
    "nutrition": [
        {
            "id": "nutri-rice-cakes",
            "slug": "nutri-rice-cakes",
            "name": {"fr": "Gâteaux de riz de montagne", "en": "Mountain rice cakes"},
            "description": {"fr": "Énergie facile à digérer en selle.", "en": "Easy to digest energy on the bike."},
            "type": "recipe",
            "timing": "during",
            "prepTime": 25,
            "calories": 180,
            "dietary": ["vegetarian", "gluten-free"],
            "tags": ["glucides"],
            "featured": 2,
            "subcategories": ["cycling-specific", "col-day"],
            "last_updated": "2024-05-01T00:00:00Z",
        },
        {
            "id": "nutri-recovery-shake",
            "slug": "nutri-recovery-shake",
            "name": {"fr": "Shake de récupération", "en": "Recovery shake"},
            "description": {"fr": "Protéines et glucides après l'effort.", "en": "Protein and carbs after the effort."},
            "type": "recipe",
            "timing": "after",
            "prepTime": 5,
            "calories": 320,
            "dietary": ["vegetarian", "high-protein"],
            "featured": 1,
            "subcategories": ["recovery"],
            "last_updated": "2024-02-11T00:00:00Z",
        },
        {
            "id": "nutri-col-day-plan",
            "slug": "nutri-col-day-plan",
            "name": {"fr": "Plan jour de col", "en": "Pass day plan"},
            "description": {"fr": "Avant, pendant et après l'ascension.", "en": "Before, during and after the climb."},
            "type": "plan",
            "timing": "daily",
            "prepTime": 0,
            "calories": 3200,
            "dietary": [],
            "subcategories": ["col-day"],
            "last_updated": "2023-09-30T00:00:00Z",
        },
        {
            "id": "nutri-oat-porridge",
            "slug": "nutri-oat-porridge",
            "name": {"fr": "Porridge d'avoine", "en": "Oat porridge"},
            "description": {"fr": "Petit-déjeuner avant une longue sortie.", "en": "Breakfast before a long ride."},
            "type": "recipe",
            "timing": "before",
            "prepTime": 10,
            "calories": 450,
            "dietary": ["vegan", "dairy-free"],
            "subcategories": ["long-distance"],
            "last_updated": "2024-06-18T00:00:00Z",
        },
    ],
    "challenges": [
        {
            "id": "challenge-seven-majors",
            "slug": "challenge-seven-majors",
            "name": {"fr": "Les 7 Majeurs", "en": "The 7 Majors"},
            "description": {"fr": "Sept cols prestigieux à conquérir.", "en": "Seven prestigious passes to conquer."},
            "difficulty": 5,
            "region": "europe",
            "colCount": 7,
            "totalDistance": 150,
            "featured": 3,
            "subcategories": ["seven-majors"],
        },
        {
            "id": "challenge-pyrenees-trilogy",
            "slug": "challenge-pyrenees-trilogy",
            "name": {"fr": "Trilogie pyrénéenne", "en": "Pyrenean trilogy"},
            "description": {"fr": "Tourmalet, Aubisque et Peyresourde.", "en": "Tourmalet, Aubisque and Peyresourde."},
            "difficulty": 4,
            "region": "pyrenees",
            "colCount": 3,
            "totalDistance": 180,
            "featured": 2,
            "subcategories": ["pyrenees", "tour-inspired"],
        },
        {
            "id": "challenge-alpine-giants",
            "slug": "challenge-alpine-giants",
            "name": {"fr": "Géants des Alpes", "en": "Alpine giants"},
            "description": {"fr": "Galibier, Izoard et Alpe d'Huez.", "en": "Galibier, Izoard and Alpe d'Huez."},
            "difficulty": 5,
            "region": "alps",
            "colCount": 3,
            "totalDistance": 210,
            "subcategories": ["alps", "tour-inspired"],
        },
    ],
}


def ensure_fallback_catalog(db: Session) -> int:
    """Insert demo items missing from the local catalog.

    Returns:
        Number of items inserted
    """
    existing = {row.id for row in db.query(ContentItem.id).all()}
    inserted = 0
    for category, items in FALLBACK_DATA.items():
        for position, item in enumerate(items):
            if item["id"] in existing:
                continue
            row = ContentItem(
                id=item["id"], category=category, slug=item.get("slug"), position=position
            )
            row.subcategories = item.get("subcategories")
            row.payload = item
            db.add(row)
            inserted += 1
    if inserted:
        db.commit()
    return inserted
