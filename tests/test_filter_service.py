"""Tests for the filter -> sort -> paginate engine."""

import pytest

from conftest import make_col, make_cols, make_program
from velo_altitude.data.categories import get_category_config
from velo_altitude.services.filter_service import (
    apply_filters,
    clamp_page,
    describe_active_filters,
    matches_filter,
    paginate,
    range_filter_entries,
    run_pipeline,
    sort_items,
)


# ---------------------------------------------------------------------------
# Filter pass
# ---------------------------------------------------------------------------

class TestFilters:
    def test_select_string_value_matches_numeric_field(self):
        items = [make_col(i, difficulty=5) for i in range(3)]
        items += [make_col(i + 3, difficulty=(i % 4) + 1) for i in range(10)]

        result = run_pipeline(items, {"difficulty": "5"}, "featured")

        assert len(result.visible_items) == 3
        assert all(item["difficulty"] == 5 for item in result.visible_items)

    def test_altitude_min(self):
        items = [make_col(i, altitude=a) for i, a in enumerate([1200, 1860, 2115, 2758])]

        kept = apply_filters(items, {"altitude_min": 2000})

        assert [i["altitude"] for i in kept] == [2115, 2758]

    def test_altitude_max_and_min_combine(self):
        items = [make_col(i, altitude=a) for i, a in enumerate([1200, 1860, 2115, 2758])]

        kept = apply_filters(items, {"altitude_min": 1500, "altitude_max": 2200})

        assert [i["altitude"] for i in kept] == [1860, 2115]

    def test_range_rejects_missing_field(self):
        item = make_col(0)
        del item["gradient"]
        assert not matches_filter(item, "gradient_min", 5)

    def test_search_matches_localized_name_case_insensitively(self):
        tourmalet = make_col(
            0, name={"fr": "Col du Tourmalet", "en": "Col du Tourmalet"}
        )
        other = make_col(1, name={"fr": "Col d'Aspin", "en": "Col d'Aspin"})

        kept = apply_filters([tourmalet, other], {"search": "tourmalet"})

        assert kept == [tourmalet]

    def test_search_covers_description_and_tags(self):
        item = make_col(0, description="Montée mythique", tags=["Tour de France"])
        assert matches_filter(item, "search", "MYTHIQUE")
        assert matches_filter(item, "search", "tour de france")
        assert not matches_filter(item, "search", "giro")

    def test_multiselect_matches_any_value(self):
        power = make_program(0, goal=["power", "climbing"])
        recovery = make_program(1, goal=["recovery"])

        kept = apply_filters([power, recovery], {"goal": ["climbing", "endurance"]})

        assert kept == [power]

    def test_multiselect_rejects_item_without_field(self):
        item = make_program(0)
        del item["goal"]
        assert not matches_filter(item, "goal", ["power"])

    def test_all_filters_must_pass(self):
        items = [
            make_col(0, region="alps", difficulty=5),
            make_col(1, region="pyrenees", difficulty=5),
            make_col(2, region="alps", difficulty=2),
        ]

        kept = apply_filters(items, {"region": "alps", "difficulty": "5"})

        assert [i["id"] for i in kept] == ["col-0"]

    def test_empty_values_do_not_constrain(self):
        items = make_cols(4)
        assert apply_filters(items, {"search": "", "goal": []}) == items

    def test_every_visible_item_satisfies_every_filter(self):
        items = [
            make_col(i, region=r, altitude=1000 + 137 * i, difficulty=(i % 5) + 1)
            for i, r in enumerate(["alps", "pyrenees", "jura"] * 10)
        ]
        filters = {"region": "alps", "altitude_min": 1500, "difficulty": "3"}

        result = run_pipeline(items, filters, "name_asc", page=1, page_size=100)

        assert result.filtered_count <= result.total_count
        for item in result.visible_items:
            for key, value in filters.items():
                assert matches_filter(item, key, value)


# ---------------------------------------------------------------------------
# Sort pass
# ---------------------------------------------------------------------------

class TestSorting:
    def test_featured_rank_descending_unranked_last(self):
        items = [
            make_col(0, featured=None),
            make_col(1, featured=2),
            make_col(2, featured=9),
            make_col(3),
        ]

        ordered = sort_items(items, "featured")

        assert [i["id"] for i in ordered] == ["col-2", "col-1", "col-0", "col-3"]

    def test_name_sort_uses_localized_name(self):
        items = [
            make_col(0, name={"fr": "Galibier", "en": "Galibier"}),
            make_col(1, name={"fr": "Aubisque", "en": "Aubisque"}),
            make_col(2, name={"fr": "stelvio", "en": "Stelvio"}),
        ]

        assert [i["id"] for i in sort_items(items, "name_asc")] == ["col-1", "col-0", "col-2"]
        assert [i["id"] for i in sort_items(items, "name_desc")] == ["col-2", "col-0", "col-1"]

    def test_numeric_field_sorts(self):
        items = [make_col(i, altitude=a) for i, a in enumerate([1860, 2758, 1200])]

        assert [i["altitude"] for i in sort_items(items, "altitude_desc")] == [2758, 1860, 1200]
        assert [i["altitude"] for i in sort_items(items, "altitude_asc")] == [1200, 1860, 2758]
        assert [i["altitude"] for i in sort_items(items, "altitude")] == [2758, 1860, 1200]

    def test_date_sorts_on_last_updated_or_created_at(self):
        items = [
            make_program(0, createdAt="2023-05-01T00:00:00Z"),
            make_col(1, last_updated="2024-06-01T00:00:00Z"),
            make_program(2, createdAt="2024-01-01T00:00:00Z"),
        ]

        assert [i["id"] for i in sort_items(items, "date_desc")] == ["col-1", "program-2", "program-0"]
        assert [i["id"] for i in sort_items(items, "date_asc")] == ["program-0", "program-2", "col-1"]

    def test_unknown_sort_key_keeps_input_order(self):
        items = [make_col(i, altitude=a) for i, a in enumerate([1860, 2758, 1200])]
        assert sort_items(items, "popularity") == items

    @pytest.mark.parametrize(
        "sort_key",
        ["featured", "name_asc", "name_desc", "altitude_desc", "difficulty_asc", "date_desc"],
    )
    def test_sorting_is_idempotent(self, sort_key):
        items = [
            make_col(i, difficulty=(i * 7) % 5, altitude=1000 + (i * 311) % 1700, featured=i % 3 or None)
            for i in range(20)
        ]

        once = sort_items(items, sort_key)

        assert sort_items(once, sort_key) == once

    def test_sort_does_not_mutate_input(self):
        items = [make_col(i, altitude=a) for i, a in enumerate([1860, 2758, 1200])]
        snapshot = list(items)
        sort_items(items, "altitude_desc")
        assert items == snapshot


# ---------------------------------------------------------------------------
# Paginate pass
# ---------------------------------------------------------------------------

class TestPagination:
    def test_twenty_five_cols_make_three_pages(self):
        items = make_cols(25)

        first = run_pipeline(items, {}, "featured", page=1)
        last = run_pipeline(items, {}, "featured", page=3)

        assert first.total_pages == 3
        assert first.visible_items == items[0:12]
        assert last.visible_items == items[24:25]

    def test_page_beyond_last_is_clamped(self):
        items = make_cols(13)

        result = run_pipeline(items, {}, "featured", page=7)

        assert result.page == 2
        assert result.visible_items == items[12:13]

    def test_narrowing_filter_does_not_land_on_blank_page(self):
        items = make_cols(30) + [make_col(99, region="jura")]

        result = run_pipeline(items, {"region": "jura"}, "featured", page=3)

        assert result.page == 1
        assert [i["id"] for i in result.visible_items] == ["col-99"]

    def test_empty_result(self):
        result = run_pipeline(make_cols(5), {"region": "vosges"}, "featured", page=2)

        assert result.total_pages == 0
        assert result.page == 1
        assert result.visible_items == []

    def test_clamp_page(self):
        assert clamp_page(0, 3) == 1
        assert clamp_page(5, 3) == 3
        assert clamp_page(2, 0) == 1

    def test_invalid_page_size(self):
        with pytest.raises(ValueError):
            paginate(make_cols(3), 1, page_size=0)


# ---------------------------------------------------------------------------
# Range derivation and active filter labels
# ---------------------------------------------------------------------------

def _altitude_filter():
    config = get_category_config("cols")
    return next(f for f in config.filters if f.key == "altitude")


def test_range_entries_only_keep_narrowed_bounds():
    altitude = _altitude_filter()

    assert range_filter_entries(altitude, 500, 3000) == {}
    assert range_filter_entries(altitude, 2000, 3000) == {"altitude_min": 2000}
    assert range_filter_entries(altitude, 500, 2500) == {"altitude_max": 2500}


def test_describe_active_filters():
    config = get_category_config("cols")

    chips = describe_active_filters(
        config,
        {"region": "alps", "altitude_min": 2000, "gradient_max": 8.5, "search": "galibier"},
        language="en",
    )

    assert chips == [
        {"key": "region", "label": "Region: Alps"},
        {"key": "altitude_min", "label": "Altitude ≥ 2000 m"},
        {"key": "gradient_max", "label": "Average gradient ≤ 8.5 %"},
        {"key": "search", "label": "Search for a pass: galibier"},
    ]


def test_describe_active_filters_without_config():
    assert describe_active_filters(None, {"region": "alps"}) == []
