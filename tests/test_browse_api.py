"""Tests for the browse, category and content endpoints."""

from conftest import make_col, make_cols


# ---------------------------------------------------------------------------
# Browse
# ---------------------------------------------------------------------------

class TestBrowse:
    def test_first_page_of_twenty_five_cols(self, client, backend):
        backend.set("/api/cols", make_cols(25))

        resp = client.get("/browse/cols")

        assert resp.status_code == 200
        data = resp.json()
        assert data["total"] == 25
        assert data["total_pages"] == 3
        assert data["page"] == 1
        assert [i["id"] for i in data["items"]] == [f"col-{i}" for i in range(12)]
        assert data["query_string"] == ""
        assert data["links"] == {"canonical": "/cols", "prev": None, "next": "/cols?page=2"}
        assert data["source"] == "remote"

    def test_last_page(self, client, backend):
        backend.set("/api/cols", make_cols(25))

        data = client.get("/browse/cols?page=3").json()

        assert [i["id"] for i in data["items"]] == ["col-24"]
        assert data["links"]["prev"] == "/cols?page=2"
        assert data["links"]["next"] is None

    def test_filters_from_query_string(self, client, backend):
        backend.set(
            "/api/cols",
            [make_col(i, altitude=a) for i, a in enumerate([1200, 1860, 2115, 2758])],
        )

        data = client.get("/browse/cols?altitude_min=2000&sort=altitude_desc&lang=en").json()

        assert [i["altitude"] for i in data["items"]] == [2758, 2115]
        assert data["filtered_total"] == 2
        assert data["filters"] == {"altitude_min": 2000}
        assert data["query_string"] == "altitude_min=2000&sort=altitude_desc"
        assert data["active_filters"] == [{"key": "altitude_min", "label": "Altitude ≥ 2000 m"}]
        assert data["header"]["label"] == "Mountain Passes"

    def test_page_past_the_end_is_clamped(self, client, backend):
        backend.set("/api/cols", make_cols(5))

        data = client.get("/browse/cols?page=9").json()

        assert data["page"] == 1
        assert len(data["items"]) == 5
        assert data["links"]["canonical"] == "/cols"

    def test_empty_result_is_not_an_error(self, client, backend):
        backend.set("/api/cols", make_cols(5))

        resp = client.get("/browse/cols?region=vosges")

        assert resp.status_code == 200
        data = resp.json()
        assert data["is_empty"] is True
        assert data["items"] == []

    def test_subcategory_header_and_path(self, client, backend):
        backend.set("/api/cols/alps", make_cols(13))

        data = client.get("/browse/cols/alps?lang=en").json()

        assert data["header"]["subcategory_label"] == "Alps"
        assert data["links"]["next"] == "/cols/alps?page=2"

    def test_fetch_failure_returns_bad_gateway(self, client, backend):
        backend.fail("/api/cols")

        resp = client.get("/browse/cols")

        assert resp.status_code == 502
        assert "unavailable" in resp.json()["detail"]

    def test_local_source_uses_demo_catalog(self, client, backend):
        data = client.get("/browse/cols?source=local&search=tourmalet").json()

        assert data["source"] == "local"
        assert [i["id"] for i in data["items"]] == ["col-du-tourmalet"]
        assert backend.requests == []

    def test_partial_translations_and_numeric_tags(self, client, backend):
        backend.set(
            "/api/cols",
            [make_col(0, name={"fr": "Col du Tourmalet", "en": None}, tags=[2024, "tdf"])],
        )

        resp = client.get("/browse/cols?search=tourmalet&lang=en")

        assert resp.status_code == 200
        item = resp.json()["items"][0]
        assert item["name"] == {"fr": "Col du Tourmalet", "en": None}
        assert item["tags"] == [2024, "tdf"]

    def test_non_object_item_returns_bad_gateway(self, client, backend):
        backend.set("/api/cols", [make_col(0), "oops"])

        resp = client.get("/browse/cols")

        assert resp.status_code == 502

    def test_unknown_category_renders_minimal_header(self, client, backend):
        backend.set("/api/routes", make_cols(3))

        data = client.get("/browse/routes?region=alps").json()

        assert data["header"]["label"] == "routes"
        assert data["header"]["has_configuration"] is False
        assert data["available_filters"] == []
        assert data["filters"] == {}
        assert len(data["items"]) == 3


class TestNavigate:
    def test_filter_change_returns_to_page_one(self, client):
        resp = client.post(
            "/browse/cols/navigate",
            json={
                "query": "region=alps&page=3&sort=name_asc",
                "action": "filter",
                "filters": {"region": "alps", "difficulty": "5"},
            },
        )

        assert resp.status_code == 200
        data = resp.json()
        assert data["page"] == 1
        assert data["query_string"] == "region=alps&difficulty=5&sort=name_asc"
        assert data["url"] == "/cols?region=alps&difficulty=5&sort=name_asc"

    def test_sort_change_returns_to_page_one(self, client):
        data = client.post(
            "/browse/cols/navigate",
            json={"query": "page=2", "action": "sort", "sort": "altitude_desc"},
        ).json()

        assert data["page"] == 1
        assert data["query_string"] == "sort=altitude_desc"

    def test_page_change(self, client):
        data = client.post(
            "/browse/programs/navigate",
            json={"query": "goal=power,climbing", "action": "page", "page": 2, "subcategory": "advanced"},
        ).json()

        assert data["url"] == "/programs/advanced?goal=power,climbing&page=2"

    def test_reset(self, client):
        data = client.post(
            "/browse/cols/navigate",
            json={"query": "region=alps&page=2", "action": "reset"},
        ).json()

        assert data["query_string"] == ""
        assert data["url"] == "/cols"

    def test_missing_sort_key(self, client):
        resp = client.post("/browse/cols/navigate", json={"action": "sort"})
        assert resp.status_code == 400


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

class TestCategories:
    def test_list(self, client):
        data = client.get("/categories?lang=en").json()
        assert [c["key"] for c in data] == ["cols", "programs", "nutrition", "challenges"]
        assert data[0]["label"] == "Mountain Passes"

    def test_get(self, client):
        data = client.get("/categories/programs").json()
        assert data["label"] == "Programmes d'entraînement"
        assert data["default_sort"] == "featured"
        goal = next(f for f in data["filters"] if f["key"] == "goal")
        assert goal["type"] == "multiSelect"
        assert {"value": "power", "label": "Puissance"} in goal["options"]

    def test_get_unknown(self, client):
        assert client.get("/categories/routes").status_code == 404

    def test_filters(self, client):
        data = client.get("/categories/cols/filters?lang=en").json()
        altitude = next(f for f in data if f["key"] == "altitude")
        assert altitude["min"] == 500
        assert altitude["max"] == 3000
        assert altitude["unit"] == "m"


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------

class TestContent:
    def test_related_content_labels(self, client, backend):
        backend.set("/api/related/cols/col-0", {"same_region": make_cols(2)})

        data = client.get("/content/related/cols/col-0?lang=en").json()

        assert len(data["relations"]["same_region"]) == 2
        assert data["labels"] == {"same_region": "In the same region"}

    def test_related_content_failure_is_empty(self, client, backend):
        backend.fail("/api/related/cols/col-0")

        resp = client.get("/content/related/cols/col-0")

        assert resp.status_code == 200
        assert resp.json()["relations"] == {}

    def test_item_not_found(self, client):
        assert client.get("/content/cols/nowhere").status_code == 404

    def test_item_backend_down(self, client, backend):
        backend.fail("/api/cols/col-0")
        assert client.get("/content/cols/col-0").status_code == 502

    def test_local_item(self, client):
        data = client.get("/content/cols/passo-dello-stelvio?source=local").json()
        assert data["altitude"] == 2758

    def test_recommendations(self, client, backend):
        backend.set("/api/recommendations/nutrition", make_cols(2))
        data = client.get("/content/recommendations/nutrition").json()
        assert data["total"] == 2

    def test_search(self, client, backend):
        backend.set("/api/search", make_cols(4))
        data = client.get("/content/search?q=col").json()
        assert data["total"] == 4

    def test_recommendations_by_subcategory_path(self, client, backend):
        backend.set("/api/recommendations/cols/alps", make_cols(3))

        data = client.get("/content/recommendations/cols/alps").json()

        assert data["total"] == 3
        assert backend.requests[0].url.path == "/api/recommendations/cols/alps"
