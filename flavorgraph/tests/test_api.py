from __future__ import annotations

from unittest.mock import patch

from fastapi.testclient import TestClient

from flavorgraph.app import app
from flavorgraph.catalog.provider import CatalogProvider
from flavorgraph.recommendations.data_store import set_provider

client = TestClient(app)

CARBONARA = ["pasta", "eggs", "bacon", "parmesan", "black pepper"]


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_metadata():
    body = client.get("/metadata").json()
    assert body["recipe_count"] == 62
    assert "italian" in body["cuisines"]
    assert sum(body["difficulties"].values()) == 62


def test_list_recipes_filters_by_cuisine():
    resp = client.get("/recipes", params={"cuisine": "Italian"})
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 6
    assert all(r["cuisine"] == "italian" for r in body)


def test_get_recipe():
    resp = client.get("/recipes/1")
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Classic Spaghetti Carbonara"
    assert body["difficulty"] == "medium"


def test_get_unknown_recipe_is_404():
    resp = client.get("/recipes/99999")
    assert resp.status_code == 404


def test_search_ranks_exact_match_first():
    resp = client.post("/recipes/search", json={"ingredients": CARBONARA})
    assert resp.status_code == 200
    body = resp.json()
    top = body["results"][0]
    assert top["recipe"]["id"] == 1
    assert top["match_score"] == 100
    assert top["missing_ingredients"] == []
    assert body["total_results"] == len(body["results"])
    assert all(g["recipe_id"] != 1 for g in body["gaps"])


def test_search_results_have_unique_ids():
    resp = client.post(
        "/recipes/search",
        json={"ingredients": ["rice", "soy sauce", "garlic", "ginger", "eggs", "onion"]},
    )
    ids = [r["recipe"]["id"] for r in resp.json()["results"]]
    assert ids
    assert len(ids) == len(set(ids))


def test_search_normalises_ingredient_names():
    resp = client.post("/recipes/search", json={"ingredients": [" Pasta ", "EGGS", "", "eggs"]})
    assert resp.status_code == 200
    carbonara = [r for r in resp.json()["results"] if r["recipe"]["id"] == 1][0]
    assert carbonara["missing_ingredients"] == ["bacon", "parmesan", "black pepper"]


def test_search_with_nothing_on_hand_is_empty():
    resp = client.post("/recipes/search", json={"ingredients": []})
    assert resp.status_code == 200
    body = resp.json()
    assert body["results"] == []
    assert body["gaps"] == []


def test_search_without_substitutions():
    resp = client.post(
        "/recipes/search",
        json={"ingredients": ["pasta", "turkey bacon"], "include_substitutions": False},
    )
    assert all(r["substitutions"] is None for r in resp.json()["results"])


def test_search_suggests_substitutes():
    resp = client.post("/recipes/search", json={"ingredients": ["pasta", "eggs", "parmesan", "turkey bacon"]})
    carbonara = [r for r in resp.json()["results"] if r["recipe"]["id"] == 1][0]
    assert {"original": "bacon", "alternatives": ["turkey bacon"], "confidence": 1 / 3} in carbonara["substitutions"]


def test_search_validation_rejects_missing_ingredients():
    resp = client.post("/recipes/search", json={})
    assert resp.status_code == 422


def test_list_ingredients():
    body = client.get("/ingredients").json()
    chicken = [i for i in body if i["name"] == "chicken"][0]
    assert chicken["category"] == "protein"
    names = [i["name"] for i in body]
    assert names == sorted(names)


def test_ingredient_neighbors():
    body = client.get("/ingredients/Pasta/neighbors").json()
    assert body["ingredient"] == "pasta"
    assert "eggs" in body["neighbors"]
    assert client.get("/ingredients/unobtainium/neighbors").json()["neighbors"] == []


def test_ingredient_substitutes():
    body = client.get("/ingredients/chicken/substitutes").json()
    assert body["substitutes"] == ["turkey", "tofu", "fish", "shrimp", "tempeh"]


def test_reload_bumps_catalog_version():
    set_provider(CatalogProvider())
    before = client.get("/metadata").json()["catalog_version"]
    resp = client.post("/catalog/reload")
    assert resp.status_code == 200
    assert resp.json()["catalog_version"] == before + 1
    assert resp.json()["recipe_count"] == 62


def test_failed_reload_keeps_current_catalog():
    set_provider(CatalogProvider())
    before = client.get("/metadata").json()["catalog_version"]
    with patch("flavorgraph.catalog.provider.load_recipes", side_effect=OSError("disk gone")):
        resp = client.post("/catalog/reload")
    assert resp.json()["catalog_version"] == before
    assert resp.json()["recipe_count"] == 62


def test_unavailable_catalog_degrades_to_no_results():
    with patch("flavorgraph.catalog.provider.load_recipes", side_effect=OSError("disk gone")):
        set_provider(CatalogProvider())
        try:
            assert client.get("/recipes").json() == []
            body = client.post("/recipes/search", json={"ingredients": CARBONARA}).json()
            assert body["results"] == []
        finally:
            set_provider(CatalogProvider())
