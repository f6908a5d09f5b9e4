# tests/test_products.py
from conftest import AUTH


def test_root_greeting(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.text == "Hello World 🚀"


def test_list_defaults_to_first_page_of_three(client):
    r = client.get("/api/products")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "success"
    assert body["page"] == 1
    assert body["total"] == 3
    assert [p["id"] for p in body["data"]] == ["1", "2", "3"]


def test_list_filters_by_category(client):
    body = client.get("/api/products", params={"category": "electronics"}).json()
    assert body["total"] == 2
    assert [p["name"] for p in body["data"]] == ["Laptop", "Smartphone"]


def test_list_unknown_category_is_empty(client):
    body = client.get("/api/products", params={"category": "garden"}).json()
    assert body["total"] == 0
    assert body["data"] == []


def test_list_pagination_slices_in_insertion_order(client):
    body = client.get("/api/products", params={"page": 2, "limit": 2}).json()
    assert body["page"] == 2
    assert body["total"] == 3
    assert [p["id"] for p in body["data"]] == ["3"]


def test_list_page_past_the_end_is_empty_not_an_error(client):
    r = client.get("/api/products", params={"page": 5})
    assert r.status_code == 200
    assert r.json()["data"] == []
    assert r.json()["total"] == 3


def test_list_rejects_bad_pagination(client):
    for params, field in [({"page": "abc"}, "page"), ({"page": 0}, "page"),
                          ({"limit": "-1"}, "limit"), ({"limit": "2.5"}, "limit")]:
        r = client.get("/api/products", params=params)
        assert r.status_code == 400
        assert r.json() == {
            "status": "error",
            "message": f'Query parameter "{field}" must be a positive integer',
        }


def test_list_is_idempotent(client):
    first = client.get("/api/products", params={"category": "electronics"}).json()
    second = client.get("/api/products", params={"category": "electronics"}).json()
    assert first == second


def test_search_is_case_insensitive(client):
    body = client.get("/api/products/search", params={"name": "PHONE"}).json()
    assert body["status"] == "success"
    assert body["count"] == 1
    assert body["data"][0]["name"] == "Smartphone"


def test_search_without_term_is_a_validation_error(client):
    for params in ({}, {"name": ""}):
        r = client.get("/api/products/search", params=params)
        assert r.status_code == 400
        assert r.json() == {"status": "error", "message": 'Search term "name" is required'}


def test_stats_counts_seed_categories(client):
    body = client.get("/api/products/stats").json()
    assert body == {"status": "success", "data": {"electronics": 2, "kitchen": 1}}


def test_stats_picks_up_new_categories(client):
    client.post("/api/products", json={"name": "Rake", "price": 15, "category": "garden"}, headers=AUTH)
    data = client.get("/api/products/stats").json()["data"]
    assert data["garden"] == 1


def test_static_paths_are_not_captured_as_ids(client):
    # "search" and "stats" would 404 as unknown product ids if matched by /{product_id}
    assert client.get("/api/products/search", params={"name": "lap"}).json()["count"] == 1
    assert "electronics" in client.get("/api/products/stats").json()["data"]


def test_get_by_id(client):
    r = client.get("/api/products/3")
    assert r.status_code == 200
    assert r.json() == {
        "status": "success",
        "data": {
            "id": "3",
            "name": "Coffee Maker",
            "description": "Programmable coffee maker with timer",
            "price": 50,
            "category": "kitchen",
            "inStock": False,
        },
    }


def test_get_unknown_id_is_404(client):
    r = client.get("/api/products/999")
    assert r.status_code == 404
    assert r.json() == {"status": "error", "message": "Product with ID 999 not found"}


def test_unknown_route_is_404(client):
    r = client.get("/api/unknown")
    assert r.status_code == 404
    assert r.json() == {"status": "error", "message": "Route not found"}


def test_unsupported_method_falls_through_to_route_not_found(client):
    r = client.patch("/api/products/1", json={"price": 1}, headers=AUTH)
    assert r.status_code == 404
    assert r.json()["message"] == "Route not found"


def test_head_and_trace_fall_through_to_route_not_found(client):
    for path in ("/api/unknown", "/api/products"):
        assert client.head(path).status_code == 404
    r = client.request("TRACE", "/api/unknown")
    assert r.status_code == 404
    assert r.json() == {"status": "error", "message": "Route not found"}


def test_unlisted_method_is_404_not_405(client):
    r = client.request("PROPFIND", "/api/products")
    assert r.status_code == 404
    assert r.json()["message"] == "Route not found"


def test_list_rejects_loosely_formatted_numbers(client):
    for raw in ("1_0", " 2", "+3", "٣"):
        r = client.get("/api/products", params={"page": raw})
        assert r.status_code == 400
        assert r.json()["message"] == 'Query parameter "page" must be a positive integer'


def test_list_accepts_trailing_slash(client):
    body = client.get("/api/products/").json()
    assert body["status"] == "success"
    assert body["total"] == 3
