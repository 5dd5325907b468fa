# tests/test_products_read.py
from conftest import make_products


def test_ping(client):
    r = client.get("/ping")
    assert r.status_code == 200
    assert r.text == "pong"


def test_get_all(client):
    r = client.get("/products/all")
    assert r.status_code == 200
    assert r.json() == {"data": [p.model_dump() for p in make_products()]}


def test_get_by_id(client):
    r = client.get("/products/1")
    assert r.status_code == 200
    assert r.json()["data"] == make_products()[0].model_dump()


def test_get_by_id_invalid(client):
    r = client.get("/products/abc")
    assert r.status_code == 400
    assert r.json() == {"error": "invalid product id"}


def test_get_by_id_not_found(client):
    r = client.get("/products/999")
    assert r.status_code == 404
    assert r.json() == {"error": "product not found"}


def test_search_by_price(client):
    r = client.get("/products/search", params={"priceGt": 100})
    assert r.status_code == 200
    assert [p["id"] for p in r.json()["data"]] == [2, 3]
    assert all(p["price"] > 100 for p in r.json()["data"])


def test_search_invalid_price(client):
    r = client.get("/products/search", params={"priceGt": "cheap"})
    assert r.status_code == 400
    assert r.json() == {"error": "invalid product price"}


def test_search_missing_price(client):
    r = client.get("/products/search")
    assert r.status_code == 400
    assert r.json() == {"error": "invalid product price"}


def test_search_no_match(client):
    r = client.get("/products/search", params={"priceGt": 100000})
    assert r.status_code == 404
    assert r.json() == {"error": "no products found"}


def test_unknown_route_uses_error_envelope(client):
    r = client.get("/nothing/here")
    assert r.status_code == 404
    assert "error" in r.json()


def test_get_by_id_rejects_trailing_newline(client):
    r = client.get("/products/1%0A")
    assert r.status_code == 400
    assert r.json() == {"error": "invalid product id"}


def test_get_by_id_out_of_int64_range(client):
    r = client.get("/products/99999999999999999999")
    assert r.status_code == 400
    assert r.json() == {"error": "invalid product id"}


def test_search_rejects_padded_price(client):
    r = client.get("/products/search", params={"priceGt": " 100 "})
    assert r.status_code == 400
    assert r.json() == {"error": "invalid product price"}
