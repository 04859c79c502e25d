import dataclasses

import pytest
from flask import Flask

from stockapi.handlers import measures_blueprint, products_blueprint, universal_blueprint
from stockapi.models import Measure, Product
from stockapi.repository import NotFoundError, RepositoryError
from stockapi.services import MeasureService, ProductService, UniversalService


class _Store:
    def __init__(self, kind):
        self.kind = kind
        self.items = {}
        self.next_id = 1

    def get_by_id(self, id):
        if self.kind == "measure" and id <= 0:
            raise RepositoryError("invalid ID")
        if id not in self.items:
            raise NotFoundError(f"{self.kind} with id {id} not found")
        return self.items[id]

    def get_all(self, limit, offset):
        return [self.items[k] for k in sorted(self.items)][offset : offset + limit]

    def create(self, record):
        new_id = self.next_id
        self.next_id += 1
        self.items[new_id] = dataclasses.replace(record, id=new_id)
        return new_id

    def update(self, id, record):
        self.items[id] = dataclasses.replace(record, id=id)
        return self.items[id]

    def delete(self, id):
        del self.items[id]


class _Entities:
    def __init__(self):
        self.calls = []

    def get_all_entities(self, entity_type, limit, offset):
        self.calls.append((entity_type, limit, offset))
        if entity_type == "product":
            return [Product(id=1, name="milk", quantity=2, unit_cost=1.5, measure_id=1)]
        if entity_type == "measure":
            return [Measure(id=1, name="kg")]
        raise RepositoryError(f"unknown entity type: {entity_type}")


@pytest.fixture
def env():
    measures = _Store("measure")
    products = _Store("product")
    entities = _Entities()
    app = Flask("handlers_test")
    app.register_blueprint(measures_blueprint(MeasureService(measures)))
    app.register_blueprint(products_blueprint(ProductService(products)))
    app.register_blueprint(universal_blueprint(UniversalService(entities)))
    return app.test_client(), measures, products, entities


PRODUCT_BODY = {"name": "milk", "quantity": 3, "unit_cost": 1.5, "measure_id": 1}


def test_measure_create_then_get(env):
    client, measures, _, _ = env
    resp = client.post("/measures", json={"name": "kg"})
    assert resp.status_code == 201
    new_id = resp.get_json()["id"]
    got = client.get(f"/measures/{new_id}")
    assert got.status_code == 200
    assert got.get_json() == {"id": new_id, "name": "kg"}


def test_measure_list(env):
    client, measures, _, _ = env
    for name in ["a", "b", "c"]:
        client.post("/measures", json={"name": name})
    resp = client.get("/measures?limit=2&offset=1")
    assert resp.status_code == 200
    assert [m["name"] for m in resp.get_json()] == ["b", "c"]


@pytest.mark.parametrize(
    "query,message",
    [
        ("limit=0", "invalid limit value"),
        ("limit=abc", "invalid limit value"),
        ("offset=-1", "invalid offset value"),
    ],
)
def test_measure_list_bad_query(env, query, message):
    resp = env[0].get(f"/measures?{query}")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": message}


def test_measure_create_empty_name(env):
    resp = env[0].post("/measures", json={})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "measure name cannot be empty"}


def test_measure_create_bad_json(env):
    client, measures, _, _ = env
    resp = client.post("/measures", data="{oops", content_type="application/json")
    assert resp.status_code == 400
    assert measures.items == {}


@pytest.mark.parametrize("path,status", [("/measures/0", 400), ("/measures/x", 400), ("/measures/9", 404)])
def test_measure_get_errors(env, path, status):
    resp = env[0].get(path)
    assert resp.status_code == status
    expected = "invalid measure ID" if status == 400 else "measure not found"
    assert resp.get_json() == {"error": expected}


def test_measure_update(env):
    client, measures, _, _ = env
    client.post("/measures", json={"name": "kg"})
    resp = client.put("/measures/1", json={"name": "g"})
    assert resp.status_code == 200
    assert resp.get_json() == {"id": 1, "name": "g"}
    assert measures.items[1].name == "g"


def test_measure_update_errors(env):
    client = env[0]
    assert client.put("/measures/x", json={"name": "g"}).get_json() == {
        "error": "invalid ID format"
    }
    missing = client.put("/measures/5", json={"name": "g"})
    assert missing.status_code == 404
    empty = client.put("/measures/5", json={"name": ""})
    assert empty.status_code == 500
    assert empty.get_json() == {"error": "measure name cannot be empty"}


def test_measure_delete(env):
    client, measures, _, _ = env
    client.post("/measures", json={"name": "kg"})
    resp = client.delete("/measures/1")
    assert resp.status_code == 204
    assert measures.items == {}
    again = client.delete("/measures/1")
    assert again.status_code == 500
    assert "measure not found" in again.get_json()["error"]


def test_product_create(env):
    client, _, products, _ = env
    resp = client.post("/products", json=PRODUCT_BODY)
    assert resp.status_code == 201
    assert resp.get_json() == {"id": 1, "message": "Product created successfully"}
    assert products.items[1] == Product(id=1, **PRODUCT_BODY)


def test_product_create_validation_is_server_error(env):
    resp = env[0].post("/products", json={**PRODUCT_BODY, "measure_id": 0})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "invalid measure ID"}


def test_product_create_wrong_type(env):
    resp = env[0].post("/products", json={**PRODUCT_BODY, "quantity": "many"})
    assert resp.status_code == 400


def test_product_get(env):
    client = env[0]
    client.post("/products", json=PRODUCT_BODY)
    assert client.get("/products/1").get_json() == {"id": 1, **PRODUCT_BODY}
    missing = client.get("/products/abc")
    assert missing.status_code == 404
    assert missing.get_json() == {"error": "product with id 0 not found"}


def test_product_list_bad_query(env):
    resp = env[0].get("/products?limit=-3")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "invalid limit parameter"}


def test_product_update_and_delete(env):
    client, _, products, _ = env
    client.post("/products", json=PRODUCT_BODY)
    resp = client.put("/products/1", json={**PRODUCT_BODY, "quantity": 9})
    assert resp.status_code == 200
    assert resp.get_json()["quantity"] == 9
    assert client.delete("/products/1").status_code == 204
    assert products.items == {}


def test_product_update_delete_missing(env):
    client = env[0]
    assert client.put("/products/3", json=PRODUCT_BODY).status_code == 404
    assert client.delete("/products/3").status_code == 404
    assert client.delete("/products/x").get_json() == {"error": "invalid product ID"}


def test_entities_combined(env):
    client, _, _, entities = env
    resp = client.get("/api/entities?type=GetAllEntity")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["measures"] == [{"id": 1, "name": "kg"}]
    assert body["products"][0]["name"] == "milk"
    assert entities.calls == [("product", 10, 0), ("measure", 10, 0)]


def test_entities_bad_numbers_become_zero(env):
    client, _, _, entities = env
    client.get("/api/entities?type=measure&limit=abc&offset=zz")
    assert entities.calls == [("measure", 0, 0)]


def test_entities_unknown_type(env):
    resp = env[0].get("/api/entities?type=bogus")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "unknown entity type: bogus"}