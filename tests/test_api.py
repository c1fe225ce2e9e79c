"""
HTTP-level tests for the reporting service.
"""

import pytest
from fastapi.testclient import TestClient

from sales_analytics.main import app
from sales_analytics.store import store
from scripts.seed_data import seed


@pytest.fixture
def client():
    store.clear()
    seed(store)
    yield TestClient(app)
    store.clear()


EXAMPLE = {
    "sellers": [{"id": "s1", "first_name": "A", "last_name": "B"}],
    "products": [{"sku": "P1", "purchase_price": 5}],
    "purchase_records": [
        {"seller_id": "s1", "items": [{"sku": "P1", "quantity": 2, "sale_price": 10, "discount": 0}]},
    ],
}


class TestReferenceEndpoints:
    def test_list_sellers(self, client):
        resp = client.get("/api/v1/sellers")
        assert resp.status_code == 200
        assert len(resp.json()["sellers"]) == 5

    def test_unknown_seller_404(self, client):
        assert client.get("/api/v1/sellers/nobody").status_code == 404

    def test_list_products(self, client):
        assert len(client.get("/api/v1/products").json()["products"]) == 30


class TestReports:
    def test_store_report_ranked_by_profit(self, client):
        resp = client.get("/api/v1/reports/sales")
        assert resp.status_code == 200
        sellers = resp.json()["sellers"]
        assert len(sellers) == 5
        profits = [s["profit"] for s in sellers]
        assert profits == sorted(profits, reverse=True)
        assert all(len(s["top_products"]) <= 10 for s in sellers)
        assert sellers[-1]["bonus"] == 0

    def test_orphan_records_do_not_appear(self, client):
        sellers = client.get("/api/v1/reports/sales").json()["sellers"]
        assert "seller_999" not in {s["seller_id"] for s in sellers}
        skus = {t["sku"] for s in sellers for t in s["top_products"]}
        assert "SKU_999" not in skus

    def test_single_seller_report(self, client):
        resp = client.get("/api/v1/reports/sales/seller_3")
        assert resp.status_code == 200
        body = resp.json()
        assert body["seller_id"] == "seller_3"
        assert 0 <= body["rank"] < 5

    def test_single_seller_report_unknown(self, client):
        assert client.get("/api/v1/reports/sales/nobody").status_code == 404

    def test_posted_dataset(self, client):
        resp = client.post("/api/v1/reports/sales", json=EXAMPLE)
        assert resp.status_code == 200
        (result,) = resp.json()["sellers"]
        assert result["revenue"] == 20.0
        assert result["profit"] == 10.0
        assert result["bonus"] == 1.5
        assert result["top_products"] == [{"sku": "P1", "quantity": 2}]

    def test_posted_empty_records_rejected(self, client):
        body = dict(EXAMPLE, purchase_records=[])
        resp = client.post("/api/v1/reports/sales", json=body)
        assert resp.status_code == 422
        assert "purchase_records" in resp.json()["detail"]

    def test_empty_store_rejected(self, client):
        store.clear()
        assert client.get("/api/v1/reports/sales").status_code == 422


class TestAdmin:
    def test_reseed(self, client):
        store.clear()
        resp = client.post("/api/v1/admin/seed")
        assert resp.status_code == 200
        assert resp.json() == {
            "status": "seeded",
            "sellers": 5,
            "products": 30,
            "purchase_records": 202,
        }
