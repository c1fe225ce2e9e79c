"""
Tests for the in-memory data store and its JSON loader.
"""

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from sales_analytics.engine import analyze_sales_data
from sales_analytics.models import Seller
from sales_analytics.store import DataStore
from sales_analytics.strategies import calculate_bonus_by_profit


DATASET = {
    "sellers": [
        {"id": "s1", "first_name": "A", "last_name": "B"},
        {"id": "s2", "first_name": "C", "last_name": "D"},
    ],
    "products": [{"sku": "P1", "purchase_price": 5, "name": "Widget"}],
    "purchase_records": [
        {"receipt_id": "r1", "seller_id": "s2", "items": [{"sku": "P1", "quantity": 2, "sale_price": 10}]},
    ],
}


class TestLoadDataset:
    def test_load_replaces_contents(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps(DATASET), encoding="utf-8")

        store = DataStore()
        store.add_seller(Seller(id="old", first_name="X", last_name="Y"))
        store.load_dataset(path)

        assert [s.id for s in store.list_sellers()] == ["s1", "s2"]
        assert store.get_product("P1").name == "Widget"
        assert len(store.purchase_records) == 1

    def test_snapshot_feeds_engine(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps(DATASET), encoding="utf-8")
        store = DataStore()
        store.load_dataset(path)

        results = analyze_sales_data(store.snapshot(), {"calculate_bonus": calculate_bonus_by_profit})
        assert [r.seller_id for r in results] == ["s2", "s1"]
        assert results[0].profit == Decimal("10.00")

    def test_invalid_file_leaves_store_untouched(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"sellers": [{"id": "s1"}]}), encoding="utf-8")
        store = DataStore()
        store.add_seller(Seller(id="old", first_name="X", last_name="Y"))

        with pytest.raises(ValidationError):
            store.load_dataset(path)
        assert store.get_seller("old") is not None
