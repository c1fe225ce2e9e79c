import json
from pathlib import Path
from typing import Optional

from sales_analytics.models import Product, PurchaseRecord, SalesDataset, Seller


class DataStore:
    def __init__(self) -> None:
        self.sellers: dict[str, Seller] = {}
        self.products: dict[str, Product] = {}
        self.purchase_records: list[PurchaseRecord] = []

    # ── writes ────────────────────────────────────────────────────────────────

    def add_seller(self, seller: Seller) -> None:
        self.sellers[seller.id] = seller

    def add_product(self, product: Product) -> None:
        self.products[product.sku] = product

    def add_purchase_record(self, record: PurchaseRecord) -> None:
        self.purchase_records.append(record)

    def clear(self) -> None:
        self.sellers.clear()
        self.products.clear()
        self.purchase_records.clear()

    def load_dataset(self, path: str | Path) -> None:
        """Replace the store contents with a JSON file in the dataset shape."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        dataset = SalesDataset.model_validate(raw)
        self.clear()
        for s in dataset.sellers:
            self.add_seller(s)
        for p in dataset.products:
            self.add_product(p)
        for r in dataset.purchase_records:
            self.add_purchase_record(r)

    # ── reads ─────────────────────────────────────────────────────────────────

    def get_seller(self, seller_id: str) -> Optional[Seller]:
        return self.sellers.get(seller_id)

    def get_product(self, sku: str) -> Optional[Product]:
        return self.products.get(sku)

    def list_sellers(self) -> list[Seller]:
        return list(self.sellers.values())

    def list_products(self) -> list[Product]:
        return list(self.products.values())

    def snapshot(self) -> SalesDataset:
        return SalesDataset(
            sellers=self.list_sellers(),
            products=self.list_products(),
            purchase_records=list(self.purchase_records),
        )


# module-level singleton used by the app
store = DataStore()
