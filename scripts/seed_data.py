"""
Deterministic test-data generator.

Produces:
  - 5 sellers
  - 30 products across 4 categories
  - 200 purchase records spread over Jan 2026
    - 1–4 line items each
    - ~30 % of items carry a 5–20 % discount
    - a couple of records reference an unknown seller / sku,
      which the engine is expected to drop
"""

import random
from datetime import datetime, timedelta
from decimal import Decimal

from sales_analytics.models import LineItem, Product, PurchaseRecord, Seller
from sales_analytics.store import DataStore

SEED = 42
START = datetime(2026, 1, 1)
END   = datetime(2026, 1, 31, 23, 59, 59)

CATEGORIES = ["Electronics", "Home", "Garden", "Toys"]


def _rand_dt(rng: random.Random, lo: datetime = START, hi: datetime = END) -> datetime:
    delta = hi - lo
    secs = rng.randint(0, int(delta.total_seconds()))
    return lo + timedelta(seconds=secs)


def seed(store: DataStore) -> None:
    rng = random.Random(SEED)

    # ── sellers ──────────────────────────────────────────────────────────────
    sellers = [
        Seller(id="seller_1", first_name="Alexey", last_name="Petrov", position="Senior Seller"),
        Seller(id="seller_2", first_name="Ekaterina", last_name="Smirnova", position="Seller"),
        Seller(id="seller_3", first_name="Dmitry", last_name="Ivanov", position="Seller"),
        Seller(id="seller_4", first_name="Maria", last_name="Kuznetsova", position="Junior Seller"),
        Seller(id="seller_5", first_name="Ivan", last_name="Sokolov", position="Junior Seller"),
    ]
    for s in sellers:
        store.add_seller(s)

    # ── products ─────────────────────────────────────────────────────────────
    products = []
    for n in range(1, 31):
        purchase = Decimal(rng.randint(200, 5_000)) / 100
        markup = Decimal(rng.randint(120, 180)) / 100
        products.append(Product(
            sku=f"SKU_{n:03d}",
            name=f"Product {n}",
            category=rng.choice(CATEGORIES),
            purchase_price=purchase,
            sale_price=(purchase * markup).quantize(Decimal("0.01")),
        ))
    for p in products:
        store.add_product(p)

    # sellers are weighted so the ranking is not a coin toss
    seller_weights = [5, 4, 3, 2, 1]

    # ── purchase records ─────────────────────────────────────────────────────
    total = 200
    for i in range(1, total + 1):
        seller = rng.choices(sellers, weights=seller_weights)[0]
        items = []
        for _ in range(rng.randint(1, 4)):
            product = rng.choice(products)
            discount = Decimal(rng.choice([5, 10, 15, 20])) if rng.random() < 0.30 else Decimal("0")
            items.append(LineItem(
                sku=product.sku,
                quantity=rng.randint(1, 5),
                sale_price=product.sale_price,
                discount=discount,
            ))
        store.add_purchase_record(PurchaseRecord(
            receipt_id=f"receipt_{i:04d}",
            date=_rand_dt(rng).date().isoformat(),
            seller_id=seller.id,
            customer_id=f"customer_{rng.randint(1, 60):03d}",
            items=items,
        ))

    # orphans: unknown seller, and a known seller with an unknown sku
    store.add_purchase_record(PurchaseRecord(
        receipt_id="receipt_orphan_seller",
        seller_id="seller_999",
        items=[LineItem(sku="SKU_001", quantity=1, sale_price=Decimal("10.00"))],
    ))
    store.add_purchase_record(PurchaseRecord(
        receipt_id="receipt_orphan_sku",
        seller_id="seller_1",
        items=[LineItem(sku="SKU_999", quantity=1, sale_price=Decimal("10.00"))],
    ))


if __name__ == "__main__":
    from sales_analytics.store import store

    seed(store)
    print(f"Seeded {len(store.sellers)} sellers, {len(store.products)} products, "
          f"{len(store.purchase_records)} purchase records")
