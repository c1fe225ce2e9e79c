from pydantic import BaseModel, ConfigDict, Field
from decimal import Decimal
from typing import Callable, Optional


# ── Input models ─────────────────────────────────────────────────────────────

# ids and skus may arrive as numbers; they are keyed as strings
IDS_AS_STR = ConfigDict(coerce_numbers_to_str=True)


class Seller(BaseModel):
    model_config = IDS_AS_STR

    id: str
    first_name: str
    last_name: str
    start_date: Optional[str] = None
    position: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Product(BaseModel):
    model_config = IDS_AS_STR

    sku: str
    purchase_price: Decimal
    name: Optional[str] = None
    category: Optional[str] = None
    sale_price: Optional[Decimal] = None


class LineItem(BaseModel):
    model_config = IDS_AS_STR

    sku: str
    quantity: Decimal
    sale_price: Decimal
    discount: Decimal = Decimal("0")  # percent, 0..100


class PurchaseRecord(BaseModel):
    model_config = IDS_AS_STR

    seller_id: str
    items: list[LineItem]
    receipt_id: Optional[str] = None
    date: Optional[str] = None
    customer_id: Optional[str] = None
    total_amount: Optional[Decimal] = None
    total_discount: Optional[Decimal] = None


class SalesDataset(BaseModel):
    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]


# ── Strategy configuration ───────────────────────────────────────────────────

# Strategies receive Decimal fields (prices, quantities, profit); mix them
# with Decimal or int factors, not floats. Any numeric return is accepted.

# (item, product) -> revenue for that line item
RevenueFn = Callable[[LineItem, Product], Decimal]
# (rank, total_sellers, accumulator) -> bonus
BonusFn = Callable[[int, int, "SellerAccumulator"], Decimal]


class AnalysisOptions(BaseModel):
    calculate_revenue: Optional[Callable] = None
    calculate_bonus: Optional[Callable] = None


# ── Working state ────────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    sku: str
    quantity: Decimal


class SellerAccumulator(BaseModel):
    seller_id: str
    name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0
    # insertion-ordered, so ties in quantity fall back to first-seen order
    products_sold: dict[str, Decimal] = Field(default_factory=dict)
    bonus: Decimal = Decimal("0")
    top_products: list[TopProduct] = Field(default_factory=list)


# ── Response models ──────────────────────────────────────────────────────────

class SellerResult(BaseModel):
    seller_id: str
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    bonus: Decimal
    top_products: list[TopProduct]
