from collections.abc import Mapping
from decimal import Decimal
from typing import Iterable, Optional

from pydantic import ValidationError

from sales_analytics.errors import InvalidInputError, MissingConfigurationError
from sales_analytics.logger import get_logger
from sales_analytics.models import (
    AnalysisOptions,
    BonusFn,
    Product,
    PurchaseRecord,
    RevenueFn,
    SalesDataset,
    Seller,
    SellerAccumulator,
    SellerResult,
    TopProduct,
)
from sales_analytics.strategies import (
    calculate_bonus_by_profit,
    calculate_simple_revenue,
    round_money,
    to_money,
)

logger = get_logger(__name__)

TOP_PRODUCTS_LIMIT = 10

_REQUIRED_COLLECTIONS = ("sellers", "products", "purchase_records")


# ── Input checks ─────────────────────────────────────────────────────────────

def _validate_dataset(data) -> SalesDataset:
    if isinstance(data, SalesDataset):
        raw = {name: getattr(data, name) for name in _REQUIRED_COLLECTIONS}
    elif isinstance(data, Mapping):
        raw = data
    else:
        raise InvalidInputError("Dataset must be a mapping or SalesDataset")

    for name in _REQUIRED_COLLECTIONS:
        value = raw.get(name)
        if not isinstance(value, (list, tuple)) or len(value) == 0:
            raise InvalidInputError(f"'{name}' must be a non-empty list")

    if isinstance(data, SalesDataset):
        return data
    try:
        return SalesDataset.model_validate({name: list(raw[name]) for name in _REQUIRED_COLLECTIONS})
    except ValidationError as exc:
        raise InvalidInputError(f"Malformed dataset: {exc}") from exc


def _resolve_strategies(options) -> tuple[RevenueFn, BonusFn]:
    if options is None:
        raise MissingConfigurationError("No revenue or bonus strategy supplied")
    if isinstance(options, Mapping):
        try:
            options = AnalysisOptions(**options)
        except ValidationError as exc:
            raise MissingConfigurationError(f"Strategies must be callables: {exc}") from exc
    if options.calculate_revenue is None and options.calculate_bonus is None:
        raise MissingConfigurationError("No revenue or bonus strategy supplied")
    return (
        options.calculate_revenue or calculate_simple_revenue,
        options.calculate_bonus or calculate_bonus_by_profit,
    )


# ── Pipeline stages ──────────────────────────────────────────────────────────

def index_references(
    sellers: Iterable[Seller],
    products: Iterable[Product],
) -> tuple[dict[str, SellerAccumulator], dict[str, Product]]:
    # dicts keep the first-seen position of a key while the value is replaced,
    # so duplicates are last-write-wins without disturbing roster order
    accumulators: dict[str, SellerAccumulator] = {
        s.id: SellerAccumulator(seller_id=s.id, name=s.full_name)
        for s in sellers
    }
    products_by_sku: dict[str, Product] = {p.sku: p for p in products}
    return accumulators, products_by_sku


def aggregate_purchases(
    records: Iterable[PurchaseRecord],
    accumulators: dict[str, SellerAccumulator],
    products_by_sku: dict[str, Product],
    calculate_revenue: RevenueFn,
) -> None:
    skipped_records = 0
    skipped_items = 0

    for record in records:
        seller = accumulators.get(record.seller_id)
        if seller is None:
            skipped_records += 1
            logger.debug("Skipping record %s: unknown seller %r", record.receipt_id, record.seller_id)
            continue

        seller.sales_count += 1

        for item in record.items:
            product = products_by_sku.get(item.sku)
            if product is None:
                skipped_items += 1
                logger.debug("Skipping item in record %s: unknown sku %r", record.receipt_id, item.sku)
                continue

            item_revenue = to_money(calculate_revenue(item, product))
            item_cost = product.purchase_price * item.quantity

            seller.revenue += item_revenue
            seller.profit += item_revenue - item_cost
            seller.products_sold[item.sku] = seller.products_sold.get(item.sku, Decimal("0")) + item.quantity

    # money is rounded once, after every record has been summed
    for seller in accumulators.values():
        seller.revenue = round_money(seller.revenue)
        seller.profit = round_money(seller.profit)

    if skipped_records or skipped_items:
        logger.info(
            "Dropped %d record(s) with unknown sellers and %d item(s) with unknown products",
            skipped_records, skipped_items,
        )


def rank_sellers(
    accumulators: Iterable[SellerAccumulator],
    calculate_bonus: BonusFn,
) -> list[SellerAccumulator]:
    # sorted() is stable, also with reverse=True: equal profits keep roster order
    ranked = sorted(accumulators, key=lambda s: s.profit, reverse=True)
    total = len(ranked)
    for index, seller in enumerate(ranked):
        seller.bonus = to_money(calculate_bonus(index, total, seller))
    return ranked


def select_top_products(products_sold: dict[str, Decimal], limit: int = TOP_PRODUCTS_LIMIT) -> list[TopProduct]:
    # clamped to 0..TOP_PRODUCTS_LIMIT
    limit = max(0, min(limit, TOP_PRODUCTS_LIMIT))
    ordered = sorted(products_sold.items(), key=lambda kv: kv[1], reverse=True)
    return [TopProduct(sku=sku, quantity=qty) for sku, qty in ordered[:limit]]


def assemble_result(seller: SellerAccumulator) -> SellerResult:
    return SellerResult(
        seller_id=seller.seller_id,
        name=seller.name,
        revenue=seller.revenue,
        profit=seller.profit,
        sales_count=seller.sales_count,
        bonus=seller.bonus,
        top_products=seller.top_products,
    )


# ── Entry point ──────────────────────────────────────────────────────────────

def analyze_sales_data(
    data,
    options: Optional[AnalysisOptions | Mapping] = None,
    top_products_limit: int = TOP_PRODUCTS_LIMIT,
) -> list[SellerResult]:
    """
    Compute revenue, profit, sales count, bonus and top products for every
    seller in the roster, ordered by profit (highest first).

    Raises InvalidInputError when a collection is missing or empty and
    MissingConfigurationError when no strategy override is given. Unknown
    sellers and products in purchase records are dropped silently.
    """
    dataset = _validate_dataset(data)
    calculate_revenue, calculate_bonus = _resolve_strategies(options)

    logger.info(
        "Analyzing %d purchase record(s) for %d seller(s) over %d product(s)",
        len(dataset.purchase_records), len(dataset.sellers), len(dataset.products),
    )

    # ── 1. Index reference data ──────────────────────────────────────────────
    accumulators, products_by_sku = index_references(dataset.sellers, dataset.products)

    # ── 2. Accumulate ────────────────────────────────────────────────────────
    aggregate_purchases(dataset.purchase_records, accumulators, products_by_sku, calculate_revenue)

    # ── 3. Rank and award bonuses ────────────────────────────────────────────
    ranked = rank_sellers(accumulators.values(), calculate_bonus)

    # ── 4. Top products and projection ───────────────────────────────────────
    results: list[SellerResult] = []
    for seller in ranked:
        seller.top_products = select_top_products(seller.products_sold, top_products_limit)
        results.append(assemble_result(seller))

    total_bonus = sum((r.bonus for r in results), Decimal("0"))
    logger.info("Analysis complete: %d seller result(s), total bonus %s", len(results), total_bonus)
    return results
