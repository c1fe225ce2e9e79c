from decimal import Decimal, ROUND_HALF_UP

from sales_analytics.models import LineItem, Product, SellerAccumulator

TWO_DP = Decimal("0.01")

# rank-dependent share of profit paid out as bonus
TOP_RATE = Decimal("0.15")
PODIUM_RATE = Decimal("0.10")
BOTTOM_RATE = Decimal("0")
DEFAULT_RATE = Decimal("0.05")


def to_money(value) -> Decimal:
    """Coerce a strategy return value (int, float, str or Decimal) to Decimal."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(amount: Decimal) -> Decimal:
    """Round to 2 dp, half away from zero."""
    return to_money(amount).quantize(TWO_DP, rounding=ROUND_HALF_UP)


def calculate_simple_revenue(item: LineItem, _product: Product) -> Decimal:
    discount = 1 - item.discount / 100
    return round_money(item.sale_price * item.quantity * discount)


def calculate_bonus_by_profit(index: int, total: int, seller: SellerAccumulator) -> Decimal:
    # the top check comes first so a sole seller is paid as the top performer
    if index == 0:
        rate = TOP_RATE
    elif index in (1, 2):
        rate = PODIUM_RATE
    elif index == total - 1:
        rate = BOTTOM_RATE
    else:
        rate = DEFAULT_RATE
    return round_money(seller.profit * rate)
