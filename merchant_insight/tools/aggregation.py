"""Sales aggregation - time-window filtering and dashboard metrics

All functions are pure: they read the given transactions, never mutate them,
and return zero/placeholder values for an empty input instead of raising.
Grouping is by exact, case-sensitive label and keeps first-appearance order,
so ties in any ranking resolve to the record seen first.
"""

from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Union

from merchant_insight.constants import (
    TimeWindow,
    WINDOW_DAYS,
    DEFAULT_TOP_PRODUCTS
)
from merchant_insight.models import (
    Transaction,
    SalesSummary,
    TrendPoint,
    PlatformRevenue,
    ProductProfit
)
from merchant_insight.utils.logging import get_logger

logger = get_logger(__name__)


def _as_day(now: Union[datetime, date]) -> date:
    # datetime is a subclass of date, check it first
    if isinstance(now, datetime):
        return now.date()
    return now


def filter_by_window(
    transactions: Iterable[Transaction],
    window: Union[TimeWindow, str],
    now: Union[datetime, date]
) -> List[Transaction]:
    """
    Keep the transactions whose date falls inside a relative time window

    Args:
        transactions: Transactions in their natural (session) order
        window: 'today', 'week', 'month' or 'all'
        now: Current instant; only its calendar day is used

    Returns:
        Matching transactions, input order preserved

    Raises:
        ValueError: If window is not a known TimeWindow
    """
    window = TimeWindow(window)

    if window == TimeWindow.ALL:
        return list(transactions)

    today = _as_day(now)

    if window == TimeWindow.TODAY:
        return [txn for txn in transactions if txn.date == today]

    start = today - timedelta(days=WINDOW_DAYS[window])
    selected = [txn for txn in transactions if start <= txn.date <= today]

    logger.debug(
        "Filtered transactions by window",
        window=window.value,
        start=start.isoformat(),
        end=today.isoformat(),
        selected=len(selected)
    )
    return selected


def _profit_by_product(transactions: Iterable[Transaction]) -> Dict[str, float]:
    profits: Dict[str, float] = {}
    for txn in transactions:
        profits[txn.product_name] = profits.get(txn.product_name, 0.0) + txn.profit
    return profits


def compute_summary(transactions: Iterable[Transaction]) -> SalesSummary:
    """
    Revenue, profit, order count, average order value and top product

    Every transaction counts as one order regardless of quantity.
    Status is not consulted; pending and cancelled orders are included.
    """
    total_revenue = 0.0
    total_profit = 0.0
    total_orders = 0
    product_profit: Dict[str, float] = {}

    for txn in transactions:
        total_revenue += txn.total_revenue
        total_profit += txn.profit
        total_orders += 1
        product_profit[txn.product_name] = product_profit.get(txn.product_name, 0.0) + txn.profit

    if total_orders == 0:
        return SalesSummary()

    # max() returns the first maximal item, i.e. the earliest product on ties
    top_product = max(product_profit.items(), key=lambda item: item[1])[0]

    return SalesSummary(
        total_revenue=total_revenue,
        total_profit=total_profit,
        total_orders=total_orders,
        average_order_value=total_revenue / total_orders,
        average_profit_per_order=total_profit / total_orders,
        top_product=top_product
    )


def compute_trend(transactions: Iterable[Transaction]) -> List[TrendPoint]:
    """
    Daily revenue and profit, ascending by date

    Only dates that have sales appear; gaps are not zero-filled.
    """
    buckets: Dict[date, List[float]] = {}
    for txn in transactions:
        bucket = buckets.setdefault(txn.date, [0.0, 0.0])
        bucket[0] += txn.total_revenue
        bucket[1] += txn.profit

    return [
        TrendPoint(date=day, revenue=revenue, profit=profit)
        for day, (revenue, profit) in sorted(buckets.items(), key=lambda item: item[0])
    ]


def compute_platform_breakdown(transactions: Iterable[Transaction]) -> List[PlatformRevenue]:
    """
    Revenue per platform, highest first

    Platforms are grouped by their literal value, so unknown channels
    still get their own row.
    """
    revenue: Dict[str, float] = {}
    for txn in transactions:
        revenue[txn.platform] = revenue.get(txn.platform, 0.0) + txn.total_revenue

    ranked = sorted(revenue.items(), key=lambda item: item[1], reverse=True)
    return [PlatformRevenue(platform=platform, revenue=value) for platform, value in ranked]


def compute_top_products(
    transactions: Iterable[Transaction],
    n: int = DEFAULT_TOP_PRODUCTS
) -> List[ProductProfit]:
    """
    Products ranked by cumulative profit, truncated to the first n

    sorted() is stable with reverse=True, so equal profits keep
    first-appearance order.
    """
    if n <= 0:
        return []

    ranked = sorted(_profit_by_product(transactions).items(), key=lambda item: item[1], reverse=True)
    return [ProductProfit(product=product, profit=profit) for product, profit in ranked[:n]]
