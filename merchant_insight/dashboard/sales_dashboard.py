"""Sales dashboard session - in-memory transactions plus derived analytics"""

import time
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from merchant_insight.constants import TimeWindow, DEFAULT_TOP_PRODUCTS, DEFAULT_CURRENCY
from merchant_insight.models import Transaction, DashboardSnapshot, SalesInsight
from merchant_insight.tools.aggregation import (
    filter_by_window,
    compute_summary,
    compute_trend,
    compute_platform_breakdown,
    compute_top_products
)
from merchant_insight.tools.insight_tools import analyze_sales_data, analyze_sales_data_async
from merchant_insight.tools.transaction_tools import search_transactions
from merchant_insight.utils.config_loader import load_config, get_section
from merchant_insight.utils.logging import get_logger
from merchant_insight.utils.metrics import (
    dashboard_builds,
    dashboard_build_time,
    transactions_recorded
)

logger = get_logger(__name__)


class SalesDashboard:
    """
    Holds one session's transactions and computes dashboard views.

    Transactions live in memory only, newest first. They can be added but
    never edited or removed.
    """

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        config: Optional[Dict[str, Any]] = None
    ):
        self.config = config if config is not None else load_config()
        dashboard_config = get_section(self.config, "dashboard")

        self.default_window = TimeWindow(dashboard_config.get("default_window", TimeWindow.ALL.value))
        self.top_products_limit = int(dashboard_config.get("top_products_limit", DEFAULT_TOP_PRODUCTS))
        self.currency = dashboard_config.get("currency", DEFAULT_CURRENCY)

        self._transactions: List[Transaction] = list(transactions or [])
        logger.info(f"Dashboard session started with {len(self._transactions)} transactions")

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """All session transactions, newest entry first"""
        return tuple(self._transactions)

    def add_transaction(self, transaction: Transaction) -> None:
        """Record a new sale at the front of the list"""
        self._transactions.insert(0, transaction)
        transactions_recorded.labels(platform=transaction.platform).inc()
        logger.info(
            "Transaction recorded",
            txn_id=transaction.txn_id,
            product=transaction.product_name,
            platform=transaction.platform
        )

    def filtered(
        self,
        window: Union[TimeWindow, str, None] = None,
        now: Optional[datetime] = None
    ) -> List[Transaction]:
        window = window or self.default_window
        return filter_by_window(self._transactions, window, now or datetime.now())

    def snapshot(
        self,
        window: Union[TimeWindow, str, None] = None,
        now: Optional[datetime] = None
    ) -> DashboardSnapshot:
        """
        Filter by time window and compute every dashboard metric

        Args:
            window: Time window, defaults to the configured default_window
            now: Current instant (injected in tests), defaults to datetime.now()

        Returns:
            DashboardSnapshot for the window
        """
        start_time = time.time()
        now = now or datetime.now()
        window = TimeWindow(window or self.default_window)

        selected = filter_by_window(self._transactions, window, now)
        snapshot = DashboardSnapshot(
            window=window,
            generated_at=now,
            transactions=selected,
            summary=compute_summary(selected),
            trend=compute_trend(selected),
            platforms=compute_platform_breakdown(selected),
            top_products=compute_top_products(selected, self.top_products_limit)
        )

        dashboard_builds.labels(window=window.value).inc()
        dashboard_build_time.observe(time.time() - start_time)
        logger.debug(
            "Dashboard snapshot built",
            window=window.value,
            transactions=len(selected)
        )
        return snapshot

    def list_transactions(self, search: Optional[str] = None) -> List[Transaction]:
        """Transaction list page: search by product/category, newest date first"""
        return search_transactions(self._transactions, search)

    def insight_input(
        self,
        window: Union[TimeWindow, str, None] = None,
        now: Optional[datetime] = None
    ) -> List[Transaction]:
        """The filtered set, or every transaction when the window is empty"""
        selected = self.filtered(window, now)
        return selected if selected else list(self._transactions)

    def generate_insight(
        self,
        window: Union[TimeWindow, str, None] = None,
        now: Optional[datetime] = None
    ) -> SalesInsight:
        """AI narrative for the window; always returns a SalesInsight"""
        return analyze_sales_data(self.insight_input(window, now), get_section(self.config, "llm"))

    async def generate_insight_async(
        self,
        window: Union[TimeWindow, str, None] = None,
        now: Optional[datetime] = None
    ) -> SalesInsight:
        """Awaitable generate_insight; abandoning it leaves the session untouched"""
        return await analyze_sales_data_async(self.insight_input(window, now), get_section(self.config, "llm"))
