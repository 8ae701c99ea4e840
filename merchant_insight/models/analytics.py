"""Aggregated dashboard data models"""

import datetime
from typing import List

from pydantic import BaseModel, Field

from merchant_insight.constants import TimeWindow, TOP_PRODUCT_PLACEHOLDER
from .transaction import Transaction


class SalesSummary(BaseModel):
    """KPI figures for a set of transactions"""

    total_revenue: float = Field(0.0, description="Sum of price * quantity")
    total_profit: float = Field(0.0, description="Sum of (price - cost) * quantity, may be negative")
    total_orders: int = Field(0, ge=0, description="Number of transactions")
    average_order_value: float = Field(0.0, description="Revenue per order, 0 when there are no orders")
    average_profit_per_order: float = Field(0.0, description="Profit per order, 0 when there are no orders")
    top_product: str = Field(TOP_PRODUCT_PLACEHOLDER, description="Product with the highest cumulative profit")


class TrendPoint(BaseModel):
    """Revenue and profit for one sale date"""

    date: datetime.date
    revenue: float
    profit: float


class PlatformRevenue(BaseModel):
    """Revenue for one sales channel"""

    platform: str
    revenue: float


class ProductProfit(BaseModel):
    """Cumulative profit for one product"""

    product: str
    profit: float


class DashboardSnapshot(BaseModel):
    """Everything the dashboard renders for one time window"""

    window: TimeWindow
    generated_at: datetime.datetime
    transactions: List[Transaction] = Field(default_factory=list)
    summary: SalesSummary
    trend: List[TrendPoint] = Field(default_factory=list)
    platforms: List[PlatformRevenue] = Field(default_factory=list)
    top_products: List[ProductProfit] = Field(default_factory=list)
