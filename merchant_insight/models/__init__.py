"""Data models for MerchantInsight"""

from .transaction import Transaction
from .analytics import (
    SalesSummary,
    TrendPoint,
    PlatformRevenue,
    ProductProfit,
    DashboardSnapshot
)
from .insight import SalesInsight

__all__ = [
    "Transaction",
    "SalesSummary",
    "TrendPoint",
    "PlatformRevenue",
    "ProductProfit",
    "DashboardSnapshot",
    "SalesInsight"
]
