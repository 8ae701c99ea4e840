"""MerchantInsight - sales analytics for small online sellers"""

__version__ = "0.1.0"
