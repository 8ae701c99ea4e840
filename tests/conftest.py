"""Shared fixtures for MerchantInsight tests"""

import itertools
from datetime import date, datetime

import pytest

from merchant_insight.models import Transaction

_ids = itertools.count(1)


@pytest.fixture
def now():
    """Fixed clock: 2024-03-15 14:30 local"""
    return datetime(2024, 3, 15, 14, 30)


@pytest.fixture
def make_txn():
    """Factory for transactions with sensible defaults"""

    def _make(
        product="A",
        price=100.0,
        cost=50.0,
        quantity=1,
        day="2024-01-01",
        platform="TikTok",
        category="เสื้อผ้า",
        status="Completed"
    ):
        return Transaction(
            txn_id=f"t{next(_ids)}",
            date=date.fromisoformat(day) if isinstance(day, str) else day,
            product_name=product,
            category=category,
            price=price,
            cost=cost,
            quantity=quantity,
            platform=platform,
            status=status
        )

    return _make


@pytest.fixture
def test_config():
    """Config dict equivalent to settings.yaml, without touching disk"""
    return {
        "version": "1.0",
        "dashboard": {
            "default_window": "all",
            "top_products_limit": 5,
            "currency": "฿",
        },
        "llm": {
            "model": "google/gemini-2.5-flash",
            "max_retries": 1,
            "timeout_seconds": 5,
        },
    }
