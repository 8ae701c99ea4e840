"""Tests for the transaction model, entry form helper and list search"""

import pytest
from datetime import date
from pydantic import ValidationError

from merchant_insight.constants import (
    DEFAULT_CATEGORY,
    OTHER_PLATFORM_LABEL,
    TransactionStatus,
    platform_label
)
from merchant_insight.demo import seed_transactions
from merchant_insight.models import Transaction
from merchant_insight.tools.transaction_tools import create_transaction, search_transactions
from merchant_insight.utils.errors import InvalidTransactionError


def test_derived_amounts(make_txn):
    txn = make_txn(price=250, cost=120, quantity=2)

    assert txn.total_revenue == 500
    assert txn.total_cost == 240
    assert txn.profit == 260


def test_transaction_is_immutable(make_txn):
    txn = make_txn()

    with pytest.raises(ValidationError):
        txn.price = 1


def test_cost_defaults_to_zero():
    txn = Transaction(
        txn_id="x",
        date=date(2024, 1, 1),
        product_name="A",
        category="อาหาร",
        price=10,
        quantity=1
    )

    assert txn.cost == 0
    assert txn.profit == 10
    assert txn.status == TransactionStatus.COMPLETED


@pytest.mark.parametrize("field,value", [
    ("price", -1),
    ("cost", -0.5),
    ("quantity", 0),
    ("product_name", ""),
])
def test_invalid_fields_rejected(field, value):
    data = {
        "txn_id": "x",
        "date": "2024-01-01",
        "product_name": "A",
        "category": "อาหาร",
        "price": 10,
        "cost": 5,
        "quantity": 1,
    }
    data[field] = value

    with pytest.raises(ValidationError):
        Transaction(**data)


def test_platform_label_fallback():
    assert platform_label("Shopee") == "Shopee"
    assert platform_label("Line") == "Line"
    assert platform_label("Instagram") == OTHER_PLATFORM_LABEL
    assert platform_label("shopee") == OTHER_PLATFORM_LABEL


def test_create_transaction_defaults():
    today = date(2024, 3, 15)

    txn = create_transaction("  เสื้อยืด  ", 250, 120, 2, category="", today=today)

    assert txn.product_name == "เสื้อยืด"
    assert txn.category == DEFAULT_CATEGORY
    assert txn.date == today
    assert txn.platform == "TikTok"
    assert txn.status == TransactionStatus.COMPLETED
    assert txn.txn_id


def test_create_transaction_assigns_unique_ids():
    first = create_transaction("A", 10, 5, 1)
    second = create_transaction("A", 10, 5, 1)

    assert first.txn_id != second.txn_id


def test_create_transaction_keeps_explicit_values():
    txn = create_transaction(
        "ลิปสติก",
        199,
        80,
        1,
        sale_date=date(2024, 1, 2),
        category="ความงาม",
        platform="Shopee",
        status="Pending",
        today=date(2024, 3, 15)
    )

    assert txn.date == date(2024, 1, 2)
    assert txn.category == "ความงาม"
    assert txn.platform == "Shopee"
    assert txn.status == TransactionStatus.PENDING


@pytest.mark.parametrize("kwargs", [
    {"product_name": "", "price": 10, "cost": 5, "quantity": 1},
    {"product_name": "A", "price": -10, "cost": 5, "quantity": 1},
    {"product_name": "A", "price": 10, "cost": 5, "quantity": 0},
])
def test_create_transaction_rejects_bad_input(kwargs):
    with pytest.raises(InvalidTransactionError):
        create_transaction(**kwargs)


def test_search_matches_product_or_category(make_txn):
    txns = [
        make_txn(product="เสื้อยืด Oversize", category="เสื้อผ้า", day="2024-01-01"),
        make_txn(product="Serum", category="ความงาม", day="2024-01-03"),
        make_txn(product="Dress", category="เสื้อผ้า", day="2024-01-02"),
    ]

    by_category = search_transactions(txns, "เสื้อผ้า")
    by_product = search_transactions(txns, "SERUM")

    assert [t.product_name for t in by_category] == ["Dress", "เสื้อยืด Oversize"]
    assert [t.product_name for t in by_product] == ["Serum"]


def test_search_without_term_sorts_newest_first(make_txn):
    txns = [
        make_txn(product="old", day="2024-01-01"),
        make_txn(product="new", day="2024-02-01"),
        make_txn(product="new-2", day="2024-02-01"),
    ]

    result = search_transactions(txns)

    assert [t.product_name for t in result] == ["new", "new-2", "old"]


def test_seed_transactions_shape():
    today = date(2024, 3, 15)
    txns = seed_transactions(today)

    assert len(txns) == 12
    assert len({t.txn_id for t in txns}) == 12
    assert txns[0].date == today
    assert {t.platform for t in txns} == {"Shopee", "Lazada", "TikTok", "Facebook", "Line"}
