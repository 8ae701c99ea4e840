"""Transaction entry and listing helpers"""

import uuid
from datetime import date
from typing import Iterable, List, Optional

from pydantic import ValidationError

from merchant_insight.constants import DEFAULT_CATEGORY, DEFAULT_PLATFORM, TransactionStatus
from merchant_insight.models import Transaction
from merchant_insight.utils.errors import InvalidTransactionError
from merchant_insight.utils.metrics import transactions_rejected


def new_transaction_id() -> str:
    return uuid.uuid4().hex


def create_transaction(
    product_name: str,
    price: float,
    cost: float,
    quantity: int,
    *,
    sale_date: Optional[date] = None,
    category: Optional[str] = None,
    platform: str = DEFAULT_PLATFORM,
    status: str = TransactionStatus.COMPLETED.value,
    today: Optional[date] = None
) -> Transaction:
    """
    Build a validated transaction from entry-form values

    Args:
        product_name: Product label (required)
        price: Sale price per unit, >= 0
        cost: Cost per unit, >= 0 (0 when unknown)
        quantity: Units sold, > 0
        sale_date: Sale date, defaults to today
        category: Category label, blank means DEFAULT_CATEGORY
        platform: Sales channel
        status: Order status
        today: Date used when sale_date is omitted (defaults to date.today())

    Returns:
        New Transaction with a fresh ID

    Raises:
        InvalidTransactionError: If any field fails validation
    """
    sale_date = sale_date or today or date.today()

    try:
        return Transaction(
            txn_id=new_transaction_id(),
            date=sale_date,
            product_name=(product_name or "").strip(),
            category=(category or "").strip() or DEFAULT_CATEGORY,
            price=price,
            cost=cost,
            quantity=quantity,
            platform=platform,
            status=status
        )
    except ValidationError as e:
        transactions_rejected.labels(source="form").inc()
        raise InvalidTransactionError(f"Invalid transaction: {e}") from e


def search_transactions(
    transactions: Iterable[Transaction],
    term: Optional[str] = None
) -> List[Transaction]:
    """
    Transaction list view: text search, newest first

    Matches the term case-insensitively against product name or category.
    Equal dates keep their input order.
    """
    needle = (term or "").strip().lower()
    matches = [
        txn for txn in transactions
        if not needle
        or needle in txn.product_name.lower()
        or needle in txn.category.lower()
    ]
    return sorted(matches, key=lambda txn: txn.date, reverse=True)
