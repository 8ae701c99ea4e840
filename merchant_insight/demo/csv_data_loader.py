"""CSV transaction loader - imports sales exported from a spreadsheet"""

import pandas as pd
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from merchant_insight.constants import DEFAULT_CATEGORY, DEFAULT_PLATFORM, TransactionStatus
from merchant_insight.models import Transaction
from merchant_insight.tools.transaction_tools import new_transaction_id
from merchant_insight.utils.errors import DataLoadError
from merchant_insight.utils.logging import get_logger
from merchant_insight.utils.metrics import transactions_rejected

logger = get_logger(__name__)

REQUIRED_COLUMNS = ['date', 'product_name', 'price', 'quantity']
OPTIONAL_DEFAULTS = {
    'txn_id': None,
    'category': DEFAULT_CATEGORY,
    'cost': 0.0,
    'platform': DEFAULT_PLATFORM,
    'status': TransactionStatus.COMPLETED.value,
}


def _native(value: Any) -> Any:
    """numpy scalar -> Python scalar; blank cells, NaN and NaT -> None"""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    if value is None or pd.isna(value):
        return None
    if hasattr(value, 'item'):
        return value.item()
    return value


class TransactionCsvLoader:
    """
    Loads sales transactions from a CSV file.

    Expected columns: date, product_name, price, quantity and optionally
    txn_id, category, cost, platform, status. Row order is kept.
    """

    def __init__(self, csv_path: Union[str, Path]):
        """
        Initialize loader

        Args:
            csv_path: Path to the CSV file

        Raises:
            DataLoadError: If the file does not exist
        """
        self.csv_path = Path(csv_path)
        self.log = logger.bind(file=self.csv_path.name)
        if not self.csv_path.exists():
            raise DataLoadError(f"Transaction file not found: {csv_path}")

        self.skipped_rows = 0
        self.duplicate_rows = 0
        self._frame: Optional[pd.DataFrame] = None

    @property
    def frame(self) -> pd.DataFrame:
        """Raw rows with parsed dates (cached)"""
        if self._frame is None:
            try:
                # Every cell stays text: labels like "1001" or "NA" are product
                # names, and pydantic parses the numeric fields itself
                df = pd.read_csv(self.csv_path, dtype=str, keep_default_na=False)
            except (pd.errors.ParserError, UnicodeDecodeError) as e:
                raise DataLoadError(f"Unreadable CSV {self.csv_path}: {e}") from e
            except pd.errors.EmptyDataError:
                df = pd.DataFrame(columns=REQUIRED_COLUMNS)

            missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
            if missing:
                raise DataLoadError(f"Missing required columns in {self.csv_path.name}: {missing}")

            df['date'] = pd.to_datetime(df['date'], errors='coerce').dt.date
            self.log.info(f"Loaded {len(df)} rows")
            self._frame = df
        return self._frame

    def _row_to_transaction(self, row: Dict[str, Any]) -> Transaction:
        values = {key: _native(value) for key, value in row.items()}
        for column, default in OPTIONAL_DEFAULTS.items():
            if values.get(column) is None:
                values[column] = default
        if values['txn_id'] is None:
            values['txn_id'] = new_transaction_id()

        return Transaction(
            txn_id=values['txn_id'],
            date=values['date'],
            product_name=values['product_name'],
            category=values['category'],
            price=values['price'],
            cost=values['cost'],
            quantity=values['quantity'],
            platform=values['platform'],
            status=values['status']
        )

    def load(self) -> List[Transaction]:
        """
        Convert every valid row to a Transaction

        Rows failing validation (bad date, negative price, ...) and rows
        reusing an earlier txn_id are skipped and logged rather than
        aborting the import.
        """
        transactions = []
        seen_ids = set()
        self.skipped_rows = 0
        self.duplicate_rows = 0

        for line_no, row in enumerate(self.frame.to_dict('records'), start=2):
            try:
                txn = self._row_to_transaction(row)
            except ValidationError as e:
                self.skipped_rows += 1
                transactions_rejected.labels(source="csv").inc()
                self.log.warning(f"Skipping invalid row {line_no}", errors=e.error_count())
                continue

            if txn.txn_id in seen_ids:
                self.skipped_rows += 1
                self.duplicate_rows += 1
                transactions_rejected.labels(source="csv").inc()
                self.log.warning(f"Skipping row {line_no}: duplicate txn_id", txn_id=txn.txn_id)
                continue

            seen_ids.add(txn.txn_id)
            transactions.append(txn)

        self.log.info(
            "Transaction import complete",
            imported=len(transactions),
            skipped=self.skipped_rows,
            duplicates=self.duplicate_rows
        )
        return transactions


def load_transactions_csv(csv_path: Union[str, Path]) -> List[Transaction]:
    """Load transactions from a CSV file (see TransactionCsvLoader)"""
    return TransactionCsvLoader(csv_path).load()


def transactions_to_dataframe(transactions: List[Transaction]) -> pd.DataFrame:
    """Tabular export with derived revenue, cost and profit columns"""
    columns = ['txn_id', 'date', 'product_name', 'category', 'price', 'cost',
               'quantity', 'platform', 'status', 'total_revenue', 'total_cost', 'profit']
    records = [
        {
            **txn.model_dump(mode='json'),
            'total_revenue': txn.total_revenue,
            'total_cost': txn.total_cost,
            'profit': txn.profit,
        }
        for txn in transactions
    ]
    return pd.DataFrame(records, columns=columns)
