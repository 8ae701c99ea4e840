"""Demo data: seed transactions and CSV import"""

from .csv_data_loader import load_transactions_csv, transactions_to_dataframe, TransactionCsvLoader
from .seed_data import seed_transactions

__all__ = ['load_transactions_csv', 'transactions_to_dataframe', 'TransactionCsvLoader', 'seed_transactions']
