"""Unit tests for configuration, logging and CSV import"""

import json
import logging
from pathlib import Path

import pytest

from merchant_insight.constants import DEFAULT_CATEGORY, TransactionStatus
from merchant_insight.demo import TransactionCsvLoader, load_transactions_csv, transactions_to_dataframe
from merchant_insight.utils.config_loader import load_config, get_section
from merchant_insight.utils.errors import ConfigurationError, DataLoadError
from merchant_insight.utils.logging import get_logger, JSONFormatter

FIXTURES = Path(__file__).parent / "fixtures"


# Configuration

def test_bundled_config_loads(monkeypatch):
    monkeypatch.delenv("MERCHANT_INSIGHT_CONFIG", raising=False)

    config = load_config()

    assert config['version']
    assert get_section(config, 'dashboard')['top_products_limit'] == 5
    assert get_section(config, 'llm')['model']
    assert get_section(config, 'missing') == {}


def test_config_env_override(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text("version: '2'\ndashboard: {currency: '$'}\nllm: {}\n", encoding="utf-8")
    monkeypatch.setenv("MERCHANT_INSIGHT_CONFIG", str(path))

    config = load_config()

    assert config['version'] == '2'
    assert config['dashboard']['currency'] == '$'


def test_config_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "nope.yaml"))


def test_config_missing_keys(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("version: '1'\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="dashboard"):
        load_config(str(path))


def test_config_invalid_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("version: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(str(path))


# Logging

def test_get_logger_does_not_duplicate_handlers():
    first = get_logger("merchant_insight.tests.logging")
    second = get_logger("merchant_insight.tests.logging")

    assert first.logger is second.logger
    assert len(second.logger.handlers) == 1


def test_json_formatter():
    record = logging.LogRecord("demo", logging.INFO, __file__, 1, "กำไร %s", ("ดี",), None)

    data = json.loads(JSONFormatter().format(record))

    assert data['level'] == "INFO"
    assert data['logger'] == "demo"
    assert data['message'] == "กำไร ดี"


def test_json_formatter_flattens_context():
    record = logging.LogRecord("demo", logging.WARNING, __file__, 1, "Skipping row", (), None)
    record.context = {"file": "sales.csv", "row": 4, "level": "DEBUG"}

    data = json.loads(JSONFormatter().format(record))

    assert data['message'] == "Skipping row"
    assert data['file'] == "sales.csv"
    assert data['row'] == 4
    assert data['level'] == "WARNING"


def test_bound_logger_merges_context(caplog):
    log = get_logger("merchant_insight.tests.bind").bind(file="sales.csv")

    with caplog.at_level(logging.INFO, logger="merchant_insight.tests.bind"):
        log.info("Loaded", rows=3)

    record = caplog.records[-1]
    assert record.getMessage() == "Loaded"
    assert record.context == {"file": "sales.csv", "rows": 3}


# CSV import

def test_load_sample_csv():
    loader = TransactionCsvLoader(FIXTURES / "sample_sales.csv")

    transactions = loader.load()

    assert [t.product_name for t in transactions] == [
        "เสื้อยืด Oversize",
        "ลิปสติก Matte",
        "น้ำพริกกากหมู",
        "กระเป๋าผ้า",
    ]
    assert loader.skipped_rows == 2


def test_csv_defaults_for_blank_cells():
    transactions = load_transactions_csv(FIXTURES / "sample_sales.csv")
    chili_paste = transactions[2]

    assert chili_paste.txn_id
    assert chili_paste.cost == 0
    assert chili_paste.status == TransactionStatus.COMPLETED
    assert transactions[1].status == TransactionStatus.PENDING
    assert transactions[3].platform == "Instagram"


def test_csv_missing_file(tmp_path):
    with pytest.raises(DataLoadError):
        load_transactions_csv(tmp_path / "missing.csv")


def test_csv_missing_required_columns(tmp_path):
    path = tmp_path / "sales.csv"
    path.write_text("date,product_name\n2024-01-01,A\n", encoding="utf-8")

    with pytest.raises(DataLoadError, match="price"):
        load_transactions_csv(path)


def test_csv_default_category(tmp_path):
    path = tmp_path / "sales.csv"
    path.write_text("date,product_name,price,quantity\n2024-01-01,A,10,3\n", encoding="utf-8")

    [txn] = load_transactions_csv(path)

    assert txn.category == DEFAULT_CATEGORY
    assert txn.quantity == 3
    assert txn.total_revenue == 30


def test_csv_keeps_labels_as_text(tmp_path):
    path = tmp_path / "sales.csv"
    path.write_text(
        "date,product_name,category,price,cost,quantity\n"
        "2024-01-01,1001,2,100,50,1\n"
        "2024-01-01,NA,อาหาร,100,50,1\n",
        encoding="utf-8"
    )
    loader = TransactionCsvLoader(path)

    transactions = loader.load()

    assert [t.product_name for t in transactions] == ["1001", "NA"]
    assert transactions[0].category == "2"
    assert loader.skipped_rows == 0


def test_csv_skips_duplicate_ids(tmp_path):
    path = tmp_path / "sales.csv"
    path.write_text(
        "txn_id,date,product_name,price,quantity\n"
        "1,2024-01-01,first,100,1\n"
        "1,2024-01-02,second,200,1\n"
        "2,2024-01-02,third,300,1\n",
        encoding="utf-8"
    )
    loader = TransactionCsvLoader(path)

    transactions = loader.load()

    assert [t.product_name for t in transactions] == ["first", "third"]
    assert transactions[0].txn_id == "1"
    assert loader.duplicate_rows == 1
    assert loader.skipped_rows == 1


def test_transactions_to_dataframe():
    transactions = load_transactions_csv(FIXTURES / "sample_sales.csv")

    df = transactions_to_dataframe(transactions)

    assert len(df) == 4
    assert df.loc[0, 'profit'] == 260
    assert df.loc[0, 'date'] == "2024-01-01"
    assert transactions_to_dataframe([]).empty
