"""Utility modules"""

from .config_loader import load_config, get_section
from .errors import (
    MerchantInsightError,
    ConfigurationError,
    DataLoadError,
    InvalidTransactionError,
    LLMError
)

__all__ = [
    "load_config",
    "get_section",
    "MerchantInsightError",
    "ConfigurationError",
    "DataLoadError",
    "InvalidTransactionError",
    "LLMError"
]
