"""Custom exceptions for MerchantInsight"""


class MerchantInsightError(Exception):
    """Base exception for MerchantInsight errors"""
    pass


class ConfigurationError(MerchantInsightError):
    """Configuration loading errors"""
    pass


class LLMError(MerchantInsightError):
    """LLM API errors"""
    pass


class DataLoadError(MerchantInsightError):
    """Transaction import errors"""
    pass


class InvalidTransactionError(MerchantInsightError):
    """Rejected transaction entry (negative price, zero quantity, ...)"""
    pass
