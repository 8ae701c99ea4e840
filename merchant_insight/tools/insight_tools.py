"""AI sales insight - narrative summary of transactions via the LLM client

Failures never reach the caller: a missing API key, an API error or an
unparseable reply each produce a well-formed fallback SalesInsight.
"""

import asyncio
import json
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from merchant_insight.constants import MISSING_KEY_INSIGHT, FAILED_INSIGHT
from merchant_insight.models import Transaction, SalesInsight
from merchant_insight.tools.llm_client import call_llm, has_api_key
from merchant_insight.utils.config_loader import load_config, get_section
from merchant_insight.utils.errors import MerchantInsightError
from merchant_insight.utils.logging import get_logger
from merchant_insight.utils.metrics import insight_fallbacks

logger = get_logger(__name__)

PROMPT_TEMPLATE = """You are a business analyst helping a small online seller.
Below are their sales records as JSON, including unit price and unit cost:
{data}

Keys: d=date, p=product, c=category, price=unit price, cost=unit cost,
qty=quantity, pl=sales platform.

Reply with a single JSON object with exactly these string fields:
1. "summary": a short overview of revenue and profit - is profit healthy?
2. "trend": which products (highest margin) or platforms earn the most profit
3. "recommendation": one concrete tip to cut cost or push the high-profit items

Write every field in friendly, easy Thai, like a trusted friend giving advice."""


def compact_records(transactions: Iterable[Transaction]) -> List[Dict[str, Any]]:
    """Shorten transactions to the fields the model needs (saves tokens)"""
    return [
        {
            "d": txn.date.isoformat(),
            "p": txn.product_name,
            "c": txn.category,
            "price": txn.price,
            "cost": txn.cost,
            "qty": txn.quantity,
            "pl": txn.platform,
        }
        for txn in transactions
    ]


def build_prompt(transactions: Iterable[Transaction]) -> str:
    data = json.dumps(compact_records(transactions), ensure_ascii=False)
    return PROMPT_TEMPLATE.format(data=data)


def parse_insight(text: str) -> SalesInsight:
    """
    Parse the model reply into a SalesInsight

    Raises:
        json.JSONDecodeError: If the reply is not JSON
        ValidationError: If fields are missing or not strings
    """
    cleaned = text.strip()
    # Some models wrap JSON mode output in a markdown fence anyway
    if cleaned.startswith("```"):
        cleaned = cleaned.strip("`")
        if cleaned.lower().startswith("json"):
            cleaned = cleaned[4:]
    return SalesInsight.model_validate(json.loads(cleaned))


def _fallback(reason: str, template: Dict[str, str]) -> SalesInsight:
    insight_fallbacks.labels(reason=reason).inc()
    return SalesInsight(**template)


def analyze_sales_data(
    transactions: Iterable[Transaction],
    llm_config: Optional[Dict[str, Any]] = None
) -> SalesInsight:
    """
    Ask the LLM for a summary, trend and recommendation

    Args:
        transactions: Records to analyse (usually the filtered dashboard set)
        llm_config: 'llm' config section; loaded from settings.yaml when None

    Returns:
        SalesInsight from the model, or a fallback insight on any failure
    """
    transactions = list(transactions)

    if not has_api_key():
        logger.warning("OPENROUTER_API_KEY not found, returning placeholder insight")
        return _fallback("missing_api_key", MISSING_KEY_INSIGHT)

    logger.info(f"Requesting sales insight for {len(transactions)} transactions")

    try:
        settings = llm_config if llm_config is not None else get_section(load_config(), "llm")
        text = call_llm(
            build_prompt(transactions),
            model=settings.get("model"),
            agent_name="sales_insight",
            max_retries=settings.get("max_retries", 3),
            timeout=settings.get("timeout_seconds", 60),
            temperature=settings.get("temperature"),
            response_format={"type": "json_object"}
        )
        insight = parse_insight(text)

    except MerchantInsightError as e:
        logger.error(f"Sales insight failed: {e}")
        return _fallback("llm_error", FAILED_INSIGHT)

    except (json.JSONDecodeError, ValidationError) as e:
        logger.exception("Unreadable sales insight response", error_type=type(e).__name__)
        return _fallback("invalid_response", FAILED_INSIGHT)

    logger.info("Sales insight generated", transactions=len(transactions))
    return insight


async def analyze_sales_data_async(
    transactions: Iterable[Transaction],
    llm_config: Optional[Dict[str, Any]] = None
) -> SalesInsight:
    """Awaitable analyze_sales_data; the blocking HTTP call runs in a worker thread"""
    return await asyncio.to_thread(analyze_sales_data, list(transactions), llm_config)
