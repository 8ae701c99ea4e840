"""OpenRouter LLM client with automatic cost tracking and retries."""

from openai import OpenAI, RateLimitError
import os
import time
from typing import Optional, Dict, Any
from merchant_insight.utils.metrics import (
    llm_tokens_counter,
    llm_cost_counter,
    llm_api_latency,
    llm_rate_limit_hits
)
from merchant_insight.utils.errors import LLMError
from merchant_insight.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "google/gemini-2.5-flash"

# Lazy-initialize OpenRouter client
_client = None


def has_api_key() -> bool:
    """Whether OPENROUTER_API_KEY is set to a non-empty value"""
    return bool(os.getenv("OPENROUTER_API_KEY"))


def get_client() -> OpenAI:
    """Get or create the OpenRouter client (lazy initialization)"""
    global _client
    if _client is None:
        api_key = os.getenv("OPENROUTER_API_KEY")
        if not api_key:
            raise LLMError("OPENROUTER_API_KEY environment variable is not set")
        _client = OpenAI(
            api_key=api_key,
            base_url=os.getenv("OPENROUTER_BASE_URL", DEFAULT_BASE_URL)
        )
    return _client


def reset_client() -> None:
    """Drop the cached client so the next call re-reads the environment"""
    global _client
    _client = None


# Pricing per 1M tokens (input tokens, simplified)
MODEL_PRICING = {
    "google/gemini-2.5-flash": 0.30 / 1_000_000,
    "google/gemini-2.5-pro": 1.25 / 1_000_000,
    "anthropic/claude-haiku-4.5": 0.80 / 1_000_000,
    "openai/gpt-4o-mini": 0.15 / 1_000_000,
}


def call_llm(
    prompt: str,
    model: Optional[str] = None,
    agent_name: str = "unknown",
    max_retries: int = 3,
    timeout: float = 60,
    temperature: Optional[float] = None,
    response_format: Optional[Dict[str, Any]] = None
) -> str:
    """
    Call LLM with automatic cost tracking and retries.

    Args:
        prompt: User prompt
        model: Model name (defaults to DEFAULT_LLM_MODEL or Gemini 2.5 Flash)
        agent_name: Name of caller (for metrics)
        max_retries: Max attempts
        timeout: Per-request timeout in seconds
        temperature: Sampling temperature, provider default when None
        response_format: e.g. {"type": "json_object"} for JSON mode

    Returns:
        LLM response text

    Raises:
        LLMError: If the API key is missing or the call fails after retries
    """
    model = model or os.getenv("DEFAULT_LLM_MODEL", DEFAULT_MODEL)
    client = get_client()

    request: Dict[str, Any] = {
        "model": model,
        "messages": [{"role": "user", "content": prompt}],
        "timeout": timeout,
    }
    if temperature is not None:
        request["temperature"] = temperature
    if response_format is not None:
        request["response_format"] = response_format

    for attempt in range(max_retries):
        try:
            start_time = time.time()

            response = client.chat.completions.create(**request)

            # Track metrics
            latency = time.time() - start_time
            tokens = response.usage.total_tokens if response.usage else 0
            cost = calculate_cost(tokens, model)

            llm_tokens_counter.labels(model_name=model, agent_name=agent_name).inc(tokens)
            llm_cost_counter.labels(model_name=model).inc(cost)
            llm_api_latency.labels(model_name=model).observe(latency)

            logger.info(
                "LLM call successful",
                model=model,
                tokens=tokens,
                cost=cost,
                latency=latency,
                agent=agent_name
            )

            content = response.choices[0].message.content
            if not content:
                raise LLMError("Empty response text from LLM")
            return content

        except RateLimitError as e:
            llm_rate_limit_hits.labels(model_name=model).inc()
            logger.warning(f"Rate limit hit, retrying... (attempt {attempt + 1}/{max_retries})")
            if attempt < max_retries - 1:
                time.sleep(2 ** attempt)  # Exponential backoff
            else:
                raise LLMError(f"Rate limit exceeded after {max_retries} attempts: {e}") from e

        except Exception as e:
            logger.error(f"LLM API error: {e}", attempt=attempt)
            if attempt < max_retries - 1:
                time.sleep(1)
            else:
                raise LLMError(f"LLM API call failed after {max_retries} attempts: {e}") from e

    raise LLMError("LLM call made no attempts (max_retries < 1)")


def calculate_cost(tokens: int, model: str) -> float:
    """
    Calculate cost based on token usage and model pricing.

    Args:
        tokens: Number of tokens used
        model: Model name

    Returns:
        Cost in USD
    """
    price_per_token = MODEL_PRICING.get(model, 0.30 / 1_000_000)
    return tokens * price_per_token
