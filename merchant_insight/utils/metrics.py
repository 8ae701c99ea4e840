"""Prometheus metrics definitions"""

from prometheus_client import Counter, Histogram


# Business metrics
transactions_recorded = Counter(
    'transactions_recorded_total',
    'Sales transactions added to the dashboard session',
    labelnames=['platform']
)

transactions_rejected = Counter(
    'transactions_rejected_total',
    'Rows or form entries rejected by validation',
    labelnames=['source']  # form, csv
)

dashboard_builds = Counter(
    'dashboard_builds_total',
    'Dashboard snapshots computed',
    labelnames=['window']
)

dashboard_build_time = Histogram(
    'dashboard_build_time_seconds',
    'Time to filter and aggregate one dashboard snapshot',
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5]
)

# LLM cost & usage tracking
llm_tokens_counter = Counter(
    'llm_tokens_used_total',
    'Total LLM tokens consumed',
    labelnames=['model_name', 'agent_name']
)

llm_cost_counter = Counter(
    'llm_cost_dollars_total',
    'Total LLM cost in USD',
    labelnames=['model_name']
)

llm_api_latency = Histogram(
    'llm_api_latency_seconds',
    'Latency of LLM API calls',
    labelnames=['model_name'],
    buckets=[0.5, 1, 2, 5, 10, 30]
)

llm_rate_limit_hits = Counter(
    'llm_rate_limit_hits_total',
    'Number of LLM rate limit errors',
    labelnames=['model_name']
)

insight_fallbacks = Counter(
    'insight_fallbacks_total',
    'Sales insights replaced by a fallback result',
    labelnames=['reason']  # missing_api_key, llm_error, invalid_response
)
