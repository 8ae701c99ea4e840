"""Plain-text rendering of dashboard snapshots for the terminal"""

from typing import Iterable, List

from merchant_insight.constants import (
    DEFAULT_CURRENCY,
    TransactionStatus,
    WINDOW_LABELS,
    platform_label
)
from merchant_insight.models import DashboardSnapshot, SalesInsight, Transaction

WIDTH = 70


def header(title: str) -> str:
    """Formatted section header"""
    rule = "=" * WIDTH
    return f"\n{rule}\n  {title}\n{rule}"


def money(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency}{abs(amount):,.0f}"


def render_dashboard(snapshot: DashboardSnapshot, currency: str = DEFAULT_CURRENCY) -> str:
    """KPI cards, daily trend, platform share and top products"""
    summary = snapshot.summary
    lines: List[str] = [
        header(f"ภาพรวมผลกำไร - {WINDOW_LABELS[snapshot.window]} ({snapshot.window.value})"),
        f"📅 Generated: {snapshot.generated_at.strftime('%Y-%m-%d %H:%M')}",
        "",
        f"  • ยอดขายรวม (Revenue):  {money(summary.total_revenue, currency)}",
        f"  • กำไรสุทธิ (Profit):    {money(summary.total_profit, currency)}",
        f"  • จำนวนออเดอร์:          {summary.total_orders:,}",
        f"  • ยอดเฉลี่ยต่อบิล:        {money(summary.average_order_value, currency)}",
        f"  • กำไรต่อบิลเฉลี่ย:       {money(summary.average_profit_per_order, currency)}",
        f"  • สินค้าทำกำไรสูงสุด:     {summary.top_product}",
    ]

    lines.append(header("Revenue vs Profit (daily)"))
    if not snapshot.trend:
        lines.append("  (no sales in this window)")
    for point in snapshot.trend:
        lines.append(
            f"  {point.date.isoformat()}  revenue {money(point.revenue, currency):>12}"
            f"  profit {money(point.profit, currency):>12}"
        )

    lines.append(header("Revenue by platform"))
    total = sum(row.revenue for row in snapshot.platforms)
    if not snapshot.platforms:
        lines.append("  (no sales in this window)")
    for row in snapshot.platforms:
        share = (row.revenue / total * 100) if total > 0 else 0.0
        lines.append(f"  {platform_label(row.platform):<10} {money(row.revenue, currency):>12}  {share:5.1f}%")

    lines.append(header(f"Top {len(snapshot.top_products)} products by profit"))
    if not snapshot.top_products:
        lines.append("  (no sales in this window)")
    for rank, row in enumerate(snapshot.top_products, start=1):
        lines.append(f"  {rank}. {row.product:<30} {money(row.profit, currency):>12}")

    return "\n".join(lines)


def render_transaction_list(transactions: Iterable[Transaction], currency: str = DEFAULT_CURRENCY) -> str:
    """Transaction table, one line per sale"""
    transactions = list(transactions)
    lines = [header(f"รายการขาย ({len(transactions)})")]
    if not transactions:
        lines.append("  ไม่พบรายการขาย")
    for txn in transactions:
        marker = "" if txn.status == TransactionStatus.COMPLETED else f" [{txn.status.value}]"
        lines.append(
            f"  {txn.date.isoformat()}  {txn.product_name:<24} {txn.category:<10}"
            f" {platform_label(txn.platform):<9} x{txn.quantity:<3}"
            f" {money(txn.total_revenue, currency):>10}  profit {money(txn.profit, currency):>10}{marker}"
        )
    return "\n".join(lines)


def render_insight(insight: SalesInsight) -> str:
    return "\n".join([
        header("AI Insight"),
        f"📊 {insight.summary}",
        f"📈 {insight.trend}",
        f"💡 {insight.recommendation}",
    ])
