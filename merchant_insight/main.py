"""Main entry point for MerchantInsight"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables FIRST, before anything reads OPENROUTER_API_KEY
load_dotenv(dotenv_path=Path.cwd() / '.env')

from merchant_insight.constants import TimeWindow
from merchant_insight.dashboard import (
    SalesDashboard,
    render_dashboard,
    render_transaction_list,
    render_insight
)
from merchant_insight.demo import load_transactions_csv, seed_transactions
from merchant_insight.models import Transaction
from merchant_insight.utils.config_loader import load_config
from merchant_insight.utils.errors import MerchantInsightError
from merchant_insight.utils.logging import get_logger

logger = get_logger(__name__)


def _load_transactions(csv_path: Optional[str]) -> List[Transaction]:
    if csv_path:
        return load_transactions_csv(csv_path)
    return seed_transactions()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="merchant-insight",
        description="MerchantInsight - sales and profit dashboard for online sellers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  merchant-insight dashboard
  merchant-insight dashboard --window week --insight
  merchant-insight dashboard --csv sales.csv --window month
  merchant-insight list --search เสื้อ
"""
    )
    parser.add_argument('--config', help="Path to settings.yaml")

    subparsers = parser.add_subparsers(dest="command")

    # -------- DASHBOARD --------
    dashboard = subparsers.add_parser("dashboard", help="Show revenue/profit overview")
    dashboard.add_argument(
        '--window',
        choices=[w.value for w in TimeWindow],
        help="Time window (default from config)"
    )
    dashboard.add_argument('--csv', help="Load transactions from CSV instead of demo data")
    dashboard.add_argument(
        '--insight',
        action='store_true',
        help="Ask the LLM for a summary, trend and recommendation"
    )

    # -------- LIST --------
    ls = subparsers.add_parser("list", aliases=["ls"], help="List transactions, newest first")
    ls.add_argument('-s', '--search', help="Filter by product name or category")
    ls.add_argument('--csv', help="Load transactions from CSV instead of demo data")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = load_config(args.config)
        session = SalesDashboard(_load_transactions(args.csv), config=config)

        if args.command == "dashboard":
            snapshot = session.snapshot(args.window)
            print(render_dashboard(snapshot, session.currency))
            if args.insight:
                print(render_insight(session.generate_insight(args.window)))

        elif args.command in ("list", "ls"):
            print(render_transaction_list(session.list_transactions(args.search), session.currency))

    except MerchantInsightError as e:
        logger.error(f"Command failed: {e}")
        print(f"❌ {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
