#!/usr/bin/env python
"""
Demo runner script for MerchantInsight

Builds a dashboard session from the seed sales (or a CSV file) and prints
the overview for every time window.

Usage:
    python scripts/run_demo.py                  # All windows over demo data
    python scripts/run_demo.py --csv sales.csv  # Use your own export
    python scripts/run_demo.py --insight        # Also ask the LLM (needs OPENROUTER_API_KEY)
"""

import os
import sys
import argparse
from pathlib import Path
from datetime import datetime

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("LOG_LEVEL", "WARNING")

from dotenv import load_dotenv

load_dotenv(dotenv_path=project_root / '.env')

from merchant_insight.constants import TimeWindow
from merchant_insight.dashboard import SalesDashboard, render_dashboard, render_insight
from merchant_insight.demo import load_transactions_csv, seed_transactions
from merchant_insight.dashboard.report import header
from merchant_insight.utils.logging import get_logger

logger = get_logger(__name__)


def run_demo(csv_path: str = None, with_insight: bool = False):
    """
    Print every window of the dashboard

    Args:
        csv_path: Optional CSV file to load instead of the seed set
        with_insight: Also request an AI insight for the 'all' window
    """
    print(header("MerchantInsight - Demo Mode"))
    print(f"⏰ Start time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    try:
        transactions = load_transactions_csv(csv_path) if csv_path else seed_transactions()
    except Exception as e:
        print(f"❌ Error loading transactions: {e}")
        sys.exit(1)

    print(f"📁 Source: {csv_path or 'built-in seed data'}")
    print(f"📊 Transactions: {len(transactions):,}")

    session = SalesDashboard(transactions)
    now = datetime.now()

    for window in (TimeWindow.ALL, TimeWindow.MONTH, TimeWindow.WEEK, TimeWindow.TODAY):
        print(render_dashboard(session.snapshot(window, now), session.currency))

    if with_insight:
        print("\n🤖 Requesting AI insight (this may take a few seconds)...")
        print(render_insight(session.generate_insight(TimeWindow.ALL, now)))

    print(header("Demo Complete"))


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Run the MerchantInsight dashboard over demo data",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--csv', help="CSV file with transactions")
    parser.add_argument('--insight', action='store_true', help="Request an AI insight")

    args = parser.parse_args()
    run_demo(csv_path=args.csv, with_insight=args.insight)


if __name__ == "__main__":
    main()
