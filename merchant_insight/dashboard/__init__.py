"""Dashboard session and text report"""

from .sales_dashboard import SalesDashboard
from .report import render_dashboard, render_transaction_list, render_insight

__all__ = ["SalesDashboard", "render_dashboard", "render_transaction_list", "render_insight"]
