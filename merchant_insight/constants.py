"""Constants and enums for MerchantInsight"""

from enum import Enum


class Platform(str, Enum):
    """Sales channels the dashboard knows how to label"""
    SHOPEE = "Shopee"
    LAZADA = "Lazada"
    TIKTOK = "TikTok"
    FACEBOOK = "Facebook"
    LINE = "Line"


class TransactionStatus(str, Enum):
    """Order status (recorded, not used to filter aggregation)"""
    COMPLETED = "Completed"
    PENDING = "Pending"
    CANCELLED = "Cancelled"


class TimeWindow(str, Enum):
    """Relative date ranges for the dashboard filter"""
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    ALL = "all"


# Rolling window lengths, counted back from today's midnight
WINDOW_DAYS = {
    TimeWindow.WEEK: 7,
    TimeWindow.MONTH: 30,
}

OTHER_PLATFORM_LABEL = "Other"

PLATFORM_COLORS = {
    Platform.SHOPEE.value: "#EE4D2D",
    Platform.LAZADA.value: "#0f4c81",
    Platform.TIKTOK.value: "#000000",
    Platform.LINE.value: "#06C755",
    Platform.FACEBOOK.value: "#1877F2",
    OTHER_PLATFORM_LABEL: "#9CA3AF",
}

# Dashboard defaults
DEFAULT_TOP_PRODUCTS = 5
TOP_PRODUCT_PLACEHOLDER = "-"
DEFAULT_CATEGORY = "ทั่วไป"
DEFAULT_PLATFORM = Platform.TIKTOK.value
DEFAULT_CURRENCY = "฿"

# Categories offered by the entry form
CATEGORIES = ["เสื้อผ้า", "ความงาม", "อาหาร", "ของใช้", "อื่นๆ"]

WINDOW_LABELS = {
    TimeWindow.ALL: "ทั้งหมด",
    TimeWindow.MONTH: "เดือนนี้",
    TimeWindow.WEEK: "สัปดาห์นี้",
    TimeWindow.TODAY: "วันนี้",
}

# Insight fallbacks (shown instead of an error)
MISSING_KEY_INSIGHT = {
    "summary": "ไม่พบ API Key กรุณาตั้งค่า OPENROUTER_API_KEY เพื่อใช้งาน AI",
    "trend": "-",
    "recommendation": "-",
}

FAILED_INSIGHT = {
    "summary": "เกิดข้อผิดพลาดในการวิเคราะห์ข้อมูล",
    "trend": "ไม่สามารถระบุได้",
    "recommendation": "กรุณาลองใหม่อีกครั้ง",
}


def platform_label(platform: str) -> str:
    """Display name for a platform; unknown channels render as 'Other'"""
    known = {p.value for p in Platform}
    return platform if platform in known else OTHER_PLATFORM_LABEL
