"""Demo sales used to seed a fresh dashboard session"""

from datetime import date, timedelta
from typing import List, Optional

from merchant_insight.models import Transaction

# (days ago, product, category, price, cost, quantity, platform)
SEED_ROWS = [
    (0, "เสื้อยืด Oversize", "เสื้อผ้า", 250, 120, 2, "TikTok"),
    (0, "ลิปสติก Matte", "ความงาม", 199, 80, 1, "Shopee"),
    (0, "น้ำพริกกากหมู", "อาหาร", 89, 50, 10, "Facebook"),
    (1, "เซรั่มหน้าใส", "ความงาม", 450, 200, 3, "Line"),
    (2, "กางเกงยีนส์ขาสั้น", "เสื้อผ้า", 390, 180, 1, "Lazada"),
    (3, "ขนมเปี๊ยะลาวา", "อาหาร", 120, 70, 5, "Facebook"),
    (4, "เสื้อยืด Oversize", "เสื้อผ้า", 250, 120, 1, "Shopee"),
    (10, "เดรสเกาหลี", "เสื้อผ้า", 590, 300, 1, "TikTok"),
    (15, "ครีมกันแดด", "ความงาม", 290, 150, 2, "Line"),
    (20, "เสื้อยืด Oversize", "เสื้อผ้า", 250, 120, 5, "TikTok"),
    (25, "หูฟังบลูทูธ", "ของใช้", 890, 450, 2, "Shopee"),
    (32, "กระเป๋าผ้า", "เสื้อผ้า", 150, 60, 5, "Lazada"),
]


def seed_transactions(today: Optional[date] = None) -> List[Transaction]:
    """Seed set with dates relative to today, newest first"""
    today = today or date.today()
    return [
        Transaction(
            txn_id=str(index),
            date=today - timedelta(days=days_ago),
            product_name=product,
            category=category,
            price=price,
            cost=cost,
            quantity=quantity,
            platform=platform
        )
        for index, (days_ago, product, category, price, cost, quantity, platform)
        in enumerate(SEED_ROWS, start=1)
    ]
