"""Transaction data model"""

import datetime

from pydantic import BaseModel, Field

from merchant_insight.constants import TransactionStatus, DEFAULT_PLATFORM


class Transaction(BaseModel):
    """One recorded sale; immutable once created"""

    txn_id: str = Field(..., description="Unique opaque transaction ID")
    date: datetime.date = Field(..., description="Sale date (day granularity)")
    product_name: str = Field(..., min_length=1, description="Product label, grouped by exact match")
    category: str = Field(..., description="Category label")
    price: float = Field(..., ge=0, description="Sale price per unit")
    cost: float = Field(0.0, ge=0, description="Cost per unit (0 means unknown)")
    quantity: int = Field(..., gt=0, description="Units sold")
    platform: str = Field(DEFAULT_PLATFORM, description="Sales channel (Shopee, Lazada, TikTok, Facebook, Line)")
    status: TransactionStatus = Field(TransactionStatus.COMPLETED, description="Order status")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "txn_id": "1",
                "date": "2024-01-01",
                "product_name": "เสื้อยืด Oversize",
                "category": "เสื้อผ้า",
                "price": 250,
                "cost": 120,
                "quantity": 2,
                "platform": "TikTok",
                "status": "Completed"
            }
        }

    @property
    def total_revenue(self) -> float:
        return self.price * self.quantity

    @property
    def total_cost(self) -> float:
        return self.cost * self.quantity

    @property
    def profit(self) -> float:
        """Revenue minus cost; negative when sold below cost"""
        return self.total_revenue - self.total_cost
