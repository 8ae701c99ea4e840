"""AI sales insight model"""

from pydantic import BaseModel, Field


class SalesInsight(BaseModel):
    """Narrative summary returned by the language model"""

    summary: str = Field(..., description="Overall sales and profit picture")
    trend: str = Field(..., description="Most profitable products or channels")
    recommendation: str = Field(..., description="One concrete action to cut cost or push margin")

    class Config:
        json_schema_extra = {
            "example": {
                "summary": "ยอดขายสัปดาห์นี้ดี กำไรรวม 3,200 บาท",
                "trend": "เซรั่มหน้าใสทำกำไรสูงสุดผ่าน Line",
                "recommendation": "ลองจัดโปรเซรั่มคู่กับครีมกันแดด"
            }
        }
