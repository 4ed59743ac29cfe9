from typing import Optional
from pydantic import BaseModel, Field

from app.models.transaction import Money, Transaction


class _CamelModel(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}


class SaleSummary(_CamelModel):
    total_sale_amount: Money = Field(..., alias="totalSaleAmount")
    total_sold_items: int = Field(..., ge=0, alias="totalSoldItems")
    total_not_sold_items: int = Field(..., ge=0, alias="totalNotSoldItems")


class PriceRangeCount(_CamelModel):
    price_range: str = Field(..., alias="priceRange")
    number_of_items: int = Field(..., ge=0, alias="numberOfItems")


class CategoryCount(_CamelModel):
    category: Optional[str] = None
    number_of_items: int = Field(..., ge=1, alias="numberOfItems")


class CombinedReport(_CamelModel):
    transactions: list[Transaction]
    stats: SaleSummary
    price_ranges: list[PriceRangeCount] = Field(..., alias="priceRanges")
    categories: list[CategoryCount]
