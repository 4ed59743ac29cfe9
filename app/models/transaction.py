from decimal import Decimal
from datetime import datetime
from typing import Annotated, Optional
from pydantic import BaseModel, Field, PlainSerializer

# Decimal internally, plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class Transaction(BaseModel):
    """One seeded sales record. Every field may be missing in the source data."""

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}

    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    price: Optional[Money] = Field(None, ge=Decimal("0"))
    image: Optional[str] = None
    sold: Optional[bool] = None
    date_of_sale: Optional[datetime] = Field(None, alias="dateOfSale")
