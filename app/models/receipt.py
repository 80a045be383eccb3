from typing import List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class CustomerInfo(BaseModel):
    # Presence is the only check made on customer details
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)

class ReceiptLine(BaseModel):
    name: str
    quantity: int
    price: str
    subtotal: str

class Receipt(BaseModel):
    """Post-checkout summary. Built per request and never stored."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    order_id: str
    timestamp: datetime
    customer: CustomerInfo
    items: List[ReceiptLine]
    total: str
    recommendations: List[str]
