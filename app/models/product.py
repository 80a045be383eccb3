import uuid
from decimal import Decimal
from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel
from app.core.clock import utc_now

class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)

    # Basic Info
    name: str = Field(index=True)
    description: str = ""
    category: str = Field(default="General", index=True)
    image_url: Optional[str] = None

    # Pricing
    price: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2, ge=0)

    # Inventory (display only, never reserved)
    stock: int = Field(default=0, ge=0)

    created_at: datetime = Field(default_factory=utc_now)
