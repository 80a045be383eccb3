import uuid
from decimal import Decimal
from typing import List
from datetime import datetime
from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel
from app.core.clock import utc_now
from app.models.product import Product

class CartItem(SQLModel, table=True):
    __tablename__ = "cart_items"
    # Backs the insert-or-increment upsert used when adding to a cart
    __table_args__ = (
        UniqueConstraint("session_id", "product_id", name="uq_cart_items_session_product"),
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)

    # References
    session_id: str = Field(index=True)
    product_id: uuid.UUID = Field(foreign_key="products.id")

    # Cart Details
    quantity: int = Field(default=1)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

class CartLine(SQLModel):
    """A cart row with its product embedded, as returned by the ``get`` action."""
    id: uuid.UUID
    session_id: str
    product_id: uuid.UUID
    quantity: int
    created_at: datetime
    product: Product

class CartView(SQLModel):
    items: List[CartLine] = []
    total: Decimal = Decimal("0")
