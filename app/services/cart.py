import uuid
import logging
from decimal import Decimal
from typing import List
from fastapi import HTTPException
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlmodel import Session, select, delete
from app.core.clock import utc_now
from app.models.cart import CartItem, CartLine, CartView
from app.models.product import Product

logger = logging.getLogger(__name__)

def cart_total(lines: List[CartLine]) -> Decimal:
    return sum((line.product.price * line.quantity for line in lines), Decimal("0"))

class CartService:
    def __init__(self, session: Session):
        self.session = session

    def get_cart(self, session_id: str) -> CartView:
        """Get all cart items for a session with product details and the computed total"""
        rows = self.session.exec(
            select(CartItem, Product)
            .join(Product, CartItem.product_id == Product.id)
            .where(CartItem.session_id == session_id)
            .order_by(CartItem.created_at, CartItem.id)
        ).all()

        lines = [
            CartLine(
                id=item.id,
                session_id=item.session_id,
                product_id=item.product_id,
                quantity=item.quantity,
                created_at=item.created_at,
                product=product,
            )
            for item, product in rows
        ]
        return CartView(items=lines, total=cart_total(lines))

    def add_to_cart(self, session_id: str, product_id: uuid.UUID, quantity: int = 1) -> CartItem:
        """Insert the (session, product) row or increment its quantity in one statement"""
        if quantity < 1:
            raise HTTPException(status_code=400, detail="Quantity must be at least 1")

        now = utc_now()
        table = CartItem.__table__
        insert = postgresql_insert if self.session.get_bind().dialect.name == "postgresql" else sqlite_insert

        stmt = insert(table).values(
            id=uuid.uuid4(),
            session_id=session_id,
            product_id=product_id,
            quantity=quantity,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.session_id, table.c.product_id],
            set_={
                "quantity": table.c.quantity + stmt.excluded.quantity,
                "updated_at": now,
            },
        )
        self.session.exec(stmt)
        self.session.commit()

        item = self.session.exec(
            select(CartItem)
            .where(CartItem.session_id == session_id, CartItem.product_id == product_id)
            .execution_options(populate_existing=True)
        ).one()
        logger.info("Added product %s x%d to cart %s (now %d)", product_id, quantity, session_id, item.quantity)
        return item

    def update_cart_item(self, session_id: str, cart_item_id: uuid.UUID, quantity: int) -> CartItem:
        """Set the quantity of a cart item owned by the session"""
        if quantity < 1:
            raise HTTPException(status_code=400, detail="Quantity must be at least 1")

        item = self.session.get(CartItem, cart_item_id)
        if not item or item.session_id != session_id:
            raise HTTPException(status_code=404, detail="Cart item not found")

        item.quantity = quantity
        item.updated_at = utc_now()
        self.session.add(item)
        self.session.commit()
        self.session.refresh(item)
        return item

    def remove_from_cart(self, session_id: str, cart_item_id: uuid.UUID) -> None:
        """Remove item from cart; a missing row is not an error"""
        self.session.exec(
            delete(CartItem).where(CartItem.id == cart_item_id, CartItem.session_id == session_id)
        )
        self.session.commit()

    def clear_cart(self, session_id: str) -> None:
        """Clear all items from the session's cart"""
        self.session.exec(delete(CartItem).where(CartItem.session_id == session_id))
        self.session.commit()
        logger.info("Cleared cart %s", session_id)
