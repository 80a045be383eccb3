import uuid
import logging
from decimal import Decimal, ROUND_HALF_UP
from datetime import datetime, timezone
from fastapi import HTTPException
from sqlmodel import Session
from app.models.receipt import CustomerInfo, Receipt, ReceiptLine
from app.services.cart import CartService
from app.services.recommendation import RecommendationService

logger = logging.getLogger(__name__)

FALLBACK_RECOMMENDATIONS = [
    "Check out our bestsellers!",
    "Subscribe for exclusive deals",
    "Follow us on social media",
]

CENTS = Decimal("0.01")

def format_money(amount: Decimal) -> str:
    return str(amount.quantize(CENTS, rounding=ROUND_HALF_UP))

class CheckoutService:
    def __init__(self, session: Session, recommender: RecommendationService):
        self.session = session
        self.cart = CartService(session)
        self.recommender = recommender

    def checkout(self, session_id: str, customer: CustomerInfo) -> Receipt:
        """Build a receipt for the session's cart.

        The cart is left untouched; clearing it afterwards is up to the caller.
        Recommendations are best-effort and replaced by a fixed list when the
        recommender returns nothing.
        """
        cart = self.cart.get_cart(session_id)
        if not cart.items:
            raise HTTPException(status_code=400, detail="Cart is empty")

        lines = [
            ReceiptLine(
                name=line.product.name,
                quantity=line.quantity,
                price=format_money(line.product.price),
                subtotal=format_money(line.product.price * line.quantity),
            )
            for line in cart.items
        ]

        recommendations = []
        try:
            recommendations = self.recommender.recommend([line.product.name for line in cart.items])
        except Exception as e:
            logger.warning("Recommendation service failed: %s", e)
            # Don't fail the checkout if recommendations fail

        receipt = Receipt(
            order_id=str(uuid.uuid4()),
            timestamp=datetime.now(timezone.utc),
            customer=customer,
            items=lines,
            total=format_money(cart.total),
            recommendations=recommendations or list(FALLBACK_RECOMMENDATIONS),
        )
        logger.info("Checkout successful: %s", receipt.order_id)
        return receipt
