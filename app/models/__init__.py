# Import all models to register them with SQLModel
from app.models.product import Product
from app.models.cart import CartItem, CartLine, CartView
from app.models.receipt import CustomerInfo, Receipt, ReceiptLine

__all__ = [
    "Product",
    "CartItem",
    "CartLine",
    "CartView",
    "CustomerInfo",
    "Receipt",
    "ReceiptLine",
]
