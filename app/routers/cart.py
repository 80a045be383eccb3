import uuid
import logging
from typing import Any, Optional
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from sqlmodel import Session
from app.core.cors import preflight_response
from app.core.errors import server_error
from app.db.session import get_session
from app.services.cart import CartService

logger = logging.getLogger(__name__)

router = APIRouter()

class CartOperation(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    action: str
    session_id: str = Field(min_length=1)
    product_id: Optional[uuid.UUID] = None
    quantity: Optional[int] = None
    cart_item_id: Optional[uuid.UUID] = None

def get_cart_service(session: Session = Depends(get_session)) -> CartService:
    return CartService(session)

def _require(value, field: str):
    if value is None:
        raise HTTPException(status_code=400, detail=f"{field} is required")
    return value

def run_cart_operation(op: CartOperation, service: CartService) -> Any:
    if op.action == "add":
        product_id = _require(op.product_id, "productId")
        return service.add_to_cart(op.session_id, product_id, op.quantity or 1)
    if op.action == "update":
        cart_item_id = _require(op.cart_item_id, "cartItemId")
        quantity = _require(op.quantity, "quantity")
        return service.update_cart_item(op.session_id, cart_item_id, quantity)
    if op.action == "remove":
        service.remove_from_cart(op.session_id, _require(op.cart_item_id, "cartItemId"))
        return None
    if op.action == "get":
        return service.get_cart(op.session_id)
    if op.action == "clear":
        service.clear_cart(op.session_id)
        return None
    raise HTTPException(status_code=400, detail="Invalid action")

@router.options("")
def cart_preflight():
    return preflight_response()

@router.post("")
def cart_operation(op: CartOperation, service: CartService = Depends(get_cart_service)):
    """Dispatch one cart action for the given session"""
    logger.info("Cart operation: action=%s session=%s", op.action, op.session_id)
    try:
        data = run_cart_operation(op, service)
    except HTTPException:
        raise
    except Exception as e:
        raise server_error(service.session, e)
    return {"success": True, "data": data}
