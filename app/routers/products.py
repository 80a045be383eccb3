import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select, or_
from app.db.session import get_session
from app.models.product import Product

router = APIRouter()

@router.get("/", response_model=List[Product])
def read_products(
    category: Optional[str] = None,
    q: Optional[str] = None,
    session: Session = Depends(get_session)
):
    statement = select(Product)
    if category:
        statement = statement.where(Product.category == category)
    if q:
        statement = statement.where(
            or_(
                Product.name.ilike(f"%{q}%"),
                Product.description.ilike(f"%{q}%")
            )
        )
    return session.exec(statement.order_by(Product.created_at)).all()

@router.get("/{product_id}", response_model=Product)
def read_product(product_id: uuid.UUID, session: Session = Depends(get_session)):
    product = session.get(Product, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
