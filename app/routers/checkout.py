import logging
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from sqlmodel import Session
from app.core.cors import preflight_response
from app.core.errors import server_error
from app.db.session import get_session
from app.models.receipt import CustomerInfo, Receipt
from app.services.checkout import CheckoutService
from app.services.recommendation import RecommendationService, get_recommendation_service

logger = logging.getLogger(__name__)

router = APIRouter()

class CheckoutRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    session_id: str = Field(min_length=1)
    customer_info: CustomerInfo

class CheckoutResponse(BaseModel):
    success: bool = True
    receipt: Receipt

def get_checkout_service(
    session: Session = Depends(get_session),
    recommender: RecommendationService = Depends(get_recommendation_service),
) -> CheckoutService:
    return CheckoutService(session, recommender)

@router.options("")
def checkout_preflight():
    return preflight_response()

@router.post("", response_model=CheckoutResponse)
def checkout(request: CheckoutRequest, service: CheckoutService = Depends(get_checkout_service)):
    """Mock checkout: returns a receipt and leaves the cart for the caller to clear"""
    logger.info("Processing checkout for session %s", request.session_id)
    try:
        receipt = service.checkout(request.session_id, request.customer_info)
    except HTTPException:
        raise
    except Exception as e:
        raise server_error(service.session, e)
    return CheckoutResponse(receipt=receipt)
