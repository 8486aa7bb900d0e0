import logging

from fastapi import APIRouter, HTTPException

from ..calculators.registry import get_calculator, has_calculator, list_calculators
from ..rates import rate_card
from ..schemas import CartQuoteRequest, QuoteResponse, ShipmentRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shipping", tags=["shipping"])


def _calculator_or_404(method: str):
    if not has_calculator(method):
        logger.info("Quote requested for unknown shipping method %s", method)
        raise HTTPException(status_code=404, detail=f"Unknown shipping method: {method}")
    return get_calculator(method)


@router.get("/methods")
def get_methods():
    return {"methods": list_calculators()}


@router.get("/{method}/rates")
def get_rates(method: str):
    """Bag tiers, rate table and weight bounds: the public pricing constants."""
    _calculator_or_404(method)
    return rate_card()


@router.post("/{method}/quote", response_model=QuoteResponse)
def quote_shipment(method: str, request: ShipmentRequest):
    """Quote one parcel. ShippingCalcError is rendered by the app-level handler."""
    calculator = _calculator_or_404(method)
    quote = calculator.quote_shipment(
        request.actual_kg, request.length_cm, request.width_cm, request.height_cm,
    )
    return QuoteResponse(data=quote)


@router.post("/{method}/quote/cart", response_model=QuoteResponse)
def quote_cart(method: str, request: CartQuoteRequest):
    """Quote a cart shipped as a single parcel."""
    calculator = _calculator_or_404(method)
    quote = calculator.quote_items(request.items)
    return QuoteResponse(data=quote)
