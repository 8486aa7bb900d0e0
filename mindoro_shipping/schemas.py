import enum
from typing import Any, Optional

from pydantic import BaseModel


class FeeTier(str, enum.Enum):
    BAG = "BAG"
    RATE_TABLE = "RATE_TABLE"


class ErrorCode(str, enum.Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MANUAL_QUOTE_REQUIRED = "MANUAL_QUOTE_REQUIRED"


class BagTier(BaseModel):
    key: str
    max_kg: int
    fee: int

    class Config:
        frozen = True


class FeeResolution(BaseModel):
    fee: int
    tier: FeeTier
    bag_spec: Optional[str] = None

    class Config:
        frozen = True


class ShipmentQuote(BaseModel):
    method: str
    actual_kg: float
    volumetric_kg: float
    chargeable_kg: float
    bill_kg: int
    fee: int
    tier: FeeTier
    bag_spec: Optional[str] = None
    display: str

    class Config:
        frozen = True


# --- Inputs ---
# Numeric fields are untyped: the calculator validates them and reports the
# offending field and raw value ("5" stays "5").

class ShipmentRequest(BaseModel):
    actual_kg: Any = None
    length_cm: Any = None
    width_cm: Any = None
    height_cm: Any = None


class CartItem(BaseModel):
    weight_kg: Any = None
    length_cm: Any = None
    width_cm: Any = None
    height_cm: Any = None
    quantity: Any = None

    class Config:
        frozen = True


class CartQuoteRequest(BaseModel):
    items: Any = None


# --- Response envelopes (shape consumed by the checkout store) ---

class QuoteResponse(BaseModel):
    success: bool = True
    data: ShipmentQuote


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    issue: str
    details: dict = {}
