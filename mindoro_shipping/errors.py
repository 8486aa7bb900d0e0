"""
Shipping calculator errors.

Two outcomes a caller must branch on, plus one internal failure:
- ShippingValidationError: malformed input, carries the offending field/value.
- ManualQuoteRequired: well-formed but too heavy to price automatically.
- RateCoverageError: the fee ladder has a hole. A bug, not a user error.
"""

from typing import Optional

from .schemas import ErrorCode


class ShippingCalcError(Exception):
    """Base for errors the checkout is expected to render."""

    code: ErrorCode = None

    def __init__(self, message: str, code: ErrorCode = None, details: dict = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = ErrorCode(code)
        self.details = dict(details or {})

    def to_dict(self) -> dict:
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self):
        return f"{type(self).__name__}({self.code.value}: {self.message!r}, {self.details!r})"


class ShippingValidationError(ShippingCalcError):
    code = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, details=details)


class ManualQuoteRequired(ShippingCalcError):
    code = ErrorCode.MANUAL_QUOTE_REQUIRED

    def __init__(self, bill_kg: Optional[int], max_kg: int):
        super().__init__(
            f"Shipment exceeds {max_kg}kg. Manual quote required.",
            details={"bill_kg": bill_kg, "max_kg": max_kg},
        )
        self.bill_kg = bill_kg
        self.max_kg = max_kg


class RateCoverageError(RuntimeError):
    """No fee stage covers a bill_kg that already passed the bound check."""
