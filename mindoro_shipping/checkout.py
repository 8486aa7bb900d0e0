"""
Checkout-side helpers for consuming shipping quotes.

The quote is a preview. Orders for the J&T lane go out with a zero shipping
fee and the backend fills in the real one.
"""

from .schemas import ShipmentQuote

ISSUE_MESSAGES = {
    "INVALID_ADDRESS": "Address not supported for J&T Express delivery.",
    "MISSING_SHIPPING_PROFILE": "Some products are missing shipping weight/dimensions. Please contact the seller.",
    "RATE_NOT_FOUND": "No shipping rate configured for this weight yet. Please try a different delivery option.",
    "UNSUPPORTED_WEIGHT": "Order is too heavy for J&T bag limit (max 8kg). Please split your order or choose another delivery method.",
    "VALIDATION_ERROR": "Invalid shipping details. Please check your address and try again.",
    "MANUAL_QUOTE_REQUIRED": "Order is over 50kg. Please contact us for a shipping quote.",
    "UNKNOWN": "Unable to calculate shipping. Please try again or choose a different delivery option.",
}


def error_message(issue) -> str:
    """User-facing text for an issue code. Unknown codes get the generic message."""
    if not issue:
        return ""
    issue = getattr(issue, "value", issue)
    return ISSUE_MESSAGES.get(issue, ISSUE_MESSAGES["UNKNOWN"])


def checkout_shipping_fields(quote: ShipmentQuote) -> dict:
    """
    Shipping fields for an order submission.

    shipping_fee is always 0: the server recomputes it on submit.
    estimated_shipping_fee is for display only.
    """
    return {
        "shipping_option": quote.method,
        "shipping_fee": 0,
        "estimated_shipping_fee": quote.fee,
        "estimated_shipping_display": quote.display,
    }
