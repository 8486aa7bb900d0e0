"""
Stage 1: input validation.

Runs before any arithmetic. Errors name the offending field and value so the
checkout can highlight the exact input.
"""

import math
import numbers
from collections.abc import Mapping

from pydantic import BaseModel

from ..errors import ShippingValidationError

DIMENSION_FIELDS = ("length_cm", "width_cm", "height_cm")


def is_positive_number(value) -> bool:
    """Finite real number > 0. Booleans and numeric strings don't count."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    if isinstance(value, numbers.Integral):
        return value > 0
    return math.isfinite(value) and value > 0


def validate_weight(value, field: str = "actual_kg"):
    if not is_positive_number(value):
        raise ShippingValidationError(
            f"{field} must be a positive number.",
            {"field": field, "value": value},
        )


def validate_dimensions(length_cm=None, width_cm=None, height_cm=None, prefix: str = ""):
    """All three dimensions or none. Each supplied one must be positive."""
    dims = dict(zip(DIMENSION_FIELDS, (length_cm, width_cm, height_cm)))
    missing = [name for name, value in dims.items() if value is None]

    if 0 < len(missing) < len(DIMENSION_FIELDS):
        raise ShippingValidationError(
            "If any dimension is provided, all three are required.",
            {
                "field": prefix + missing[0],
                "value": None,
                "fields": [prefix + name for name in DIMENSION_FIELDS],
            },
        )

    for name, value in dims.items():
        if value is not None and not is_positive_number(value):
            raise ShippingValidationError(
                f"{prefix + name} must be a positive number.",
                {"field": prefix + name, "value": value},
            )


def validate_quantity(value, field: str = "quantity") -> int:
    """Missing quantity means one unit. Otherwise a positive integer."""
    if value is None:
        return 1
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise ShippingValidationError(
            f"{field} must be a positive integer.",
            {"field": field, "value": value},
        )
    return int(value)


def validate_shipment(actual_kg, length_cm=None, width_cm=None, height_cm=None):
    validate_weight(actual_kg, "actual_kg")
    validate_dimensions(length_cm, width_cm, height_cm)


def validate_items(items) -> list:
    """
    Validate every cart line and return them as plain dicts with quantity filled in.

    Accepts CartItem models or mappings with the same keys.
    One bad line fails the whole cart: there are no partial quotes.
    """
    if not isinstance(items, (list, tuple)) or len(items) == 0:
        raise ShippingValidationError(
            "items must be a non-empty list.",
            {"field": "items", "value": items},
        )

    validated = []
    for index, item in enumerate(items):
        prefix = f"items[{index}]."
        if isinstance(item, BaseModel):
            item = item.model_dump()
        elif not isinstance(item, Mapping):
            raise ShippingValidationError(
                f"items[{index}] must be an object.",
                {"field": f"items[{index}]", "value": item},
            )

        weight_kg = item.get("weight_kg")
        length_cm = item.get("length_cm")
        width_cm = item.get("width_cm")
        height_cm = item.get("height_cm")

        validate_weight(weight_kg, prefix + "weight_kg")
        validate_dimensions(length_cm, width_cm, height_cm, prefix=prefix)
        quantity = validate_quantity(item.get("quantity"), prefix + "quantity")

        validated.append({
            "weight_kg": weight_kg,
            "length_cm": length_cm,
            "width_cm": width_cm,
            "height_cm": height_cm,
            "quantity": quantity,
        })
    return validated
