"""
Stage 2: reduce a shipment or a cart to (actual_kg, volumetric_kg) totals.

Inputs must already be validated. Arithmetic is done in floats, like the
server; a value too large for a float becomes inf and is refused downstream.
"""

import math

from ..rates import VOLUMETRIC_DIVISOR


def as_float(value) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf


def volumetric_weight(length_cm=None, width_cm=None, height_cm=None) -> float:
    """L x W x H / 5000 in kg, or 0 when the parcel has no dimensions."""
    if length_cm is None or width_cm is None or height_cm is None:
        return 0.0
    return (as_float(length_cm) * as_float(width_cm) * as_float(height_cm)) / VOLUMETRIC_DIVISOR


def aggregate_shipment(actual_kg, length_cm=None, width_cm=None, height_cm=None) -> tuple:
    return as_float(actual_kg), volumetric_weight(length_cm, width_cm, height_cm)


def aggregate_items(items: list) -> tuple:
    """
    Sum weights across cart lines, each line multiplied by its quantity.

    Volumetric weight is computed per line from that line's own dimensions.
    Lines without dimensions contribute nothing to the volumetric total.
    """
    actual_total = 0.0
    volumetric_total = 0.0
    for item in items:
        qty = as_float(item["quantity"])
        actual_total += as_float(item["weight_kg"]) * qty
        volumetric_total += volumetric_weight(
            item["length_cm"], item["width_cm"], item["height_cm"],
        ) * qty
    return actual_total, volumetric_total
