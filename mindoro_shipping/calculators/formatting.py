"""
Stage 5: result record and display string.

Rounding here is cosmetic. Pricing already happened on the unrounded weight.
"""

from decimal import ROUND_HALF_UP, Decimal

from ..schemas import FeeResolution, ShipmentQuote

_FOUR_PLACES = Decimal("0.0001")


def round4(value: float) -> float:
    """
    Round to 4 decimals, half away from zero on the exact binary value.

    Matches the server's toFixed(4): round() would send 0.03125 to 0.0312,
    the server sends it to 0.0313.
    """
    return float(Decimal(value).quantize(_FOUR_PLACES, rounding=ROUND_HALF_UP))


def format_fee(fee: int, bill_kg: int) -> str:
    """'₱2,915 (50 kg)'. Comma grouping regardless of process locale."""
    return f"₱{fee:,} ({bill_kg} kg)"


def build_quote(
    method: str,
    actual_kg: float,
    volumetric_kg: float,
    chargeable_kg: float,
    bill_kg: int,
    resolved: FeeResolution,
) -> ShipmentQuote:
    return ShipmentQuote(
        method=method,
        actual_kg=round4(actual_kg),
        volumetric_kg=round4(volumetric_kg),
        chargeable_kg=round4(chargeable_kg),
        bill_kg=bill_kg,
        fee=resolved.fee,
        tier=resolved.tier,
        bag_spec=resolved.bag_spec,
        display=format_fee(resolved.fee, bill_kg),
    )
