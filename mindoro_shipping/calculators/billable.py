"""
Stage 3: billable weight.

chargeable = max(actual, volumetric), billed in whole kilograms, never below 1.
Anything above 50 kg is refused: the carrier only prices those by hand.
"""

import math

from ..errors import ManualQuoteRequired
from ..rates import MAX_BILLABLE_KG, MIN_BILLABLE_KG


def chargeable_weight(actual_kg: float, volumetric_kg: float) -> float:
    return max(actual_kg, volumetric_kg)


def billable_kg(chargeable_kg: float) -> int:
    """Round up to the next whole kg. Raises ManualQuoteRequired above the max."""
    if not math.isfinite(chargeable_kg):
        # overflowed past any float; no whole-kg figure to report
        raise ManualQuoteRequired(None, MAX_BILLABLE_KG)
    bill_kg = max(math.ceil(chargeable_kg), MIN_BILLABLE_KG)
    if bill_kg > MAX_BILLABLE_KG:
        raise ManualQuoteRequired(bill_kg, MAX_BILLABLE_KG)
    return bill_kg
