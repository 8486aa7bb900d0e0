"""
Stage 4: billable kg to fee.

Two ordered stages:
1. bill_kg <= 8: first bag tier whose max_kg covers it (flat fee).
2. otherwise: per-kg rate table lookup.

The rate table also has rows for 1-8 kg. Bags always win there; keep it that way
until the carrier confirms otherwise.
"""

from typing import Optional

from ..errors import RateCoverageError
from ..rates import BAG_MAX_KG, BAG_TIERS, JNT_ORIENTAL_MINDORO_RATE_UP_TO_50KG
from ..schemas import BagTier, FeeResolution, FeeTier


def select_bag_tier(bill_kg: int) -> Optional[BagTier]:
    """First bag whose max_kg >= bill_kg, or None past the biggest bag."""
    for bag in BAG_TIERS:
        if bill_kg <= bag.max_kg:
            return bag
    return None


def resolve_fee(bill_kg: int) -> Optional[FeeResolution]:
    if bill_kg <= BAG_MAX_KG:
        bag = select_bag_tier(bill_kg)
        if bag is not None:
            return FeeResolution(fee=bag.fee, tier=FeeTier.BAG, bag_spec=bag.key)

    table_fee = JNT_ORIENTAL_MINDORO_RATE_UP_TO_50KG.get(bill_kg)
    if table_fee is not None:
        return FeeResolution(fee=table_fee, tier=FeeTier.RATE_TABLE, bag_spec=None)

    return None


def require_fee(bill_kg: int) -> FeeResolution:
    """resolve_fee for a bill_kg already inside the billable bounds."""
    resolved = resolve_fee(bill_kg)
    if resolved is None:
        raise RateCoverageError(f"No bag tier or rate table entry for {bill_kg} kg")
    return resolved
