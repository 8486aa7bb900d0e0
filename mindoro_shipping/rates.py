# J&T Express, Oriental Mindoro lane. Source: carrier's published rate card.
# Mirrored 1:1 by the server-side calculator; change both or neither.

from types import MappingProxyType

from .schemas import BagTier

SHIPPING_METHOD = "JNT_MINDORO"

# Carrier's dimensional weight formula: L x W x H (cm) / 5000 = kg
VOLUMETRIC_DIVISOR = 5000

# Billable weight bounds (kg). Above the max the carrier negotiates manually.
MIN_BILLABLE_KG = 1
MAX_BILLABLE_KG = 50

# Flat-rate pouches, ascending by max_kg. Order matters: first fit wins.
BAG_TIERS = (
    BagTier(key="SMALL_LE_3KG", max_kg=3, fee=70),
    BagTier(key="MEDIUM_LE_5KG", max_kg=5, fee=120),
    BagTier(key="BIG_LE_8KG", max_kg=8, fee=160),
)

BAG_MAX_KG = 8

# Per-kg fee (PHP). Entries 1-8 are shadowed by the bag tiers.
JNT_ORIENTAL_MINDORO_RATE_UP_TO_50KG = MappingProxyType({
    1: 155, 2: 180, 3: 180, 4: 200, 5: 220,
    6: 275, 7: 335, 8: 395, 9: 455, 10: 515,
    11: 575, 12: 635, 13: 695, 14: 755, 15: 815,
    16: 875, 17: 935, 18: 995, 19: 1055, 20: 1115,
    21: 1175, 22: 1235, 23: 1295, 24: 1355, 25: 1415,
    26: 1475, 27: 1535, 28: 1595, 29: 1655, 30: 1715,
    31: 1775, 32: 1835, 33: 1895, 34: 1955, 35: 2015,
    36: 2075, 37: 2135, 38: 2195, 39: 2255, 40: 2315,
    41: 2375, 42: 2435, 43: 2495, 44: 2555, 45: 2615,
    46: 2675, 47: 2735, 48: 2795, 49: 2855, 50: 2915,
})


def rate_card() -> dict:
    """Public constants as one JSON-friendly dict (for the rates endpoint)."""
    return {
        "method": SHIPPING_METHOD,
        "bag_tiers": [tier.model_dump() for tier in BAG_TIERS],
        "bag_max_kg": BAG_MAX_KG,
        "rate_table": {str(kg): fee for kg, fee in JNT_ORIENTAL_MINDORO_RATE_UP_TO_50KG.items()},
        "volumetric_divisor": VOLUMETRIC_DIVISOR,
        "min_billable_kg": MIN_BILLABLE_KG,
        "max_billable_kg": MAX_BILLABLE_KG,
    }
