"""
Calculator registry: maps shipping method codes to lane calculators.

Only the Oriental Mindoro J&T lane is priced client-side today.
"""

from .base import BaseShippingCalculator
from .jnt_mindoro import JntMindoroCalculator

CALCULATOR_REGISTRY: dict[str, type[BaseShippingCalculator]] = {
    JntMindoroCalculator.METHOD: JntMindoroCalculator,
}


def get_calculator(method: str) -> BaseShippingCalculator:
    """Returns an instance of the calculator for a shipping method, or raises ValueError."""
    key = str(method).upper()
    if key not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for shipping method: {method}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[key]()


def has_calculator(method: str) -> bool:
    """Check if a calculator exists for a shipping method."""
    return str(method).upper() in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered shipping methods."""
    return list(CALCULATOR_REGISTRY.keys())
