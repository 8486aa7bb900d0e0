"""
Abstract base class for all lane calculators.

Input: a parcel (weight + optional L/W/H) or a list of cart items.
Output: ShipmentQuote, or a ShippingCalcError.
"""

from abc import ABC, abstractmethod

from ..schemas import ShipmentQuote


class BaseShippingCalculator(ABC):
    """All lane calculators inherit from this."""

    # Shipping method code the calculator is registered under
    METHOD: str = None

    @abstractmethod
    def quote_shipment(self, actual_kg, length_cm=None, width_cm=None, height_cm=None) -> ShipmentQuote:
        pass

    @abstractmethod
    def quote_items(self, items) -> ShipmentQuote:
        pass
