"""
J&T Express, Oriental Mindoro lane.

Pricing tiers (per shipment, by billable weight):
    <= 3 kg  -> SMALL bag  -> PHP 70
    <= 5 kg  -> MEDIUM bag -> PHP 120
    <= 8 kg  -> BIG bag    -> PHP 160
    9-50 kg  -> rate table (per-kg lookup)
    > 50 kg  -> ManualQuoteRequired

The checkout shows this as an estimate. The backend recomputes and settles.
"""

import logging

from ..errors import ManualQuoteRequired
from ..rates import SHIPPING_METHOD
from ..schemas import ShipmentQuote
from .aggregation import aggregate_items, aggregate_shipment
from .base import BaseShippingCalculator
from .billable import billable_kg, chargeable_weight
from .fee_ladder import require_fee
from .formatting import build_quote
from .validation import validate_items, validate_shipment

logger = logging.getLogger(__name__)


class JntMindoroCalculator(BaseShippingCalculator):
    """Stateless. One instance can serve any number of threads."""

    METHOD = SHIPPING_METHOD

    def quote_shipment(self, actual_kg, length_cm=None, width_cm=None, height_cm=None) -> ShipmentQuote:
        """Quote a single parcel from its weight and optional L/W/H."""
        validate_shipment(actual_kg, length_cm, width_cm, height_cm)
        actual_total, volumetric_total = aggregate_shipment(actual_kg, length_cm, width_cm, height_cm)
        return self._price(actual_total, volumetric_total)

    def quote_items(self, items) -> ShipmentQuote:
        """Quote a cart shipped as one parcel. Each line is weight x quantity."""
        validated = validate_items(items)
        actual_total, volumetric_total = aggregate_items(validated)
        return self._price(actual_total, volumetric_total)

    def _price(self, actual_kg: float, volumetric_kg: float) -> ShipmentQuote:
        chargeable_kg = chargeable_weight(actual_kg, volumetric_kg)
        try:
            bill_kg = billable_kg(chargeable_kg)
        except ManualQuoteRequired as e:
            logger.info("%s manual quote required: %s kg > %s kg", self.METHOD, e.bill_kg, e.max_kg)
            raise

        resolved = require_fee(bill_kg)
        logger.debug(
            "%s quote: chargeable=%s bill_kg=%d tier=%s fee=%d",
            self.METHOD, chargeable_kg, bill_kg, resolved.tier.value, resolved.fee,
        )
        return build_quote(self.METHOD, actual_kg, volumetric_kg, chargeable_kg, bill_kg, resolved)


_calculator = JntMindoroCalculator()


def quote_single_shipment(actual_kg, length_cm=None, width_cm=None, height_cm=None) -> ShipmentQuote:
    return _calculator.quote_shipment(actual_kg, length_cm, width_cm, height_cm)


def quote_cart(items) -> ShipmentQuote:
    return _calculator.quote_items(items)
