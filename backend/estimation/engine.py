"""
Estimation engine: the single entry point the wizard calls on every answer change.

Control flow:
    answers → coefficients / base price / add-ons → pricing tier + centre
            → confidence policy re-derives the displayed range from the
              answered count (overriding the tier's provisional spread)

Output contract:
    {
        answered_count: int,
        accuracy_percent: int,
        spread: float,
        tier: "coarse" | "refined" | None,
        estimate: {center, low, high, provisional_low, provisional_high} | None,
        composition: {
            tatami_count, unit, base_unit_price, coefficients,
            coefficient_product, add_ons, add_on_per_unit, add_on_total,
        },
    }
"""

import logging
import math
from typing import Optional

from ..answers import AnswerSet, answered_count, tatami_count
from .add_ons import AddOnAccumulator
from .base_price import resolve_base_price, unit_label
from .coefficients import coefficient_product, resolve_all
from .confidence import confidence_for
from .pricing import PricingCalculator

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Nearest whole yen, halves rounded up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


class EstimationEngine:
    """Stateless: one instance can serve every request."""

    def __init__(self):
        self.pricing = PricingCalculator()
        self.add_on_accumulator = AddOnAccumulator()

    def estimate(self, answers: AnswerSet, answered: Optional[int] = None) -> dict:
        if answered is None:
            answered = answered_count(answers)

        accuracy, spread = confidence_for(answered)
        priced = self.pricing.calculate(answers, answered)

        # A mat count so large the price overflows is treated as unresolved
        overflowed = priced is not None and not (
            math.isfinite(priced["center"] * (1 + spread))
            and math.isfinite(priced["provisional_high"])
        )
        if overflowed:
            logger.warning("Mat count %r overflows the price; withholding estimate", tatami_count(answers))
            priced = None

        composition = self.build_composition(answers, quantity_resolved=not overflowed)

        if priced is None:
            logger.debug("No estimate yet (answered=%d)", answered)
            return {
                "answered_count": answered,
                "accuracy_percent": accuracy,
                "spread": spread,
                "tier": None,
                "estimate": None,
                "composition": composition,
            }

        center = priced["center"]
        return {
            "answered_count": answered,
            "accuracy_percent": accuracy,
            "spread": spread,
            "tier": priced["tier"].value,
            "estimate": {
                "center": round(center, 2),
                "low": round_half_up(center * (1 - spread)),
                "high": round_half_up(center * (1 + spread)),
                "provisional_low": round(priced["provisional_low"], 2),
                "provisional_high": round(priced["provisional_high"], 2),
            },
            "composition": composition,
        }

    def build_composition(self, answers: AnswerSet, quantity_resolved: bool = True) -> dict:
        """
        "Current price composition": shown even before an estimate exists.

        Add-ons are listed whenever usage/priority trigger them, even though
        only the refined tier actually adds them to the centre.
        """
        tatami = tatami_count(answers) if quantity_resolved else 0.0
        add_on_section = self.add_on_accumulator.build(answers.usage, answers.priority, tatami)
        if not math.isfinite(add_on_section["add_on_total"]):
            tatami = 0.0
            add_on_section = self.add_on_accumulator.build(answers.usage, answers.priority, tatami)

        coefs = resolve_all(answers)
        return {
            "tatami_count": tatami,
            "unit": unit_label(answers.work),
            "base_unit_price": resolve_base_price(answers.work, answers.material, answers.grade),
            "coefficients": coefs,
            "coefficient_product": round(coefficient_product(coefs), 2),
            **add_on_section,
        }
