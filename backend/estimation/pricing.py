"""
Pricing calculator: composes unit price, quantity, coefficients and add-ons
into a centre value.

Two tiers:
    coarse : room type, size and work only; provisional spread ±30%
    refined: all six answers, plus add-ons; provisional spread ±10%

The provisional spread only identifies the tier. The range the user sees is
re-derived from the answered count by the confidence policy.
"""

import logging
from typing import Optional

from ..answers import AnswerSet, answered_count, tatami_count
from ..models import Tier
from ..tables import COARSE_SPREAD, REFINED_SPREAD
from .add_ons import AddOnAccumulator
from .base_price import resolve_base_price
from .coefficients import resolve_all

logger = logging.getLogger(__name__)


class PricingCalculator:
    """Centre value + provisional range for one AnswerSet."""

    # Answers up to this count are always priced coarse
    COARSE_MAX_ANSWERED = 3

    def __init__(self):
        self.add_on_accumulator = AddOnAccumulator()

    def can_price(self, answers: AnswerSet) -> bool:
        """Room type, size and work answered, and a positive mat count resolved."""
        return (
            tatami_count(answers) > 0
            and answers.room_type is not None
            and answers.size is not None
            and answers.work is not None
        )

    def select_tier(self, answers: AnswerSet, answered: int) -> Tier:
        if (
            answered <= self.COARSE_MAX_ANSWERED
            or answers.usage is None
            or answers.priority is None
            or answers.material is None
        ):
            return Tier.COARSE
        return Tier.REFINED

    def calculate(self, answers: AnswerSet, answered: Optional[int] = None) -> Optional[dict]:
        """
        Returns None while the estimate can't be priced yet, otherwise:
            {
                tier: Tier,
                center: float,
                provisional_spread: float,
                provisional_low: float,
                provisional_high: float,
            }
        """
        if not self.can_price(answers):
            return None
        if answered is None:
            answered = answered_count(answers)

        tatami = tatami_count(answers)
        coefs = resolve_all(answers)
        unit_price = resolve_base_price(answers.work, answers.material, answers.grade)

        base = unit_price * tatami * coefs["room_type"] * coefs["size"] * coefs["work"]

        tier = self.select_tier(answers, answered)
        if tier == Tier.COARSE:
            center = base
            spread = COARSE_SPREAD
        else:
            detailed = base * coefs["usage"] * coefs["priority"] * coefs["material"]
            # Add-ons go on after the multiplication chain
            add_on_total = self.add_on_accumulator.per_unit(answers.usage, answers.priority) * tatami
            center = detailed + add_on_total
            spread = REFINED_SPREAD

        logger.debug("Priced %s tier: center=%.2f (answered=%d)", tier.value, center, answered)

        return {
            "tier": tier,
            "center": center,
            "provisional_spread": spread,
            "provisional_low": center * (1 - spread),
            "provisional_high": center * (1 + spread),
        }
