"""Confidence policy: answered count alone decides accuracy % and display spread."""

from ..tables import CONFIDENCE_TABLE


def confidence_for(answered: int) -> tuple[int, float]:
    """
    (accuracy_percent, spread) for 0..6 answered questions.
    Counts outside that range clamp to the nearest end.
    """
    answered = min(max(int(answered), 0), 6)
    return CONFIDENCE_TABLE[answered]

