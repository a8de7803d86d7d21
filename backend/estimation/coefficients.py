"""Coefficient resolver: one multiplier per answer dimension. Unset → 1.00."""

import math
from typing import Optional

from ..answers import AnswerSet
from ..models import PRIMARY_DIMENSIONS, SizePreset
from ..tables import (
    MATERIAL_COEF, NEUTRAL_COEF, PRIORITY_COEF, ROOM_TYPE_COEF, SIZE_PRESETS,
    USAGE_COEF, WORK_COEF,
)


def room_type_coef(room_type) -> float:
    return ROOM_TYPE_COEF.get(room_type, NEUTRAL_COEF)


def work_coef(work) -> float:
    return WORK_COEF.get(work, NEUTRAL_COEF)


def usage_coef(usage) -> float:
    return USAGE_COEF.get(usage, NEUTRAL_COEF)


def priority_coef(priority) -> float:
    return PRIORITY_COEF.get(priority, NEUTRAL_COEF)


def material_coef(material) -> float:
    return MATERIAL_COEF.get(material, NEUTRAL_COEF)


def size_coef_from_tatami(tatami: Optional[float]) -> float:
    """
    Step function over a custom mat count:
        < 4.5 → 1.20, 4.5–6 → 1.00, 6–8 → 0.98, ≥ 8 → 0.95.
    Missing, zero, negative or NaN counts are neutral.
    """
    if tatami is None or math.isnan(tatami) or tatami <= 0:
        return NEUTRAL_COEF
    if tatami < 4.5:
        return 1.20
    if tatami <= 6:
        return 1.00
    if tatami < 8:
        return 0.98
    return 0.95


def size_coef(size, custom_tatami: Optional[float] = None) -> float:
    """Preset sizes use their fixed multiplier; custom sizes use the step function."""
    if size is None:
        return NEUTRAL_COEF
    if size == SizePreset.CUSTOM:
        return size_coef_from_tatami(custom_tatami)
    return SIZE_PRESETS[size]["coef"]


def resolve_all(answers: AnswerSet) -> dict:
    """Every dimension's multiplier, keyed by dimension id."""
    return {
        "room_type": room_type_coef(answers.room_type),
        "size": size_coef(answers.size, answers.custom_tatami),
        "work": work_coef(answers.work),
        "usage": usage_coef(answers.usage),
        "priority": priority_coef(answers.priority),
        "material": material_coef(answers.material),
    }


def coefficient_product(coefs: dict) -> float:
    """Product of all six multipliers (the "combined coefficient" shown to users)."""
    product = 1.0
    for dimension in PRIMARY_DIMENSIONS:
        product *= coefs[dimension]
    return product
