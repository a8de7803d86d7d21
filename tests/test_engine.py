"""
Estimation engine tests: end-to-end scenarios through the public entry point.

The displayed range always uses the confidence spread for the answered count,
not the pricing tier's provisional spread.
"""

import pytest

from backend.answers import AnswerSet
from backend.estimation.engine import EstimationEngine, round_half_up

engine = EstimationEngine()


def _estimate(fields):
    return engine.estimate(AnswerSet.from_fields(fields))


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
    assert round_half_up(29399.999999999996) == 29400


def test_no_answers():
    result = engine.estimate(AnswerSet())
    assert result["estimate"] is None
    assert result["tier"] is None
    assert result["answered_count"] == 0
    assert result["accuracy_percent"] == 0
    assert result["spread"] == 0.60
    comp = result["composition"]
    assert comp["tatami_count"] == 0.0
    assert comp["base_unit_price"] == 7000
    assert comp["coefficient_product"] == 1.0
    assert comp["add_on_per_unit"] == 0


def test_three_answers_coarse_range(coarse_fields):
    result = _estimate(coarse_fields)
    assert result["answered_count"] == 3
    assert result["accuracy_percent"] == 40
    assert result["spread"] == 0.30
    assert result["tier"] == "coarse"
    assert result["estimate"]["center"] == 42000
    assert result["estimate"]["low"] == 29400
    assert result["estimate"]["high"] == 54600
    assert result["composition"]["base_unit_price"] == 7000


def test_four_answers_narrows_display_not_pricing(coarse_fields):
    # Material answered but usage/priority not: coarse pricing, ±20% display
    result = _estimate(dict(coarse_fields, material="resin"))
    assert result["answered_count"] == 4
    assert result["tier"] == "coarse"
    assert result["accuracy_percent"] == 60
    assert result["estimate"]["center"] == 42000
    assert result["estimate"]["low"] == 33600
    assert result["estimate"]["high"] == 50400
    # Provisional range stays at the tier's ±30%
    assert result["estimate"]["provisional_low"] == pytest.approx(29400)


def test_five_answers(coarse_fields):
    result = _estimate(dict(coarse_fields, usage="kids", priority="health"))
    assert result["answered_count"] == 5
    assert result["accuracy_percent"] == 80
    assert result["tier"] == "coarse"
    assert result["estimate"]["low"] == 35700
    assert result["estimate"]["high"] == 48300
    # Shown in the composition even though the coarse tier doesn't charge them
    assert result["composition"]["add_on_per_unit"] == 4400
    assert result["composition"]["add_on_total"] == 26400.0


def test_complete_answers(complete_answers):
    result = engine.estimate(complete_answers)
    assert result["answered_count"] == 6
    assert result["accuracy_percent"] == 95
    assert result["spread"] == 0.10
    assert result["tier"] == "refined"
    assert result["estimate"]["center"] == pytest.approx(113340)
    assert result["estimate"]["low"] == 102006
    assert result["estimate"]["high"] == 124674

    comp = result["composition"]
    assert comp["base_unit_price"] == 10500
    assert comp["coefficient_product"] == 1.38
    assert comp["tatami_count"] == 6.0
    assert comp["unit"] == "mat"
    assert comp["add_on_per_unit"] == 4400
    assert len(comp["add_ons"]) == 5


def test_custom_size_scenario():
    result = _estimate({
        "room_type": "detached", "size": "custom", "custom_tatami": 5.5, "work": "replace",
    })
    assert result["composition"]["tatami_count"] == 5.5
    assert result["composition"]["coefficients"]["size"] == 1.00
    assert result["estimate"]["center"] == 38500


def test_malformed_custom_size_withholds_estimate():
    result = _estimate({
        "room_type": "detached", "size": "custom", "custom_tatami": "lots", "work": "replace",
    })
    assert result["estimate"] is None
    assert result["answered_count"] == 2
    assert result["accuracy_percent"] == 25
    assert result["spread"] == 0.40


def test_okidatami_priced_per_panel():
    result = _estimate({"room_type": "living", "size": "six", "work": "okidatami"})
    assert result["composition"]["unit"] == "panel"
    assert result["composition"]["base_unit_price"] == 6000
    # 6000 × 6 × 0.95 × 1.30
    assert result["estimate"]["center"] == pytest.approx(44460)


def test_explicit_answered_count_drives_confidence(complete_answers):
    result = engine.estimate(complete_answers, answered=2)
    assert result["accuracy_percent"] == 25
    assert result["spread"] == 0.40
    assert result["tier"] == "coarse"


def test_recompute_is_idempotent(complete_answers):
    assert engine.estimate(complete_answers) == engine.estimate(complete_answers)
    fresh = EstimationEngine()
    assert fresh.estimate(complete_answers) == engine.estimate(complete_answers)


def test_grade_raises_estimate(coarse_fields):
    centers = [
        _estimate(dict(coarse_fields, grade=grade))["estimate"]["center"]
        for grade in ("economy", "standard", "premium", "deluxe")
    ]
    assert centers == sorted(centers)
    assert len(set(centers)) == 4


def test_overflowing_custom_size_withholds_estimate():
    result = _estimate({
        "room_type": "detached", "size": "custom", "custom_tatami": "1e308", "work": "replace",
    })
    assert result["estimate"] is None
    assert result["tier"] is None
    assert result["composition"]["tatami_count"] == 0.0


def test_overflow_from_display_spread_withholds_estimate():
    # Centre itself is finite, but centre × (1 + 0.30) is not
    result = _estimate({
        "room_type": "detached", "size": "custom", "custom_tatami": "2.3e304", "work": "replace",
    })
    assert result["estimate"] is None


def test_overflowing_add_ons_without_estimate():
    # No room type yet, so nothing is priced; add-on total must not overflow either
    result = _estimate({"size": 1e308, "usage": "pets", "priority": "design"})
    assert result["estimate"] is None
    assert result["composition"]["tatami_count"] == 0.0
    assert result["composition"]["add_on_total"] == 0.0
    assert result["composition"]["add_on_per_unit"] == 7200


def test_large_finite_custom_size_still_priced():
    result = _estimate({
        "room_type": "detached", "size": "custom", "custom_tatami": 1e6, "work": "replace",
    })
    # ≥ 8 mats → size coefficient 0.95
    assert result["estimate"]["center"] == pytest.approx(7000 * 1e6 * 0.95)
