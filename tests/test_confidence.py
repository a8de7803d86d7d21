"""
Confidence policy tests: answered count → accuracy % and display spread.
"""

import pytest

from backend.estimation.confidence import confidence_for


@pytest.mark.parametrize("answered,accuracy,spread", [
    (0, 0, 0.60),
    (1, 10, 0.50),
    (2, 25, 0.40),
    (3, 40, 0.30),
    (4, 60, 0.20),
    (5, 80, 0.15),
    (6, 95, 0.10),
])
def test_confidence_table(answered, accuracy, spread):
    assert confidence_for(answered) == (accuracy, spread)


def test_out_of_range_counts_clamp():
    assert confidence_for(-1) == (0, 0.60)
    assert confidence_for(9) == (95, 0.10)
