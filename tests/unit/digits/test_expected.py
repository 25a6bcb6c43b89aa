import math

import pytest

from benford_engine.digits.expected import expected_distribution
from benford_engine.digits.modes import FIRST_DIGIT, FIRST_DIGIT_SPEC, FIRST_TWO_DIGIT


@pytest.mark.parametrize("mode,size", [(FIRST_DIGIT, 9), (FIRST_TWO_DIGIT, 90)])
def test_expected_table_matches_benford(mode, size):
    table = expected_distribution(mode)
    assert len(table.digits) == size
    for digit, prob in zip(table.digits, table.probabilities):
        assert prob == pytest.approx(math.log10(1 + 1 / digit), abs=1e-5)
    assert sum(table.probabilities) == pytest.approx(1.0, abs=1e-9)


def test_first_digit_known_values():
    table = expected_distribution()
    assert table.probability(1) == pytest.approx(0.30103, abs=1e-5)
    assert table.probability(9) == pytest.approx(0.04576, abs=1e-5)
    assert table.digits == tuple(range(1, 10))


def test_table_is_memoized_and_immutable():
    table = expected_distribution(FIRST_DIGIT)
    assert expected_distribution(FIRST_DIGIT_SPEC) is table
    with pytest.raises(AttributeError):
        table.mode = "other"  # type: ignore[misc]
