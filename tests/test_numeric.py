import math

import pytest

from stream_logreg.core import SIGMOID_CLAMP, DimensionMismatch, dot, sigmoid


def test_dot_matches_manual_sum() -> None:
    assert dot([1.0, 2.0, 3.0], [4.0, -5.0, 0.5]) == pytest.approx(4.0 - 10.0 + 1.5)
    assert isinstance(dot([1.0], [2.0]), float)


def test_dot_rejects_length_mismatch() -> None:
    with pytest.raises(DimensionMismatch) as excinfo:
        dot([1.0, 2.0], [1.0])
    assert excinfo.value.expected == 2
    assert excinfo.value.actual == 1


def test_sigmoid_known_values() -> None:
    assert sigmoid(0.0) == 0.5
    assert sigmoid(2.0) == pytest.approx(1.0 / (1.0 + math.exp(-2.0)))
    assert sigmoid(-3.0) == pytest.approx(1.0 - sigmoid(3.0))


@pytest.mark.parametrize("z", [1e3, -1e3, 1e308, -1e308, float("inf"), float("-inf")])
def test_sigmoid_extreme_inputs_stay_inside_open_interval(z: float) -> None:
    p = sigmoid(z)
    assert 0.0 < p < 1.0


def test_sigmoid_saturates_at_clamp() -> None:
    assert sigmoid(SIGMOID_CLAMP) == sigmoid(SIGMOID_CLAMP * 10)
    assert sigmoid(-SIGMOID_CLAMP) == sigmoid(-SIGMOID_CLAMP * 10)
    assert sigmoid(SIGMOID_CLAMP) < 1.0
    assert sigmoid(-SIGMOID_CLAMP) > 0.0
