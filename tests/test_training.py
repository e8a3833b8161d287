import itertools
import sys

import pytest

from stream_logreg.core import (
    DimensionMismatch,
    InvalidLabel,
    InvalidLearningRate,
    LabeledSample,
    SampleStream,
)
from stream_logreg.models import ModelState, predict
from stream_logreg.training import step, train_on_stream


def test_step_initializes_from_zeros() -> None:
    state = step(None, ([2.0, -1.0], 1), 0.5)
    # p = 0.5, error = 0.5, delta = 0.5 * 0.5 * 0.25
    delta = 0.0625
    assert state.intercept == pytest.approx(delta)
    assert state.weights == pytest.approx((2.0 * delta, -1.0 * delta))


def test_step_follows_update_rule() -> None:
    state = ModelState(intercept=0.2, weights=[0.5, -0.3])
    sample = LabeledSample(features=[1.5, 2.0], label=0)
    new_state = step(state, sample, 0.1)

    p = predict(state, sample.features)
    delta = 0.1 * (0 - p) * p * (1 - p)
    assert new_state.intercept == pytest.approx(0.2 + delta)
    assert new_state.weights == pytest.approx((0.5 + delta * 1.5, -0.3 + delta * 2.0))
    # Previous state untouched.
    assert state == ModelState(intercept=0.2, weights=[0.5, -0.3])


def test_step_is_deterministic(toy_samples) -> None:
    state = ModelState(intercept=0.1, weights=[0.2, 0.3])
    assert step(state, toy_samples[4], 0.05) == step(state, toy_samples[4], 0.05)


def test_step_rejects_dimension_mismatch() -> None:
    state = ModelState.zeros(2)
    with pytest.raises(DimensionMismatch):
        step(state, ([1.0, 2.0, 3.0], 1), 0.1)
    with pytest.raises(DimensionMismatch):
        step(state, ([1.0], 1), 0.1)


def test_step_rejects_invalid_label() -> None:
    with pytest.raises(InvalidLabel):
        step(None, ([1.0], 2), 0.1)


@pytest.mark.parametrize("lr", [0.0, -0.1, float("nan"), float("inf"), "fast", None])
def test_step_rejects_invalid_learning_rate(lr) -> None:
    with pytest.raises(InvalidLearningRate):
        step(None, ([1.0], 1), lr)


def test_vanishing_learning_rate_leaves_state_unchanged(toy_samples) -> None:
    state = ModelState(intercept=0.3, weights=[-0.2, 0.4])
    tiny = 5e-324
    current = state
    for sample in toy_samples * 10:
        current = step(current, sample, tiny)
    assert current.intercept == pytest.approx(state.intercept, abs=1e-300)
    assert current.weights == pytest.approx(state.weights, abs=1e-300)
    with pytest.raises(InvalidLearningRate):
        step(state, toy_samples[0], 0.0)


def test_train_on_stream_emits_one_state_per_sample(toy_samples) -> None:
    states = list(train_on_stream(toy_samples, 0.1))
    assert len(states) == len(toy_samples)
    expected = None
    for sample, state in zip(toy_samples, states):
        expected = step(expected, sample, 0.1)
        assert state == expected


def test_train_on_stream_is_deterministic(toy_samples) -> None:
    first = list(train_on_stream(SampleStream(toy_samples, passes=3), 0.2))
    second = list(train_on_stream(SampleStream(toy_samples, passes=3), 0.2))
    assert first == second


def test_train_on_stream_locality(toy_samples) -> None:
    k = 4
    full = list(train_on_stream(toy_samples, 0.1))
    prefix = list(train_on_stream(toy_samples[:k], 0.1))
    altered_tail = toy_samples[:k] + [([0.0, 0.0], 1)] * 3
    altered = list(train_on_stream(altered_tail, 0.1))
    assert full[:k] == prefix == altered[:k]


def test_train_on_stream_starts_from_initial_state(toy_samples) -> None:
    initial = ModelState(intercept=1.0, weights=[-1.0, 1.0])
    states = list(train_on_stream(toy_samples[:1], 0.1, initial_state=initial))
    assert states == [step(initial, toy_samples[0], 0.1)]


def test_train_on_stream_pulls_lazily(toy_samples) -> None:
    pulled = []

    def source():
        for sample in toy_samples:
            pulled.append(sample)
            yield sample

    states = train_on_stream(source(), 0.1)
    assert pulled == []
    first_two = list(itertools.islice(states, 2))
    assert len(first_two) == 2
    assert len(pulled) == 2


def test_train_on_stream_validates_learning_rate_eagerly(toy_samples) -> None:
    with pytest.raises(InvalidLearningRate):
        train_on_stream(toy_samples, 0.0)


def test_train_on_stream_fails_at_mismatched_sample(toy_samples) -> None:
    samples = toy_samples[:2] + [([1.0, 2.0, 3.0], 0)] + toy_samples[2:]
    it = train_on_stream(samples, 0.1)
    emitted = [next(it), next(it)]
    with pytest.raises(DimensionMismatch):
        next(it)
    # States emitted before the failure remain complete and usable.
    assert 0.0 < predict(emitted[-1], [1.0, 1.0]) < 1.0


def test_independent_lineages_do_not_interact(toy_samples) -> None:
    a = train_on_stream(toy_samples, 0.1)
    b = train_on_stream(list(reversed(toy_samples)), 0.1)
    interleaved_a = []
    for state_a, _ in zip(a, b):
        interleaved_a.append(state_a)
    assert interleaved_a == list(train_on_stream(toy_samples, 0.1))


def test_convergence_learning_rate_point_three(toy_samples) -> None:
    *_, model = train_on_stream(SampleStream(toy_samples, passes=100), 0.3)
    assert model.intercept == pytest.approx(-0.86, abs=0.05)
    assert model.weights == pytest.approx((1.52, -2.22), abs=0.05)
    for features, label in toy_samples:
        assert (predict(model, features) > 0.5) == bool(label)


def test_convergence_scenario_learning_rate_point_one(toy_samples) -> None:
    *_, model = train_on_stream(SampleStream(toy_samples, passes=100), 0.1)
    assert model.intercept == pytest.approx(-0.6396, abs=1e-3)
    assert model.weights == pytest.approx((1.1752, -1.7059), abs=1e-3)
    assert predict(model, [7.673756466, 3.508563011]) > 0.5
    assert predict(model, [1.38807019, 1.850220317]) < 0.5


def test_smallest_normal_learning_rate_is_accepted(toy_samples) -> None:
    state = step(None, toy_samples[0], sys.float_info.min)
    assert state.intercept == pytest.approx(0.0, abs=1e-300)
