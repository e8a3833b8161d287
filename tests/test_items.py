import pytest

from stream_logreg.core import InvalidLabel, LabeledSample, as_feature_vector


def test_feature_vector_is_float_tuple() -> None:
    vector = as_feature_vector([1, 2.5, -3])
    assert vector == (1.0, 2.5, -3.0)
    assert isinstance(vector, tuple)


@pytest.mark.parametrize("values", [[], [1.0, float("nan")], [float("inf")]])
def test_feature_vector_rejects_empty_and_non_finite(values) -> None:
    with pytest.raises(ValueError):
        as_feature_vector(values)


def test_labeled_sample_normalizes_fields() -> None:
    sample = LabeledSample(features=[1, 2], label=1.0)
    assert sample.features == (1.0, 2.0)
    assert sample.label == 1
    assert isinstance(sample.label, int)
    assert sample.dim == 2
    assert sample.to_dict() == {"features": [1.0, 2.0], "label": 1}


@pytest.mark.parametrize("label", [2, -1, 0.5, "1", None])
def test_labeled_sample_rejects_bad_label(label) -> None:
    with pytest.raises(InvalidLabel):
        LabeledSample(features=[1.0], label=label)


def test_labeled_sample_is_immutable() -> None:
    sample = LabeledSample(features=[1.0], label=0)
    with pytest.raises(AttributeError):
        sample.label = 1  # type: ignore[misc]


def test_coerce_accepts_pairs_and_samples() -> None:
    sample = LabeledSample(features=[1.0, 2.0], label=0)
    assert LabeledSample.coerce(sample) is sample
    assert LabeledSample.coerce(([1.0, 2.0], 0)) == sample
