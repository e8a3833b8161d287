"""
Prediction with a trained model state.

    predict          Probability of the positive class for one feature vector
    predict_stream   Lazy probabilities for an ordered stream of vectors
    classify         Map a probability to 1, 0, or None (undecided)
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from ..core.items import as_feature_vector
from ..core.numeric import dot, sigmoid
from .state import ModelState


def predict(model: ModelState, features: Sequence[float]) -> float:
    """
    Probability that ``features`` belongs to the positive class.

    Args:
        model: Trained (or restored) model state. Never modified.
        features: Feature vector with ``model.dim`` entries.

    Returns:
        A probability strictly between 0 and 1.

    Raises:
        DimensionMismatch: If ``len(features) != model.dim``.
    """
    features = as_feature_vector(features)
    model.check_dimension(features)
    return sigmoid(model.intercept + dot(model.weights, features))


def predict_stream(model: ModelState, stream: Iterable[Sequence[float]]) -> Iterator[float]:
    """Yield one probability per feature vector, in input order."""
    for features in stream:
        yield predict(model, features)


def classify(probability: float) -> Optional[int]:
    """Positive above 0.5, negative below, ``None`` at exactly 0.5."""
    if probability > 0.5:
        return 1
    if probability < 0.5:
        return 0
    return None
