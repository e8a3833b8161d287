"""
Core data structures for stream learning.

Defines the FeatureVector representation and LabeledSample, the unit of
data flowing through the training stream.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from .errors import InvalidLabel

FeatureVector = Tuple[float, ...]


def as_feature_vector(values: Iterable[float]) -> FeatureVector:
    """
    Convert a sequence of numbers into an immutable float tuple.

    Raises:
        ValueError: If the sequence is empty or holds a non-finite value.
    """
    vector = tuple(float(v) for v in values)
    if not vector:
        raise ValueError("Feature vector must have at least one dimension")
    for i, v in enumerate(vector):
        if not math.isfinite(v):
            raise ValueError(f"Feature {i} is not finite: {v!r}")
    return vector


@dataclass(frozen=True)
class LabeledSample:
    """
    A single labeled observation in the training stream.

    Attributes:
        features: Feature vector (converted to a float tuple on construction).
        label: Binary target, 0 or 1.
    """

    features: FeatureVector
    label: int

    def __post_init__(self) -> None:
        if self.label not in (0, 1):
            raise InvalidLabel(self.label)
        object.__setattr__(self, "features", as_feature_vector(self.features))
        object.__setattr__(self, "label", int(self.label))

    @property
    def dim(self) -> int:
        return len(self.features)

    @classmethod
    def coerce(cls, sample: Union["LabeledSample", Tuple[Iterable[float], int]]) -> "LabeledSample":
        """Accept either a LabeledSample or a ``(features, label)`` pair."""
        if isinstance(sample, cls):
            return sample
        features, label = sample
        return cls(features=features, label=label)

    def to_dict(self) -> dict:
        return {"features": list(self.features), "label": self.label}
