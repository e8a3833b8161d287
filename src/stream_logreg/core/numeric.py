"""Numeric primitives shared by the trainer and the predictor."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .errors import DimensionMismatch

# Logits are clamped to this band before exponentiation. Within it the float64
# sigmoid stays strictly inside (0, 1) and exp() cannot overflow.
SIGMOID_CLAMP = 35.0


def dot(weights: Sequence[float], features: Sequence[float]) -> float:
    """
    Float64 inner product of two equal-length vectors.

    Raises:
        DimensionMismatch: If the vectors differ in length.
    """
    if len(weights) != len(features):
        raise DimensionMismatch(expected=len(weights), actual=len(features))
    return float(np.dot(np.asarray(weights, dtype=np.float64), np.asarray(features, dtype=np.float64)))


def sigmoid(z: float) -> float:
    """Logistic function ``1 / (1 + exp(-z))`` with ``z`` clamped to ``[-SIGMOID_CLAMP, SIGMOID_CLAMP]``."""
    z = max(-SIGMOID_CLAMP, min(SIGMOID_CLAMP, z))
    return 1.0 / (1.0 + math.exp(-z))
