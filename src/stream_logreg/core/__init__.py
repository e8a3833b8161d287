"""
Core abstractions for stream learning.

Data:
    FeatureVector           Immutable tuple of floats
    LabeledSample           (features, label) pair flowing through the stream

Numerics:
    dot                     Float64 inner product with dimension check
    sigmoid                 Overflow-safe logistic function

Streams:
    SampleStream            In-memory samples replayed in order
    load_samples_csv        CSV reader for labeled samples

Errors:
    DimensionMismatch, InvalidLabel, InvalidLearningRate
"""

from .datasets import SampleStream, load_samples_csv
from .errors import (
    DimensionMismatch,
    InvalidLabel,
    InvalidLearningRate,
    StreamLogRegError,
)
from .items import FeatureVector, LabeledSample, as_feature_vector
from .numeric import SIGMOID_CLAMP, dot, sigmoid

__all__ = [
    "DimensionMismatch",
    "FeatureVector",
    "InvalidLabel",
    "InvalidLearningRate",
    "LabeledSample",
    "SIGMOID_CLAMP",
    "SampleStream",
    "StreamLogRegError",
    "as_feature_vector",
    "dot",
    "load_samples_csv",
    "sigmoid",
]
