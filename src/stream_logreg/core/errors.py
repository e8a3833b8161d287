"""Error kinds raised by the training and prediction core."""

from __future__ import annotations


class StreamLogRegError(ValueError):
    """Base class for invalid input to the core."""


class DimensionMismatch(StreamLogRegError):
    """Feature vector length disagrees with the model's weight count."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Feature vector has {actual} dimensions, model expects {expected}"
        )
        self.expected = expected
        self.actual = actual


class InvalidLabel(StreamLogRegError):
    """Label outside {0, 1}."""

    def __init__(self, label: object):
        super().__init__(f"Label must be 0 or 1, got {label!r}")
        self.label = label


class InvalidLearningRate(StreamLogRegError):
    """Learning rate that is not a finite positive number."""

    def __init__(self, learning_rate: object):
        super().__init__(f"Learning rate must be a finite positive number, got {learning_rate!r}")
        self.learning_rate = learning_rate
