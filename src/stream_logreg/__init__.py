"""Online logistic regression trained by streaming SGD."""

__version__ = "0.1.0"

from stream_logreg import (
    core,
    evaluation,
    logging,
    models,
    training,
)
from stream_logreg.config import StreamingTrainingConfig
from stream_logreg.core import (
    DimensionMismatch,
    InvalidLabel,
    InvalidLearningRate,
    LabeledSample,
    SampleStream,
)
from stream_logreg.models import ModelState, predict, predict_stream
from stream_logreg.training import step, train_on_stream

__all__ = [
    "DimensionMismatch",
    "InvalidLabel",
    "InvalidLearningRate",
    "LabeledSample",
    "ModelState",
    "SampleStream",
    "StreamingTrainingConfig",
    "core",
    "evaluation",
    "logging",
    "models",
    "predict",
    "predict_stream",
    "step",
    "train_on_stream",
    "training",
]
