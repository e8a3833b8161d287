"""
Training abstractions and loops.

Online SGD for the logistic classifier:
- step: one gradient update per labeled sample
- train_on_stream: lazy scan yielding one model state per sample
- run_training_stream: loop with progress, checkpoints and evaluation
"""

from .streaming import (
    StreamingTrainResult,
    run_training_stream,
    step,
    train_on_stream,
)

__all__ = [
    "StreamingTrainResult",
    "run_training_stream",
    "step",
    "train_on_stream",
]
