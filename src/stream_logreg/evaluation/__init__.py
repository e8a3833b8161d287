"""
Evaluation methods and metrics.

- compute_metrics: Binary classification metrics (accuracy, precision, recall, F1)
- log_loss: Per-prediction binary cross-entropy
- evaluate_streaming: Score a model state over a labeled stream
"""

from .metrics import compute_metrics, log_loss
from .streaming import evaluate_streaming

__all__ = [
    "compute_metrics",
    "evaluate_streaming",
    "log_loss",
]
