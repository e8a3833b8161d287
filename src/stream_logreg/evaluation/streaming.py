"""Evaluation for online streaming training."""

from __future__ import annotations

from typing import Dict, Iterable

from ..core.datasets import SampleLike
from ..core.items import LabeledSample
from ..models.predictor import predict
from ..models.state import ModelState
from .metrics import compute_metrics, log_loss


def evaluate_streaming(
    model: ModelState,
    val_stream: Iterable[SampleLike],
) -> Dict[str, float]:
    """
    Evaluate a model state on a validation stream (without updating).

    Args:
        model: Model state to evaluate.
        val_stream: Labeled samples to score.

    Returns:
        Dict with loss, accuracy, precision, recall, f1 and confusion counts.
    """
    all_preds = []
    all_targets = []
    total_loss = 0.0

    for sample in val_stream:
        sample = LabeledSample.coerce(sample)
        p = predict(model, sample.features)
        total_loss += log_loss(p, sample.label)
        all_preds.append(p)
        all_targets.append(sample.label)

    metrics = compute_metrics(all_preds, all_targets)
    metrics["loss"] = total_loss / max(len(all_preds), 1)
    return metrics
