"""Metric computation functions for binary classification."""

from __future__ import annotations

import math
from typing import Dict, Sequence

import numpy as np

LOG_LOSS_EPS = 1e-15


def log_loss(probability: float, label: int) -> float:
    """Binary cross-entropy of one prediction, with the probability clipped away from 0 and 1."""
    p = min(max(probability, LOG_LOSS_EPS), 1.0 - LOG_LOSS_EPS)
    return -math.log(p) if label == 1 else -math.log(1.0 - p)


def compute_metrics(
    preds: Sequence[float], targets: Sequence[int], threshold: float = 0.5
) -> Dict[str, float]:
    """
    Compute binary classification metrics.

    A prediction counts as positive only when it is strictly above
    ``threshold``; a probability of exactly 0.5 is undecided and is scored
    as negative.

    Args:
        preds: Predicted probabilities, shape (N,).
        targets: Ground truth labels (0 or 1), shape (N,).
        threshold: Classification threshold for converting probabilities to labels.

    Returns:
        Dict with accuracy, precision, recall, f1, tp, fp, fn, tn.
    """
    preds = np.asarray(preds, dtype=np.float64)
    targets = np.asarray(targets)
    if preds.shape != targets.shape:
        raise ValueError(f"preds {preds.shape} and targets {targets.shape} differ in shape")

    pred_labels = preds > threshold

    tp = int(np.sum(pred_labels & (targets == 1)))
    fp = int(np.sum(pred_labels & (targets == 0)))
    fn = int(np.sum(~pred_labels & (targets == 1)))
    tn = int(np.sum(~pred_labels & (targets == 0)))

    accuracy = (tp + tn) / (tp + tn + fp + fn + 1e-8)
    precision = tp / (tp + fp + 1e-8)
    recall = tp / (tp + fn + 1e-8)
    f1 = 2 * precision * recall / (precision + recall + 1e-8)

    return {
        "accuracy": accuracy,
        "precision": precision,
        "recall": recall,
        "f1": f1,
        "tp": tp,
        "fp": fp,
        "fn": fn,
        "tn": tn,
    }
