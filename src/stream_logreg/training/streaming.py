"""
Online SGD training for the logistic classifier.

The update is a pure function of (state, sample, learning rate), so the same
logic serves a single in-order stream, several independent lineages, or a
replay of a stored sample list.

Key functions:
    step                   Single-sample gradient step -> new ModelState
    train_on_stream        Lazy scan over a sample stream, one state per sample
    run_training_stream    Training loop with progress, metrics and evaluation

Training utilities:
    StreamingTrainResult   Summary returned by run_training_stream
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, Optional

import numpy as np
from tqdm import tqdm

from ..core.datasets import SampleLike
from ..core.errors import InvalidLearningRate
from ..core.items import LabeledSample
from ..core.numeric import dot, sigmoid
from ..evaluation.metrics import log_loss
from ..logging import StreamingMetricsLogger
from ..models.state import ModelState


# =============================================================================
# Training result
# =============================================================================


@dataclass
class StreamingTrainResult:
    """Summary returned after a streaming training run."""

    items_processed: int
    final_state: Optional[ModelState]


# =============================================================================
# Single-sample gradient update
# =============================================================================


def _check_learning_rate(learning_rate: float) -> float:
    try:
        value = float(learning_rate)
    except (TypeError, ValueError):
        raise InvalidLearningRate(learning_rate) from None
    if not math.isfinite(value) or value <= 0:
        raise InvalidLearningRate(learning_rate)
    return value


def step(
    state: Optional[ModelState],
    sample: SampleLike,
    learning_rate: float,
) -> ModelState:
    """
    Apply one SGD step for a single labeled sample.

    With ``p = sigmoid(intercept + w . x)`` and
    ``delta = learning_rate * (label - p) * p * (1 - p)``, the new state is
    ``intercept + delta`` and ``w + delta * x``.

    Args:
        state: Current model state, or ``None`` to start from zeros sized to
            the sample's dimensionality.
        sample: A :class:`LabeledSample` or ``(features, label)`` pair.
        learning_rate: Positive step size.

    Returns:
        The next model state. ``state`` itself is not modified.

    Raises:
        InvalidLearningRate: If ``learning_rate`` is not a finite positive number.
        InvalidLabel: If the label is not 0 or 1.
        DimensionMismatch: If the sample's length differs from the state's weights.
    """
    learning_rate = _check_learning_rate(learning_rate)
    sample = LabeledSample.coerce(sample)
    if state is None:
        state = ModelState.zeros(sample.dim)
    state.check_dimension(sample.features)

    p = sigmoid(state.intercept + dot(state.weights, sample.features))
    error = sample.label - p
    delta = learning_rate * error * p * (1.0 - p)

    weights = np.asarray(state.weights, dtype=np.float64) + delta * np.asarray(
        sample.features, dtype=np.float64
    )
    return ModelState(intercept=state.intercept + delta, weights=weights.tolist())


# =============================================================================
# Stream transform
# =============================================================================


def train_on_stream(
    stream: Iterable[SampleLike],
    learning_rate: float,
    initial_state: Optional[ModelState] = None,
) -> Iterator[ModelState]:
    """
    Fold samples into the model in arrival order, yielding every new state.

    The generator pulls one sample at a time and keeps only the current
    state, so the upstream iterable controls pacing and buffering. Stopping
    iteration early leaves every state already yielded complete and usable.

    Args:
        stream: Ordered labeled samples.
        learning_rate: Positive step size applied to every sample.
        initial_state: State to start from; ``None`` starts from zeros.

    Returns:
        Iterator yielding one :class:`ModelState` per consumed sample.

    Raises:
        InvalidLearningRate: Immediately, before any sample is pulled.
    """
    learning_rate = _check_learning_rate(learning_rate)

    def _scan() -> Iterator[ModelState]:
        state = initial_state
        for sample in stream:
            state = step(state, sample, learning_rate)
            yield state

    return _scan()


# =============================================================================
# Training loop
# =============================================================================


def run_training_stream(
    stream: Iterable[SampleLike],
    learning_rate: float,
    *,
    initial_state: Optional[ModelState] = None,
    max_items: Optional[int] = None,
    metrics_logger: Optional[StreamingMetricsLogger] = None,
    eval_fn: Optional[Callable[[ModelState], Dict[str, Any]]] = None,
    eval_every_n_checkpoints: int = 1,
    progress_bar: bool = True,
    total_items: Optional[int] = None,
) -> StreamingTrainResult:
    """
    Train on a stream of samples in temporal order.

    Applies :func:`step` item by item, like :func:`train_on_stream`, and adds
    the bookkeeping an experiment needs: a progress bar, per-item loss
    tracking, periodic checkpoints and evaluation. When called without
    logging/eval arguments it only trains.

    Args:
        stream: Ordered labeled samples (e.g. a :class:`SampleStream`).
        learning_rate: Positive step size.
        initial_state: Optional starting state (e.g. a restored model).
        max_items: Stop after this many items (``None`` = exhaust the stream).
        metrics_logger: Optional logger for streaming metrics and checkpoints.
        eval_fn: Optional evaluation callback ``(state) -> metrics_dict``,
            called at checkpoint intervals.
        eval_every_n_checkpoints: Evaluate every N checkpoints (default 1).
        progress_bar: Show a tqdm progress bar.
        total_items: Total expected items (for progress bar). Automatically
            taken from ``stream`` if it has ``__len__``.

    Returns:
        :class:`StreamingTrainResult` with the item count and final state.
    """
    learning_rate = _check_learning_rate(learning_rate)
    if max_items is not None and max_items <= 0:
        raise ValueError(f"max_items must be positive, got {max_items}")
    if total_items is None and hasattr(stream, "__len__"):
        total_items = len(stream)
    if max_items is not None and total_items is not None:
        total_items = min(total_items, max_items)

    checkpoint_idx = 0
    items_processed = 0
    state = initial_state

    pbar = tqdm(stream, desc="Processing stream", total=total_items) if progress_bar else stream

    for sample in pbar:
        sample = LabeledSample.coerce(sample)
        if metrics_logger is not None:
            # Loss of the state before it sees the sample (prequential).
            p_before = 0.5 if state is None else sigmoid(
                state.intercept + dot(state.weights, sample.features)
            )
            metrics_logger.log_stream_item(log_loss(p_before, sample.label))

        state = step(state, sample, learning_rate)
        items_processed += 1

        if metrics_logger is not None and metrics_logger.should_checkpoint():
            checkpoint_idx += 1
            metrics_logger.log_checkpoint(checkpoint_idx, state)

            if eval_fn is not None and checkpoint_idx % eval_every_n_checkpoints == 0:
                eval_metrics = eval_fn(state)
                metrics_logger.log_evaluation(checkpoint_idx, eval_metrics)

                if progress_bar and hasattr(pbar, "set_postfix"):
                    pbar.set_postfix({
                        "val_loss": f"{eval_metrics.get('loss', 0.0):.3f}",
                        "val_acc": f"{eval_metrics.get('accuracy', 0.0):.3f}",
                    })

        # Stop before pulling another item from the caller's stream.
        if max_items is not None and items_processed >= max_items:
            break

    return StreamingTrainResult(items_processed=items_processed, final_state=state)
