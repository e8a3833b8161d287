"""
Metrics tracking for streaming experiments.

Tracks items processed, prequential loss (each sample scored by the state
before it is trained on), model snapshots and periodic evaluation results.
"""

from __future__ import annotations

import csv
import math
import time
from pathlib import Path
from typing import Any, Dict, Optional


class StreamingMetricsLogger:
    """
    Logger for streaming experiment metrics.

    Writes two CSV files into ``log_dir``:

    - ``streaming_metrics.csv``: one row per checkpoint with throughput,
      running loss and a snapshot of the model parameters.
    - ``checkpoints.csv``: evaluation metrics on held-out data.

    Args:
        log_dir: Directory to save CSV logs.
        checkpoint_interval: How often to log checkpoints (in stream items processed).
    """

    def __init__(
        self,
        log_dir: str | Path,
        checkpoint_interval: int = 1000,
    ):
        if checkpoint_interval <= 0:
            raise ValueError(f"checkpoint_interval must be positive, got {checkpoint_interval}")

        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.checkpoint_interval = checkpoint_interval

        self.metrics_file = self.log_dir / "streaming_metrics.csv"
        self.checkpoints_file = self.log_dir / "checkpoints.csv"

        # Counters
        self.num_items_processed = 0
        self.total_loss = 0.0
        self.interval_loss = 0.0
        self.interval_items = 0
        self.start_time = time.time()

        self._init_metrics_csv()
        self._init_checkpoints_csv()

    def _init_metrics_csv(self) -> None:
        with open(self.metrics_file, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow([
                "checkpoint_idx",
                "items_processed",
                "running_loss",
                "interval_loss",
                "intercept",
                "weight_norm",
                "elapsed_seconds",
                "items_per_second",
            ])

    def _init_checkpoints_csv(self) -> None:
        with open(self.checkpoints_file, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow([
                "checkpoint_idx",
                "items_processed",
                "eval_loss",
                "eval_accuracy",
                "eval_precision",
                "eval_recall",
                "eval_f1",
                "elapsed_seconds",
            ])

    def log_stream_item(self, loss: float) -> None:
        """
        Log processing of a single stream item.

        Args:
            loss: Log loss of the pre-update state on this item.
        """
        self.num_items_processed += 1
        self.total_loss += loss
        self.interval_loss += loss
        self.interval_items += 1

    def log_checkpoint(self, checkpoint_idx: int, state: Any) -> None:
        """
        Log a checkpoint (periodic snapshot of metrics and model parameters).

        Args:
            checkpoint_idx: Checkpoint index.
            state: Current model state (anything with ``intercept`` and ``weights``).
        """
        elapsed = time.time() - self.start_time
        items_per_sec = self.num_items_processed / max(elapsed, 1e-6)
        running_loss = self.total_loss / max(self.num_items_processed, 1)
        interval_loss = self.interval_loss / max(self.interval_items, 1)
        weight_norm = math.sqrt(sum(w * w for w in state.weights))

        with open(self.metrics_file, "a", newline="") as f:
            writer = csv.writer(f)
            writer.writerow([
                checkpoint_idx,
                self.num_items_processed,
                f"{running_loss:.6f}",
                f"{interval_loss:.6f}",
                f"{state.intercept:.6f}",
                f"{weight_norm:.6f}",
                f"{elapsed:.2f}",
                f"{items_per_sec:.2f}",
            ])

        self.interval_loss = 0.0
        self.interval_items = 0

    def log_evaluation(
        self,
        checkpoint_idx: int,
        eval_metrics: Dict[str, float],
    ) -> None:
        """
        Log evaluation metrics at a checkpoint.

        Args:
            checkpoint_idx: Checkpoint index.
            eval_metrics: Dict with loss, accuracy, precision, recall, f1.
        """
        elapsed = time.time() - self.start_time

        with open(self.checkpoints_file, "a", newline="") as f:
            writer = csv.writer(f)
            writer.writerow([
                checkpoint_idx,
                self.num_items_processed,
                f"{eval_metrics.get('loss', 0.0):.4f}",
                f"{eval_metrics.get('accuracy', 0.0):.4f}",
                f"{eval_metrics.get('precision', 0.0):.4f}",
                f"{eval_metrics.get('recall', 0.0):.4f}",
                f"{eval_metrics.get('f1', 0.0):.4f}",
                f"{elapsed:.2f}",
            ])

    def should_checkpoint(self) -> bool:
        """Check if it's time to log a checkpoint."""
        return (
            self.num_items_processed > 0
            and self.num_items_processed % self.checkpoint_interval == 0
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get current summary statistics."""
        elapsed = time.time() - self.start_time
        return {
            "items_processed": self.num_items_processed,
            "running_loss": self.total_loss / max(self.num_items_processed, 1),
            "elapsed_seconds": elapsed,
            "items_per_second": self.num_items_processed / max(elapsed, 1e-6),
        }

    def print_summary(self) -> None:
        """Print a summary of current metrics."""
        stats = self.get_summary()

        print()
        print("=" * 60)
        print("Streaming Metrics Summary")
        print("=" * 60)
        print(f"  Items processed      : {stats['items_processed']}")
        print(f"  Running loss         : {stats['running_loss']:.4f}")
        print(f"  Elapsed time         : {stats['elapsed_seconds']:.1f}s")
        print(f"  Items per second     : {stats['items_per_second']:.2f}")
        print("=" * 60)
        print()
