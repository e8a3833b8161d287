"""
Streaming classification training experiment.

Trains the logistic classifier on a CSV sample stream in strict temporal
order, evaluates it on a held-out stream, and saves the final model state.

Usage:
    python experiments/streaming_classification.py --config configs/streaming_classification.yaml
"""

from __future__ import annotations

import argparse
import shutil
import sys
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

from stream_logreg.config import StreamingTrainingConfig
from stream_logreg.core import SampleStream, load_samples_csv
from stream_logreg.evaluation import evaluate_streaming
from stream_logreg.logging import StreamingMetricsLogger, create_run_dir, save_run_info
from stream_logreg.models import ModelState, load_model_state, save_model_state
from stream_logreg.training import run_training_stream


def main(config: StreamingTrainingConfig, config_path: Path, command: str) -> None:
    """Run streaming training."""

    start_time = datetime.now()

    print("=" * 60)
    print("Streaming SGD Training")
    print("=" * 60)

    base_output_dir = PROJECT_ROOT / config.output_dir
    run_dir = create_run_dir(base_output_dir)
    print(f"Run directory: {run_dir}")

    shutil.copy(config_path, run_dir / "config.yaml")

    # Streams
    print("\nLoading samples...")
    train_samples = load_samples_csv(PROJECT_ROOT / config.data_path)
    train_stream = SampleStream(train_samples, passes=config.passes)
    print(f"  Train samples: {len(train_samples)} x {config.passes} passes")

    val_samples = None
    if config.eval_data_path:
        val_samples = load_samples_csv(PROJECT_ROOT / config.eval_data_path)
        print(f"  Val samples:   {len(val_samples)}")

    # Initial model
    initial_state = None
    if config.initial_model:
        model_path = PROJECT_ROOT / config.initial_model
        print(f"Loading model state: {model_path}")
        initial_state = load_model_state(model_path)
        print(f"  {initial_state}")

    metrics_logger = StreamingMetricsLogger(
        log_dir=run_dir,
        checkpoint_interval=config.checkpoint_interval,
    )

    dataset_info = {
        "train_total": len(train_samples),
        "val_total": len(val_samples) if val_samples is not None else None,
    }
    save_run_info(
        run_dir=run_dir,
        config=config,
        command=command,
        start_time=start_time,
        dataset_info=dataset_info,
        repo_path=PROJECT_ROOT,
    )

    eval_fn = None
    if val_samples is not None:
        def eval_fn(state: ModelState) -> dict:
            return evaluate_streaming(state, val_samples)

    print("\n" + "=" * 60)
    print("Starting streaming training...")
    print(f"  Learning rate: {config.learning_rate}")
    print("=" * 60)

    result = run_training_stream(
        train_stream,
        config.learning_rate,
        initial_state=initial_state,
        max_items=config.max_items,
        metrics_logger=metrics_logger,
        eval_fn=eval_fn,
        eval_every_n_checkpoints=config.eval_every_n_checkpoints,
        progress_bar=config.progress_bar,
    )

    print("\n" + "=" * 60)
    print("Streaming training complete!")
    print(f"  Items processed: {result.items_processed}")
    print(f"  Final model:     {result.final_state}")
    print("=" * 60)

    if result.final_state is None:
        print("\nNo samples were processed; nothing to save.")
        return

    final_metrics = None
    if val_samples is not None:
        print("\nFinal evaluation...")
        final_metrics = evaluate_streaming(result.final_state, val_samples)
        print(f"  Val Loss: {final_metrics['loss']:.4f}")
        print(f"  Val Acc:  {final_metrics['accuracy']:.4f}")
        print(f"  Val F1:   {final_metrics['f1']:.4f}")

    metrics_logger.print_summary()

    final_path = save_model_state(result.final_state, run_dir / "final_model.json")
    print(f"Saved model state: {final_path}")

    end_time = datetime.now()
    save_run_info(
        run_dir=run_dir,
        config=config,
        command=command,
        start_time=start_time,
        end_time=end_time,
        final_metrics=final_metrics,
        dataset_info=dataset_info,
        extra_info={"items_processed": result.items_processed},
        repo_path=PROJECT_ROOT,
    )

    print(f"\nRun directory: {run_dir}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Streaming SGD classification training")
    parser.add_argument(
        "--config",
        type=str,
        required=True,
        help="Path to config YAML file",
    )
    args = parser.parse_args()

    config_path = PROJECT_ROOT / args.config
    if not config_path.exists():
        print(f"Config file not found: {config_path}")
        sys.exit(1)

    command = " ".join(sys.argv)

    config = StreamingTrainingConfig.from_yaml(config_path)
    main(config, config_path, command)
