"""Configuration for streaming training runs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .core.errors import InvalidLearningRate


@dataclass
class StreamingTrainingConfig:
    """Streaming training experiment configuration."""

    # Paths
    data_path: str = "data/toy_dataset.csv"
    eval_data_path: Optional[str] = None
    output_dir: str = "outputs/streaming_classification"

    # Restore a saved model state before training (optional)
    initial_model: Optional[str] = None

    # Training
    learning_rate: float = 0.01
    passes: int = 1
    max_items: Optional[int] = None

    # Evaluation / logging
    checkpoint_interval: int = 100
    eval_every_n_items: int = 100
    progress_bar: bool = True

    def __post_init__(self) -> None:
        # PyYAML reads exponent-only literals such as 1e-3 as strings.
        try:
            learning_rate = float(self.learning_rate)
        except (TypeError, ValueError):
            raise InvalidLearningRate(self.learning_rate) from None
        if isinstance(self.learning_rate, bool) or not math.isfinite(learning_rate) or learning_rate <= 0:
            raise InvalidLearningRate(self.learning_rate)
        self.learning_rate = learning_rate
        if self.passes <= 0:
            raise ValueError(f"passes must be positive, got {self.passes}")
        if self.max_items is not None and self.max_items <= 0:
            raise ValueError(f"max_items must be positive, got {self.max_items}")
        if self.checkpoint_interval <= 0:
            raise ValueError(f"checkpoint_interval must be positive, got {self.checkpoint_interval}")
        if self.eval_every_n_items <= 0:
            raise ValueError(f"eval_every_n_items must be positive, got {self.eval_every_n_items}")

    @property
    def eval_every_n_checkpoints(self) -> int:
        return max(1, self.eval_every_n_items // self.checkpoint_interval)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "StreamingTrainingConfig":
        """Load config from YAML file. Unknown keys are ignored."""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
