"""Linear model state with persistence helpers."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Sequence

from ..core.errors import DimensionMismatch


@dataclass(frozen=True)
class ModelState:
    """
    Parameters of the logistic classifier.

    A plain value: every training step produces a new instance and leaves the
    previous one untouched, so any emitted state can be kept, persisted, or
    scored against independently.

    Attributes:
        intercept: Bias term.
        weights: One weight per feature dimension.
    """

    intercept: float
    weights: tuple

    def __post_init__(self) -> None:
        try:
            if isinstance(self.weights, (str, bytes)):
                raise TypeError("weights must be a sequence of numbers")
            intercept = float(self.intercept)
            weights = tuple(float(w) for w in self.weights)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid model parameters: {exc}") from exc
        if not math.isfinite(intercept):
            raise ValueError(f"Intercept is not finite: {intercept!r}")
        for i, w in enumerate(weights):
            if not math.isfinite(w):
                raise ValueError(f"Weight {i} is not finite: {w!r}")
        object.__setattr__(self, "intercept", intercept)
        object.__setattr__(self, "weights", weights)

    @classmethod
    def zeros(cls, dim: int) -> "ModelState":
        """Untrained state: zero intercept and ``dim`` zero weights."""
        return cls(intercept=0.0, weights=(0.0,) * dim)

    @property
    def dim(self) -> int:
        return len(self.weights)

    def check_dimension(self, features: Sequence[float]) -> None:
        """Raise DimensionMismatch unless ``features`` matches the weight count."""
        if len(features) != len(self.weights):
            raise DimensionMismatch(expected=len(self.weights), actual=len(features))

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Flat record ``{"intercept": float, "weights": [float, ...]}``."""
        return {"intercept": self.intercept, "weights": list(self.weights)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelState":
        try:
            intercept = data["intercept"]
            weights: Iterable[float] = data["weights"]
        except KeyError as exc:
            raise ValueError(f"Model record missing required field {exc}") from exc
        except TypeError as exc:
            raise ValueError(f"Model record must be a mapping, got {type(data).__name__}") from exc
        return cls(intercept=intercept, weights=weights)

    def __repr__(self) -> str:
        weights = ", ".join(f"{w:.4f}" for w in self.weights)
        return f"ModelState(intercept={self.intercept:.4f}, weights=[{weights}])"


def save_model_state(state: ModelState, path: str | Path) -> Path:
    """
    Write a model state as JSON.

    Floats are written with Python's shortest round-trip repr, so loading the
    file reproduces the exact same values.

    Returns:
        The path written to.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(state.to_dict(), f, indent=2)
    return path


def load_model_state(path: str | Path) -> ModelState:
    """Read a model state written by :func:`save_model_state`."""
    with open(path, "r") as f:
        return ModelState.from_dict(json.load(f))
