"""Experiment tracking and reproducibility utilities."""

from __future__ import annotations

import dataclasses
import json
import platform
import socket
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np


def get_git_info(repo_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Get git commit hash and dirty status.

    Args:
        repo_path: Path to the git repository. If None, uses current directory.

    Returns:
        Dict with 'commit' (str or None) and 'dirty' (bool or None).
    """
    try:
        kwargs = {"capture_output": True, "text": True}
        if repo_path is not None:
            kwargs["cwd"] = repo_path

        commit = subprocess.run(["git", "rev-parse", "HEAD"], **kwargs)
        commit_hash = commit.stdout.strip() if commit.returncode == 0 else None

        status = subprocess.run(["git", "status", "--porcelain"], **kwargs)
        is_dirty = bool(status.stdout.strip()) if status.returncode == 0 else None

        return {"commit": commit_hash, "dirty": is_dirty}
    except (OSError, subprocess.SubprocessError):
        return {"commit": None, "dirty": None}


def get_environment_info() -> Dict[str, Any]:
    """Hostname, platform, Python and NumPy versions."""
    return {
        "hostname": socket.gethostname(),
        "platform": platform.platform(),
        "python_version": platform.python_version(),
        "numpy_version": np.__version__,
    }


def create_run_dir(base_output_dir: Path) -> Path:
    """
    Create a timestamped run directory.

    Args:
        base_output_dir: Parent directory for experiment outputs.

    Returns:
        Path to the created run directory.
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    run_dir = Path(base_output_dir) / timestamp
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def _config_to_dict(config: Any) -> Any:
    if dataclasses.is_dataclass(config) and not isinstance(config, type):
        return dataclasses.asdict(config)
    return config.__dict__ if hasattr(config, "__dict__") else config


def save_run_info(
    run_dir: Path,
    config: Any,
    command: str,
    start_time: datetime,
    end_time: Optional[datetime] = None,
    final_metrics: Optional[Dict[str, Any]] = None,
    dataset_info: Optional[Dict[str, Any]] = None,
    extra_info: Optional[Dict[str, Any]] = None,
    repo_path: Optional[Path] = None,
) -> Path:
    """
    Save run metadata to ``run_info.json``.

    Args:
        run_dir: Directory to save run_info.json.
        config: Configuration object (dataclass or object with ``__dict__``).
        command: Command used to run the experiment.
        start_time: Experiment start time.
        end_time: Experiment end time (None if still running).
        final_metrics: Evaluation metrics of the final model, if any.
        dataset_info: Optional dataset statistics.
        extra_info: Optional additional info to include.
        repo_path: Path to git repository for commit info.

    Returns:
        Path of the written file.
    """
    git_info = get_git_info(repo_path)

    run_info = {
        "git_commit": git_info["commit"],
        "git_dirty": git_info["dirty"],
        "start_time": start_time.isoformat(),
        "end_time": end_time.isoformat() if end_time else None,
        "duration_seconds": (end_time - start_time).total_seconds() if end_time else None,
        "command": command,
        "config": _config_to_dict(config),
        "environment": get_environment_info(),
        "dataset_info": dataset_info,
        "final_metrics": final_metrics,
    }

    if extra_info:
        run_info.update(extra_info)

    path = Path(run_dir) / "run_info.json"
    with open(path, "w") as f:
        json.dump(run_info, f, indent=2)
    return path
