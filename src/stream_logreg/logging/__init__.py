"""
Logging and experiment tracking utilities.

- Experiment tracking: Git info, run directories, environment info
- StreamingMetricsLogger: Item-based CSV logging for streaming training
"""

from .experiment import (
    create_run_dir,
    get_environment_info,
    get_git_info,
    save_run_info,
)
from .streaming_logger import StreamingMetricsLogger

__all__ = [
    "create_run_dir",
    "get_environment_info",
    "get_git_info",
    "save_run_info",
    "StreamingMetricsLogger",
]
