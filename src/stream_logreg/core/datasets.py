"""
Ordered sample streams.

The training core only needs an iterable of samples in arrival order. These
helpers cover the two common sources used in experiments: an in-memory list
replayed for several passes, and a CSV file on disk.

    SampleStream        In-memory samples, replayed in order ``passes`` times
    load_samples_csv    Read ``feature_1, ..., feature_d, label`` rows
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from .items import LabeledSample

SampleLike = Union[LabeledSample, Tuple[Iterable[float], int]]


class SampleStream:
    """
    Replays a fixed list of samples in temporal order.

    Each pass yields the samples in the order they were given. Iterating the
    stream again starts over from the first pass, so the same stream can feed
    several independent training lineages.

    Args:
        samples: Labeled samples (or ``(features, label)`` pairs).
        passes: How many times to traverse the list.
    """

    def __init__(self, samples: Iterable[SampleLike], passes: int = 1):
        if passes <= 0:
            raise ValueError(f"passes must be positive, got {passes}")
        self.samples: List[LabeledSample] = [LabeledSample.coerce(s) for s in samples]
        self.passes = passes

    def __len__(self) -> int:
        return len(self.samples) * self.passes

    def __iter__(self) -> Iterator[LabeledSample]:
        for _ in range(self.passes):
            yield from self.samples

    def __repr__(self) -> str:
        return f"SampleStream(samples={len(self.samples)}, passes={self.passes})"


def _is_header(row: List[str]) -> bool:
    try:
        [float(cell) for cell in row]
    except ValueError:
        return True
    return False


def load_samples_csv(path: str | Path) -> List[LabeledSample]:
    """
    Load labeled samples from a CSV file.

    Each row holds the features followed by the label in the last column.
    A leading row that does not parse as numbers is treated as a header.
    Blank lines are ignored.

    Args:
        path: CSV file path.

    Returns:
        Samples in file order.

    Raises:
        ValueError: If a row is malformed or has an invalid label.
    """
    samples: List[LabeledSample] = []
    with open(path, "r", newline="") as f:
        reader = csv.reader(f)
        for line_no, row in enumerate(reader, start=1):
            row = [cell.strip() for cell in row]
            if not any(row):
                continue
            if line_no == 1 and _is_header(row):
                continue
            if len(row) < 2:
                raise ValueError(f"{path}:{line_no}: expected features and a label")
            try:
                features = [float(cell) for cell in row[:-1]]
                label = float(row[-1])
                samples.append(LabeledSample(features=features, label=label))
            except ValueError as exc:
                raise ValueError(f"{path}:{line_no}: {exc}") from exc
    return samples
