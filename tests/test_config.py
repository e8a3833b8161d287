from pathlib import Path

import pytest

from stream_logreg.config import StreamingTrainingConfig
from stream_logreg.core import InvalidLearningRate


def test_defaults() -> None:
    config = StreamingTrainingConfig()
    assert config.learning_rate == 0.01
    assert config.passes == 1
    assert config.eval_every_n_checkpoints == 1


def test_from_yaml_ignores_unknown_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "learning_rate: 0.1\npasses: 100\ncheckpoint_interval: 50\n"
        "eval_every_n_items: 200\nunused_key: true\n"
    )
    config = StreamingTrainingConfig.from_yaml(path)
    assert config.learning_rate == 0.1
    assert config.passes == 100
    assert config.eval_every_n_checkpoints == 4


def test_from_yaml_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert StreamingTrainingConfig.from_yaml(path) == StreamingTrainingConfig()


def test_bundled_config_loads() -> None:
    path = Path(__file__).resolve().parents[1] / "configs" / "streaming_classification.yaml"
    config = StreamingTrainingConfig.from_yaml(path)
    assert config.learning_rate == 0.1
    assert config.passes == 100


@pytest.mark.parametrize("lr", [0, -1.0, float("nan"), "fast", None, True])
def test_invalid_learning_rate(lr) -> None:
    with pytest.raises(InvalidLearningRate):
        StreamingTrainingConfig(learning_rate=lr)


@pytest.mark.parametrize(
    "kwargs",
    [{"passes": 0}, {"max_items": 0}, {"checkpoint_interval": 0}, {"eval_every_n_items": -5}],
)
def test_invalid_values(kwargs) -> None:
    with pytest.raises(ValueError):
        StreamingTrainingConfig(**kwargs)


def test_exponent_learning_rate_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("learning_rate: 1e-3\n")
    assert StreamingTrainingConfig.from_yaml(path).learning_rate == pytest.approx(0.001)
