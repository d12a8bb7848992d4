import pytest
from pydantic import ValidationError

from area_price_regression.config import RegressionSettings, TrainingConfig
from area_price_regression.errors import ConfigError
from area_price_regression.training import SequentialReducer, ThreadedReducer


def test_settings_load_defaults() -> None:
    settings = RegressionSettings()
    assert settings.logging.level == "INFO"
    assert settings.training.epochs == 3000
    assert settings.training.learning_rate == pytest.approx(0.05)


def test_settings_read_nested_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APR_TRAINING__EPOCHS", "500")
    monkeypatch.setenv("APR_LOGGING__LEVEL", "DEBUG")
    settings = RegressionSettings()
    assert settings.training.epochs == 500
    assert settings.logging.level == "DEBUG"


def test_settings_from_toml(tmp_path) -> None:
    path = tmp_path / "settings.toml"
    path.write_text('[logging]\njson_output = false\n\n[training]\nepochs = 42\nlearning_rate = 0.2\n')
    settings = RegressionSettings.from_toml(path)
    assert settings.training.epochs == 42
    assert settings.training.learning_rate == pytest.approx(0.2)
    assert settings.logging.json_output is False


@pytest.mark.parametrize("overrides", [{"epochs": 0}, {"learning_rate": 0.0}, {"workers": 0}])
def test_training_config_rejects_non_positive_values(overrides) -> None:
    with pytest.raises(ValidationError):
        TrainingConfig(**overrides)


def test_training_config_builds_reducer() -> None:
    assert isinstance(TrainingConfig().build_reducer(), SequentialReducer)
    reducer = TrainingConfig(workers=3, chunk_size=16).build_reducer()
    try:
        assert isinstance(reducer, ThreadedReducer)
    finally:
        reducer.close()


def test_from_toml_wraps_malformed_file(tmp_path) -> None:
    path = tmp_path / "settings.toml"
    path.write_text("[training\nepochs = 10\n")
    with pytest.raises(ConfigError):
        RegressionSettings.from_toml(path)


def test_from_toml_wraps_missing_file(tmp_path) -> None:
    with pytest.raises(ConfigError):
        RegressionSettings.from_toml(tmp_path / "missing.toml")
