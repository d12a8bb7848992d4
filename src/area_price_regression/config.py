"""Configuration management for training runs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import tomllib

from .errors import ConfigError
from .training import DEFAULT_EPOCHS, DEFAULT_LEARNING_RATE, GradientReducer, SequentialReducer, ThreadedReducer


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    # Logging severity threshold (INFO/DEBUG/etc.).
    level: str = Field(default="INFO", description="Logging level")
    # Emit JSON if True; otherwise emit a human-readable format.
    json_output: bool = Field(default=True, description="Emit JSON logs")
    # Optional file path for log output; if None, logs go to stderr.
    log_file: str | None = Field(default=None, description="Optional log file path")
    max_bytes: int = Field(default=1_000_000, description="Max log file size before rotation")
    backup_count: int = Field(default=3, description="Number of rotated log files to keep")


class TrainingConfig(BaseModel):
    """Gradient-descent hyperparameters."""

    epochs: int = Field(default=DEFAULT_EPOCHS, gt=0, description="Number of full-batch epochs")
    learning_rate: float = Field(default=DEFAULT_LEARNING_RATE, gt=0, description="Gradient step size")
    # workers == 1 keeps the reduction on the calling thread.
    workers: int = Field(default=1, ge=1, description="Threads used to sum per-sample gradients")
    chunk_size: int = Field(default=1024, ge=1, description="Samples per reduction chunk")

    def build_reducer(self) -> GradientReducer:
        if self.workers == 1:
            return SequentialReducer()
        return ThreadedReducer(workers=self.workers, chunk_size=self.chunk_size)


class RegressionSettings(BaseSettings):
    """Settings loaded from env or an optional TOML file."""

    # Environment keys use APR_ prefix and "__" nesting, e.g. APR_TRAINING__EPOCHS.
    model_config = SettingsConfigDict(env_prefix="APR_", env_nested_delimiter="__", extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    training: TrainingConfig = Field(default_factory=TrainingConfig)

    @classmethod
    def from_toml(cls, path: str | Path) -> "RegressionSettings":
        try:
            data = tomllib.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
            raise ConfigError(f"{path}: cannot load settings: {exc}") from exc
        return cls.model_validate(data)
