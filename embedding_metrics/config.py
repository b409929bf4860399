"""Benchmark settings read from the environment.

The CLI loads ``.env`` with python-dotenv before calling
``load_settings()``; the values become defaults for its flags. The
metric functions themselves read no configuration.

Variables:
    EMBEDDING_METRICS_DIMENSIONS: Comma-separated dimensions (e.g. "128,1536").
    EMBEDDING_METRICS_ITERATIONS: Timed calls per case.
    EMBEDDING_METRICS_WARMUP: Untimed calls per case.
    EMBEDDING_METRICS_SEED: Seed for the input generator (unset = random).
    EMBEDDING_METRICS_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL.
"""

from typing import Annotated, Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from embedding_metrics.core.benchmark import DEFAULT_DIMENSIONS

ENV_PREFIX = "EMBEDDING_METRICS_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_dimensions(text: str) -> list[int]:
    """Parse a comma-separated list of non-negative dimensions.

    Raises:
        ValueError: If an item is not an integer or is negative.
    """
    dimensions = []
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        value = int(item)
        if value < 0:
            raise ValueError(f"Dimension cannot be negative: {value}")
        dimensions.append(value)

    if not dimensions:
        raise ValueError("At least one dimension is required")
    return dimensions


class BenchmarkSettings(BaseSettings):
    """Defaults for a benchmark run, overridable by EMBEDDING_METRICS_* variables."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    dimensions: Annotated[list[int], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_DIMENSIONS),
        description="Embedding dimensions to benchmark",
    )
    iterations: int = Field(default=1000, ge=1, description="Timed calls per case")
    warmup: int = Field(default=100, ge=0, description="Untimed calls per case")
    seed: int | None = Field(
        default=None,
        description="Generator seed, or None for fresh random inputs",
    )
    log_level: LogLevel = Field(default="WARNING", description="Logging level")

    @field_validator("dimensions", mode="before")
    @classmethod
    def _split_dimensions(cls, value: Any) -> Any:
        if isinstance(value, str):
            if not value.strip():
                return list(DEFAULT_DIMENSIONS)
            return parse_dimensions(value)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings() -> BenchmarkSettings:
    """Build settings from environment variables.

    Returns:
        Settings with unset variables left at their defaults.

    Raises:
        ValueError: If a variable holds a malformed value; the message
            names the variable.
    """
    try:
        return BenchmarkSettings()
    except ValidationError as e:
        error = e.errors()[0]
        name = ENV_PREFIX + str(error["loc"][0]).upper() if error["loc"] else ENV_PREFIX
        raise ValueError(f"{name} is invalid: {error['msg']}") from None
