"""Configuration models for daypath."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from daypath.core.curves.fitting import FitStrategy
from daypath.core.curves.projection import DEFAULT_COARSE_STEPS
from daypath.core.curves.sampling import DEFAULT_MAX_ERROR_PX, DEFAULT_MAX_POINTS


class MappingConfig(BaseModel):
    """Fitting, sampling and projection settings for time mapping.

    Immutable so a timeline can hold it without copying.

    Example:
        >>> cfg = MappingConfig(max_error_px=0.5)
        >>> cfg.fit_strategy
        <FitStrategy.CATMULL_ROM: 'catmull_rom'>
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_error_px: float = Field(
        default=DEFAULT_MAX_ERROR_PX,
        gt=0.0,
        description="Sampler flatness tolerance in coordinate units",
    )

    max_points: int = Field(
        default=DEFAULT_MAX_POINTS,
        ge=2,
        description="Sample count above which a segment is not refined further",
    )

    coarse_steps: int = Field(
        default=DEFAULT_COARSE_STEPS,
        ge=1,
        description="Coarse search intervals for nearest-point projection",
    )

    fit_strategy: FitStrategy = Field(
        default=FitStrategy.CATMULL_ROM,
        description="Curve fitting strategy",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (default: stdout)")


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    mapping: MappingConfig = MappingConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("daypath.json")
