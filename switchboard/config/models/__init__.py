"""Configuration section models."""

from switchboard.config.models.classification import ClassifierConfig, ExtractionConfig
from switchboard.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from switchboard.config.models.prompts import CoverageConfig, PromptConfig

__all__ = [
    "ClassifierConfig",
    "CoverageConfig",
    "ExtractionConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "PromptConfig",
]
