"""Prompt building and coverage gate configuration models."""

from pydantic import BaseModel, Field


class PromptConfig(BaseModel):
    """Prompt builder configuration."""

    max_array_items: int = Field(
        default=50,
        ge=1,
        description="Upper bound on list items rendered by a template loop",
    )


class CoverageConfig(BaseModel):
    """Thresholds for the offline coverage gate."""

    min_accuracy: float = Field(default=0.8, ge=0.0, le=1.0)
    min_coverage: float = Field(default=0.8, ge=0.0, le=1.0)
    max_pattern_overlaps: int = Field(
        default=0,
        ge=0,
        description="Overlaps tolerated among declared pattern examples at load time",
    )
