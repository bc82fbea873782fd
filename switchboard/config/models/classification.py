"""Classifier and entity extraction configuration models."""

from pydantic import BaseModel, Field, model_validator


class ClassifierConfig(BaseModel):
    """Scoring knobs for the intent classifier.

    Confidence is a weighted sum of pattern strength, route-domain agreement
    and required-entity overlap. The weights are tunable but must keep
    pattern > route > entity so the ranking order holds.
    """

    pattern_weight: float = Field(default=0.6, ge=0.0, le=1.0)
    route_weight: float = Field(default=0.25, ge=0.0, le=1.0)
    entity_weight: float = Field(default=0.15, ge=0.0, le=1.0)
    keyword_strength: float = Field(
        default=0.4,
        gt=0.0,
        lt=1.0,
        description="Match strength assigned to a keyword-only hit (a phrase hit is 1.0)",
    )
    clarification_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Confidence below which the caller should ask the user",
    )
    ambiguity_ratio: float = Field(
        default=0.8,
        gt=0.0,
        le=1.0,
        description="Ask the user when the runner-up scores above this fraction of the best confidence",
    )
    max_alternatives: int = Field(default=3, ge=0, le=10)

    @model_validator(mode="after")
    def validate_weights(self) -> "ClassifierConfig":
        """Enforce weight ordering and a total of at most 1."""
        if not self.pattern_weight > self.route_weight > self.entity_weight:
            raise ValueError(
                "weights must satisfy pattern_weight > route_weight > entity_weight"
            )
        total = self.pattern_weight + self.route_weight + self.entity_weight
        if total > 1.0 + 1e-9:
            raise ValueError(f"weights must sum to at most 1.0, got {total:.3f}")
        return self


class ExtractionConfig(BaseModel):
    """Entity extraction configuration."""

    default_country_code: str = Field(
        default="1",
        pattern=r"^\d{1,3}$",
        description="Country calling code applied to local phone numbers",
    )
    name_confidence: float = Field(default=0.7, ge=0.0, le=1.0)
    cued_name_confidence: float = Field(
        default=0.85,
        ge=0.0,
        le=1.0,
        description="Confidence for names introduced by 'from', 'for', 'named', ...",
    )
