"""Taxonomy models: domains and intent definitions."""

from pydantic import BaseModel, ConfigDict, Field

from switchboard.taxonomy.enums import (
    Domain,
    EntityType,
    IntentCategory,
    IntentEffect,
    RiskLevel,
)


class DomainMetadata(BaseModel):
    """Descriptive data about a domain and the UI routes that imply it."""

    model_config = ConfigDict(frozen=True)

    domain: Domain
    label: str
    description: str
    route_prefixes: tuple[str, ...] = Field(
        default=(),
        description="UI route prefixes whose pages default to this domain",
    )


class IntentDefinition(BaseModel):
    """A single recognizable user goal within a domain."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Globally unique intent id")
    domain: Domain
    name: str
    description: str
    category: IntentCategory
    required_entities: tuple[EntityType, ...] = Field(
        default=(),
        description="Entity types needed to act, in the order questions are asked",
    )
    optional_entities: tuple[EntityType, ...] = ()
    risk_level: RiskLevel = RiskLevel.LOW
    confirmation_required: bool = False
    effects: frozenset[IntentEffect] = frozenset()

    @property
    def high_risk(self) -> bool:
        """Whether the intent is classified as high risk."""
        return self.risk_level == RiskLevel.HIGH

    @property
    def label(self) -> str:
        """Qualified label used in logs and prompts."""
        return f"{self.domain.value}.{self.id}"
