"""Entity extraction models."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from switchboard.config.models import ExtractionConfig
from switchboard.taxonomy.enums import EntityType

EntityValue = str | int | float


class Span(BaseModel):
    """Half-open character range [start, end) within the utterance."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)

    def overlaps(self, other: "Span") -> bool:
        """Whether the two ranges share at least one character."""
        return self.start < other.end and other.start < self.end


class ExtractedEntity(BaseModel):
    """A typed value found in free text.

    `value` is a normalized primitive: ISO dates, HH:MM times, integer
    cents for money, integer minutes for durations, canonical phone and
    identifier strings.
    """

    model_config = ConfigDict(frozen=True)

    type: EntityType
    raw_span: str
    value: EntityValue
    confidence: float = Field(..., ge=0.0, le=1.0)
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)

    @property
    def span(self) -> Span:
        """Character range the entity was read from."""
        return Span(start=self.start, end=self.end)


class ExtractionResult(BaseModel):
    """Entities found in one utterance, ordered by position."""

    model_config = ConfigDict(frozen=True)

    entities: tuple[ExtractedEntity, ...] = ()
    coverage: tuple[Span, ...] = Field(
        default=(),
        description="Merged character ranges claimed by an entity",
    )

    def of_type(self, entity_type: EntityType) -> tuple[ExtractedEntity, ...]:
        """Entities of one type in text order."""
        return tuple(entity for entity in self.entities if entity.type == entity_type)

    def first(self, entity_type: EntityType) -> ExtractedEntity | None:
        """The earliest entity of a type, if any."""
        for entity in self.entities:
            if entity.type == entity_type:
                return entity
        return None

    def types(self) -> frozenset[EntityType]:
        """Distinct entity types present."""
        return frozenset(entity.type for entity in self.entities)


@dataclass(frozen=True)
class ExtractionContext:
    """Inputs shared by every per-type extractor for one call."""

    now: datetime
    config: ExtractionConfig
