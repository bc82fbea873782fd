"""Classification request and result models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from switchboard.errors import NoIntentMatch
from switchboard.extraction.models import ExtractedEntity
from switchboard.patterns.models import HitKind
from switchboard.taxonomy.enums import Domain, EntityType


class ClassificationRequest(BaseModel):
    """A single utterance from the host."""

    model_config = ConfigDict(frozen=True)

    text: str
    route: str | None = Field(
        default=None,
        description="Current UI route, used as a soft domain preference",
    )
    now: datetime = Field(..., description="Reference instant for relative dates")


class IntentAlternative(BaseModel):
    """A runner-up intent and its confidence."""

    model_config = ConfigDict(frozen=True)

    intent_id: str
    intent_name: str
    domain: Domain
    confidence: float = Field(..., ge=0.0, le=1.0)


class ClassifiedIntent(BaseModel):
    """Best-guess intent for an utterance.

    Created per request and never persisted. An utterance no pattern set
    recognizes yields an explicit unclassified value (intent_id is None),
    never an arbitrary default intent.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    intent_id: str | None = None
    intent_name: str | None = None
    domain: Domain | None = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    entities: tuple[ExtractedEntity, ...] = ()
    missing_required: tuple[EntityType, ...] = ()
    confirmation_required: bool = False
    matched_pattern_id: str | None = None
    match_kind: HitKind | None = None
    route_domain: Domain | None = None
    alternatives: tuple[IntentAlternative, ...] = ()

    @property
    def is_unclassified(self) -> bool:
        return self.intent_id is None

    def require_intent(self) -> str:
        """Return the intent id.

        Raises:
            NoIntentMatch: the utterance was not classified
        """
        if self.intent_id is None:
            raise NoIntentMatch(self.text)
        return self.intent_id
