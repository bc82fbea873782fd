"""Pattern registry models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from switchboard.taxonomy.enums import Domain


class PatternPool(str, Enum):
    """Disjoint pattern pools.

    - INTENT: trigger phrases for single intents, used by the classifier
    - WORKFLOW: trigger phrases for multi-step workflows, used by the matcher
    """

    INTENT = "intent"
    WORKFLOW = "workflow"


class HitKind(str, Enum):
    """How a pattern set matched an utterance.

    - PHRASE: one of its trigger regexes matched
    - KEYWORD: none of its regexes matched but one of its keywords appears
    """

    PHRASE = "phrase"
    KEYWORD = "keyword"


class PatternDefinition(BaseModel):
    """A named set of trigger phrases for one classification target."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    pool: PatternPool
    target_id: str = Field(..., description="Intent id or workflow id this set recognizes")
    domain: Domain
    trigger_patterns: tuple[str, ...] = Field(
        default=(),
        description="Regular expression sources, matched case-insensitively",
    )
    keywords: tuple[str, ...] = Field(
        default=(),
        description="Whole-word cues that give a weaker keyword-only hit",
    )
    priority: int = Field(default=100, description="Lower runs first")
    examples: tuple[str, ...] = Field(
        default=(),
        description="Phrases this set must match and no other set may",
    )


class PatternHit(BaseModel):
    """Result of testing one pattern set against an utterance."""

    model_config = ConfigDict(frozen=True)

    pattern_id: str
    target_id: str
    domain: Domain
    kind: HitKind
    strength: float = Field(..., gt=0.0, le=1.0)
    matched_text: str


class PatternOverlap(BaseModel):
    """A phrase matched by more than one target in the same pool."""

    model_config = ConfigDict(frozen=True)

    phrase: str
    pattern_ids: tuple[str, ...]
    target_ids: tuple[str, ...]
