"""Entity extraction pipeline.

Runs every per-type extractor and resolves overlaps by claiming spans in
a fixed priority order: a candidate that overlaps an already claimed span
is dropped. Within one priority level longer spans are claimed first.
"""

from collections.abc import Iterable
from datetime import datetime

from switchboard.config.models import ExtractionConfig
from switchboard.extraction.extractors import (
    Extractor,
    extract_addresses,
    extract_date_ranges,
    extract_dates,
    extract_durations,
    extract_emails,
    extract_frequencies,
    extract_generic_references,
    extract_money,
    extract_names,
    extract_notes,
    extract_payment_methods,
    extract_percentages,
    extract_phones,
    extract_times,
    extract_typed_identifiers,
)
from switchboard.extraction.models import (
    ExtractedEntity,
    ExtractionContext,
    ExtractionResult,
    Span,
)
from switchboard.observability.logging import get_logger
from switchboard.taxonomy.enums import EntityType
from switchboard.taxonomy.models import IntentDefinition

logger = get_logger(__name__)

# Claim order. Earlier extractors win overlapping spans.
EXTRACTORS: tuple[Extractor, ...] = (
    extract_notes,
    extract_emails,
    extract_typed_identifiers,
    extract_phones,
    extract_money,
    extract_date_ranges,
    extract_dates,
    extract_times,
    extract_durations,
    extract_percentages,
    extract_frequencies,
    extract_payment_methods,
    extract_addresses,
    extract_generic_references,
    extract_names,
)


def extract_entities(
    text: str,
    now: datetime,
    config: ExtractionConfig | None = None,
) -> ExtractionResult:
    """Extract typed entities from free text.

    Args:
        text: The user's utterance
        now: Reference instant for relative dates; the wall clock is never read
        config: Extraction settings (defaults when omitted)

    Returns:
        Entities ordered by position plus the merged spans they cover
    """
    ctx = ExtractionContext(now=now, config=config or ExtractionConfig())

    candidates: list[tuple[int, int, int, int, ExtractedEntity]] = []
    sequence = 0
    for priority, extractor in enumerate(EXTRACTORS):
        for entity in extractor(text, ctx):
            if entity.end <= entity.start:
                continue
            candidates.append(
                (priority, entity.start - entity.end, entity.start, sequence, entity)
            )
            sequence += 1

    claimed: list[ExtractedEntity] = []
    for *_, entity in sorted(candidates, key=lambda candidate: candidate[:4]):
        if any(entity.span.overlaps(other.span) for other in claimed):
            continue
        claimed.append(entity)

    entities = tuple(sorted(claimed, key=lambda entity: (entity.start, entity.end)))

    logger.debug(
        "entities_extracted",
        entity_count=len(entities),
        entity_types=[entity.type.value for entity in entities],
    )

    return ExtractionResult(entities=entities, coverage=merge_spans(entities))


def merge_spans(entities: Iterable[ExtractedEntity]) -> tuple[Span, ...]:
    """Merge the character ranges of entities into disjoint sorted spans."""
    merged: list[Span] = []
    for span in sorted((entity.span for entity in entities), key=lambda s: (s.start, s.end)):
        if merged and span.start <= merged[-1].end:
            last = merged[-1]
            merged[-1] = Span(start=last.start, end=max(last.end, span.end))
        else:
            merged.append(span)
    return tuple(merged)


def entities_of_type(
    entities: Iterable[ExtractedEntity],
    entity_type: EntityType,
) -> list[ExtractedEntity]:
    """Entities of one type, in text order."""
    return sorted(
        (entity for entity in entities if entity.type == entity_type),
        key=lambda entity: entity.start,
    )


def validate_required_entities(
    intent: IntentDefinition,
    entities: Iterable[ExtractedEntity],
) -> list[EntityType]:
    """Return the intent's required entity types that are not present.

    The result keeps the intent's required-list order so clarification
    questions are asked in a stable sequence.
    """
    present = {entity.type for entity in entities}
    return [entity_type for entity_type in intent.required_entities if entity_type not in present]
