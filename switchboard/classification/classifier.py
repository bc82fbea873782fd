"""Rule-based intent classifier."""

from dataclasses import dataclass

from switchboard.classification.models import (
    ClassificationRequest,
    ClassifiedIntent,
    IntentAlternative,
)
from switchboard.config.models import ClassifierConfig, ExtractionConfig
from switchboard.extraction.extractor import extract_entities, validate_required_entities
from switchboard.extraction.models import ExtractedEntity
from switchboard.observability.logging import get_logger
from switchboard.patterns.models import PatternHit, PatternPool
from switchboard.patterns.registry import PatternRegistry
from switchboard.taxonomy.enums import Domain
from switchboard.taxonomy.models import IntentDefinition
from switchboard.taxonomy.registry import TaxonomyRegistry

logger = get_logger(__name__)


@dataclass(frozen=True)
class _Candidate:
    intent: IntentDefinition
    hit: PatternHit
    agreement: float
    overlap: float
    order: int

    @property
    def rank(self) -> tuple[float, float, float, int]:
        return (-self.hit.strength, -self.agreement, -self.overlap, self.order)


def entity_overlap(intent: IntentDefinition, entities: tuple[ExtractedEntity, ...]) -> float:
    """Fraction of the intent's required entity types present (1.0 when none required)."""
    if not intent.required_entities:
        return 1.0
    present = {entity.type for entity in entities}
    found = sum(1 for entity_type in intent.required_entities if entity_type in present)
    return found / len(intent.required_entities)


class IntentClassifier:
    """Maps an utterance to at most one intent.

    Candidates are ranked by, in order: pattern match strength, agreement
    with the domain implied by the route, overlap between extracted
    entities and the intent's required entities, and finally intent
    registration order. The route is a preference only: a phrase hit in
    another domain beats a keyword hit (or no hit) in the route's domain.
    """

    def __init__(
        self,
        taxonomy: TaxonomyRegistry,
        patterns: PatternRegistry,
        config: ClassifierConfig | None = None,
        extraction_config: ExtractionConfig | None = None,
    ) -> None:
        self._taxonomy = taxonomy
        self._patterns = patterns
        self._config = config or ClassifierConfig()
        self._extraction_config = extraction_config or ExtractionConfig()

    def classify(self, request: ClassificationRequest) -> ClassifiedIntent:
        """Classify one utterance.

        Args:
            request: Text, optional route and the reference instant

        Returns:
            The best candidate, or an unclassified result when nothing matched
        """
        extraction = extract_entities(request.text, request.now, self._extraction_config)
        entities = extraction.entities
        route_domain = self._taxonomy.get_domain_from_route(request.route)

        candidates = self._candidates(request.text, entities, route_domain)
        if not candidates:
            logger.debug(
                "intent_unclassified",
                route_domain=route_domain.value if route_domain else None,
                entity_count=len(entities),
            )
            return ClassifiedIntent(
                text=request.text,
                entities=entities,
                route_domain=route_domain,
            )

        best, *rest = candidates
        intent = best.intent
        missing = validate_required_entities(intent, entities)
        confidence = self._confidence(best)

        alternatives = tuple(
            IntentAlternative(
                intent_id=candidate.intent.id,
                intent_name=candidate.intent.name,
                domain=candidate.intent.domain,
                confidence=self._confidence(candidate),
            )
            for candidate in rest[: self._config.max_alternatives]
        )

        logger.debug(
            "intent_classified",
            intent_id=intent.id,
            domain=intent.domain.value,
            confidence=round(confidence, 3),
            match_kind=best.hit.kind.value,
            route_domain=route_domain.value if route_domain else None,
            missing_required=[entity_type.value for entity_type in missing],
        )

        return ClassifiedIntent(
            text=request.text,
            intent_id=intent.id,
            intent_name=intent.name,
            domain=intent.domain,
            confidence=confidence,
            entities=entities,
            missing_required=tuple(missing),
            confirmation_required=intent.confirmation_required,
            matched_pattern_id=best.hit.pattern_id,
            match_kind=best.hit.kind,
            route_domain=route_domain,
            alternatives=alternatives,
        )

    def _candidates(
        self,
        text: str,
        entities: tuple[ExtractedEntity, ...],
        route_domain: Domain | None,
    ) -> list[_Candidate]:
        best_per_intent: dict[str, _Candidate] = {}
        for pattern in self._patterns.get_pool(PatternPool.INTENT):
            hit = pattern.match(text, self._config.keyword_strength)
            if hit is None:
                continue

            intent = self._taxonomy.get_intent(hit.target_id)
            if intent is None:
                continue

            candidate = _Candidate(
                intent=intent,
                hit=hit,
                agreement=1.0 if intent.domain == route_domain else 0.0,
                overlap=entity_overlap(intent, entities),
                order=self._taxonomy.registration_index(intent.id),
            )
            current = best_per_intent.get(intent.id)
            if current is None or candidate.rank < current.rank:
                best_per_intent[intent.id] = candidate

        return sorted(best_per_intent.values(), key=lambda candidate: candidate.rank)

    def _confidence(self, candidate: _Candidate) -> float:
        score = (
            self._config.pattern_weight * candidate.hit.strength
            + self._config.route_weight * candidate.agreement
            + self._config.entity_weight * candidate.overlap
        )
        return min(1.0, max(0.0, score))
