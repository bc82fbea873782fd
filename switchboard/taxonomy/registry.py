"""Immutable domain and intent registry."""

from collections.abc import Iterable
from types import MappingProxyType

from switchboard.errors import RegistryInvariantViolation
from switchboard.observability.logging import get_logger
from switchboard.taxonomy.enums import Domain, IntentEffect
from switchboard.taxonomy.models import DomainMetadata, IntentDefinition

logger = get_logger(__name__)

_EFFECTS_NEEDING_GUARD = frozenset({
    IntentEffect.MOVES_MONEY,
    IntentEffect.EXTERNAL_COMMUNICATION,
})


class TaxonomyRegistry:
    """Read-only catalog of domains and intents.

    Built once from static definitions, validated on construction and never
    mutated afterwards. All lookups go through precomputed maps.
    """

    def __init__(
        self,
        domains: Iterable[DomainMetadata],
        intents: Iterable[IntentDefinition],
    ) -> None:
        self._domains = tuple(domains)
        self._intents = tuple(intents)

        violations = self._validate()
        if violations:
            raise RegistryInvariantViolation("taxonomy", violations)

        self._metadata = MappingProxyType({meta.domain: meta for meta in self._domains})
        self._by_id = MappingProxyType({intent.id: intent for intent in self._intents})
        self._order = MappingProxyType(
            {intent.id: index for index, intent in enumerate(self._intents)}
        )

        grouped: dict[Domain, list[IntentDefinition]] = {meta.domain: [] for meta in self._domains}
        for intent in self._intents:
            grouped[intent.domain].append(intent)
        self._by_domain = MappingProxyType(
            {domain: tuple(members) for domain, members in grouped.items()}
        )

        self._routes = MappingProxyType({
            prefix.rstrip("/") or "/": meta.domain
            for meta in self._domains
            for prefix in meta.route_prefixes
        })
        self._high_risk = tuple(intent for intent in self._intents if intent.high_risk)
        self._confirmation = tuple(
            intent for intent in self._intents if intent.confirmation_required
        )

        logger.debug(
            "taxonomy_loaded",
            domain_count=len(self._domains),
            intent_count=len(self._intents),
        )

    def _validate(self) -> list[str]:
        violations: list[str] = []

        seen_domains: set[Domain] = set()
        for meta in self._domains:
            if meta.domain in seen_domains:
                violations.append(f"duplicate domain metadata: {meta.domain.value}")
            seen_domains.add(meta.domain)

        seen_prefixes: dict[str, Domain] = {}
        for meta in self._domains:
            for prefix in meta.route_prefixes:
                if not prefix.startswith("/"):
                    violations.append(f"route prefix must start with '/': {prefix!r}")
                normalized = prefix.rstrip("/") or "/"
                owner = seen_prefixes.get(normalized)
                if owner is not None and owner != meta.domain:
                    violations.append(
                        f"route prefix {prefix!r} claimed by {owner.value} and {meta.domain.value}"
                    )
                seen_prefixes[normalized] = meta.domain

        seen_ids: set[str] = set()
        populated: set[Domain] = set()
        for intent in self._intents:
            if intent.id in seen_ids:
                violations.append(f"duplicate intent id: {intent.id}")
            seen_ids.add(intent.id)
            populated.add(intent.domain)

            if intent.domain not in seen_domains:
                violations.append(f"intent {intent.id} uses unregistered domain {intent.domain.value}")

            if len(set(intent.required_entities)) != len(intent.required_entities):
                violations.append(f"intent {intent.id} repeats a required entity type")
            overlap = set(intent.required_entities) & set(intent.optional_entities)
            if overlap:
                names = sorted(entity.value for entity in overlap)
                violations.append(f"intent {intent.id} lists {names} as required and optional")

            guarded = intent.effects & _EFFECTS_NEEDING_GUARD
            if guarded and not (intent.high_risk or intent.confirmation_required):
                violations.append(
                    f"intent {intent.id} has effects {sorted(e.value for e in guarded)} "
                    "but is neither high risk nor confirmation required"
                )

        for meta in self._domains:
            if meta.domain not in populated:
                violations.append(f"domain {meta.domain.value} has no intents")

        return violations

    @property
    def domains(self) -> tuple[Domain, ...]:
        """Registered domains in registration order."""
        return tuple(meta.domain for meta in self._domains)

    @property
    def intents(self) -> tuple[IntentDefinition, ...]:
        """All intents in registration order."""
        return self._intents

    def get_intent(self, intent_id: str) -> IntentDefinition | None:
        """Look up an intent by id."""
        return self._by_id.get(intent_id)

    def get_intents_by_domain(self, domain: Domain) -> tuple[IntentDefinition, ...]:
        """Intents of one domain in registration order."""
        return self._by_domain.get(domain, ())

    def get_domain_metadata(self, domain: Domain) -> DomainMetadata | None:
        """Descriptive metadata for a domain."""
        return self._metadata.get(domain)

    def get_domain_from_route(self, route: str | None) -> Domain | None:
        """Map a UI route to the domain of its longest registered prefix.

        Prefixes match whole path segments only, so "/time" would not claim
        "/timesheets". Query strings and fragments are ignored.
        """
        if not route:
            return None

        path = route.split("?", 1)[0].split("#", 1)[0].strip()
        segments = [segment for segment in path.split("/") if segment]

        for depth in range(len(segments), 0, -1):
            candidate = "/" + "/".join(segments[:depth])
            domain = self._routes.get(candidate)
            if domain is not None:
                return domain

        return self._routes.get("/")

    def get_high_risk_intents(self) -> tuple[IntentDefinition, ...]:
        """Intents whose risk level is high."""
        return self._high_risk

    def get_confirmation_required_intents(self) -> tuple[IntentDefinition, ...]:
        """Intents that need explicit user confirmation before acting."""
        return self._confirmation

    def registration_index(self, intent_id: str) -> int:
        """Position of the intent in registration order (tie-break key)."""
        return self._order[intent_id]

    def __contains__(self, intent_id: object) -> bool:
        return intent_id in self._by_id

    def __len__(self) -> int:
        return len(self._intents)
