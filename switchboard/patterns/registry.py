"""Immutable registry of compiled pattern pools."""

from collections.abc import Collection, Iterable
from types import MappingProxyType

from switchboard.errors import RegistryInvariantViolation
from switchboard.observability.logging import get_logger
from switchboard.patterns.compiler import CompiledPattern, compile_pattern
from switchboard.patterns.models import PatternDefinition, PatternOverlap, PatternPool
from switchboard.patterns.overlaps import find_overlapping_patterns
from switchboard.taxonomy.enums import Domain
from switchboard.taxonomy.registry import TaxonomyRegistry

logger = get_logger(__name__)


class PatternRegistry:
    """Both pattern pools, compiled once and kept in priority order.

    Load-time checks:
        - pattern ids are unique
        - intent targets exist in the taxonomy and share its domain
        - workflow targets are known workflow ids
        - every set has at least one trigger regex and all of them compile
        - every declared example matches its own set
        - declared examples trigger more than one target at most
          `max_example_overlaps` times per pool
    """

    def __init__(
        self,
        definitions: Iterable[PatternDefinition],
        taxonomy: TaxonomyRegistry,
        workflow_ids: Collection[str],
        max_example_overlaps: int = 0,
    ) -> None:
        self._definitions = tuple(definitions)
        violations: list[str] = []

        compiled: list[CompiledPattern] = []
        for definition in self._definitions:
            violations.extend(self._check_target(definition, taxonomy, workflow_ids))
            try:
                compiled.append(compile_pattern(definition))
            except RegistryInvariantViolation as exc:
                violations.extend(exc.violations)

        seen: set[str] = set()
        for definition in self._definitions:
            if definition.id in seen:
                violations.append(f"duplicate pattern id: {definition.id}")
            seen.add(definition.id)

        # Stable sort keeps registration order among equal priorities.
        ordered = sorted(compiled, key=lambda pattern: pattern.definition.priority)
        self._pools = MappingProxyType({
            pool: tuple(pattern for pattern in ordered if pattern.definition.pool == pool)
            for pool in PatternPool
        })
        self._by_id = MappingProxyType({pattern.id: pattern for pattern in ordered})

        for pattern in ordered:
            for example in pattern.definition.examples:
                if not pattern.matches_phrase(example):
                    violations.append(f"pattern {pattern.id} does not match its example {example!r}")

        for pool, patterns in self._pools.items():
            overlaps = find_overlapping_patterns(patterns)
            if len(overlaps) > max_example_overlaps:
                violations.extend(
                    f"{pool.value} example {overlap.phrase!r} matches {list(overlap.target_ids)}"
                    for overlap in overlaps
                )

        if violations:
            raise RegistryInvariantViolation("patterns", violations)

        logger.debug(
            "patterns_loaded",
            intent_patterns=len(self._pools[PatternPool.INTENT]),
            workflow_patterns=len(self._pools[PatternPool.WORKFLOW]),
        )

    @staticmethod
    def _check_target(
        definition: PatternDefinition,
        taxonomy: TaxonomyRegistry,
        workflow_ids: Collection[str],
    ) -> list[str]:
        if definition.pool == PatternPool.WORKFLOW:
            if definition.target_id not in workflow_ids:
                return [f"pattern {definition.id} targets unknown workflow {definition.target_id}"]
            return []

        intent = taxonomy.get_intent(definition.target_id)
        if intent is None:
            return [f"pattern {definition.id} targets unknown intent {definition.target_id}"]
        if intent.domain != definition.domain:
            return [
                f"pattern {definition.id} declares domain {definition.domain.value} "
                f"but intent {intent.id} is in {intent.domain.value}"
            ]
        return []

    def get_pool(self, pool: PatternPool) -> tuple[CompiledPattern, ...]:
        """Compiled patterns of one pool in priority order."""
        return self._pools[pool]

    def get(self, pattern_id: str) -> CompiledPattern | None:
        return self._by_id.get(pattern_id)

    def patterns_for_domain(
        self,
        domain: Domain,
        pool: PatternPool = PatternPool.INTENT,
    ) -> tuple[CompiledPattern, ...]:
        """Patterns of a pool whose domain matches, in priority order."""
        return tuple(pattern for pattern in self._pools[pool] if pattern.definition.domain == domain)

    def patterns_for_target(self, target_id: str) -> tuple[CompiledPattern, ...]:
        """Every pattern set recognizing the given intent or workflow."""
        return tuple(pattern for pattern in self._by_id.values() if pattern.target_id == target_id)

    def find_overlapping_patterns(
        self,
        pool: PatternPool,
        phrases: Iterable[str] | None = None,
    ) -> list[PatternOverlap]:
        """Phrases matched by more than one target in the pool."""
        return find_overlapping_patterns(self._pools[pool], phrases)

    def __len__(self) -> int:
        return len(self._by_id)
