"""Lookup over the declared context of every domain and step.

Pure lookups, no I/O. Fetching the values is the data-loading layer's job.
"""

from collections.abc import Iterable
from types import MappingProxyType

from switchboard.context.models import (
    ContextField,
    ContextSummary,
    DomainContext,
    ProcessStepContext,
    SourceType,
)
from switchboard.errors import RegistryInvariantViolation
from switchboard.observability.logging import get_logger
from switchboard.taxonomy.enums import Domain

logger = get_logger(__name__)


class ContextMap:
    """Immutable map of domain -> step -> context fields.

    Load-time checks:
        - one DomainContext per domain, step ids unique within a domain
        - keys unique within a step, shared fields included
        - every field and step belongs to the domain that owns it
        - depends_on names keys visible to the same step
    """

    def __init__(self, domains: Iterable[DomainContext]) -> None:
        self._domains_list = tuple(domains)
        violations = self._validate(self._domains_list)
        if violations:
            raise RegistryInvariantViolation("context", violations)

        self._domains = MappingProxyType({context.domain: context for context in self._domains_list})
        self._steps = MappingProxyType({
            (context.domain, step.step): step
            for context in self._domains_list
            for step in context.steps
        })
        logger.debug("context_map_loaded", domains=len(self._domains), steps=len(self._steps))

    @staticmethod
    def _validate(domains: tuple[DomainContext, ...]) -> list[str]:
        violations: list[str] = []
        seen_domains: set[Domain] = set()

        for context in domains:
            if context.domain in seen_domains:
                violations.append(f"duplicate domain context: {context.domain.value}")
            seen_domains.add(context.domain)

            for shared in context.shared_fields:
                if shared.domain != context.domain:
                    violations.append(
                        f"shared field {shared.key} declares domain {shared.domain.value} "
                        f"inside {context.domain.value}"
                    )

            seen_steps: set[str] = set()
            for step in context.steps:
                label = f"{context.domain.value}/{step.step}"
                if step.step in seen_steps:
                    violations.append(f"duplicate step: {label}")
                seen_steps.add(step.step)

                if step.domain != context.domain:
                    violations.append(f"step {label} declares domain {step.domain.value}")

                fields = (*context.shared_fields, *step.fields)
                keys: set[str] = set()
                for field in fields:
                    if field.key in keys:
                        violations.append(f"duplicate key {field.key} in {label}")
                    keys.add(field.key)
                    if field.domain != context.domain:
                        violations.append(
                            f"field {field.key} in {label} declares domain {field.domain.value}"
                        )

                for field in fields:
                    for dependency in field.depends_on:
                        if dependency not in keys:
                            violations.append(
                                f"field {field.key} in {label} depends on unknown key {dependency}"
                            )
        return violations

    @property
    def domains(self) -> tuple[DomainContext, ...]:
        return self._domains_list

    def get_domain(self, domain: Domain) -> DomainContext | None:
        return self._domains.get(domain)

    def get_process_step(self, domain: Domain, step: str) -> ProcessStepContext | None:
        """The step as declared, without the domain's shared fields."""
        return self._steps.get((domain, step))

    def steps_for(self, domain: Domain) -> tuple[str, ...]:
        context = self._domains.get(domain)
        if context is None:
            return ()
        return tuple(step.step for step in context.steps)

    def get_required_context(self, domain: Domain, step: str) -> ProcessStepContext:
        """Everything a prompt for this step needs: shared fields, then step fields.

        An unknown step gets the domain's shared fields only; an unknown
        domain gets no fields.
        """
        context = self._domains.get(domain)
        shared = context.shared_fields if context is not None else ()
        declared = self._steps.get((domain, step))
        if declared is None:
            return ProcessStepContext(domain=domain, step=step, fields=shared)
        return declared.model_copy(update={"fields": (*shared, *declared.fields)})

    def get_all_context_for_step(self, domain: Domain, step: str) -> tuple[ContextField, ...]:
        """Flat field list for a declared step; empty for unknown steps."""
        if (domain, step) not in self._steps:
            return ()
        return self.get_required_context(domain, step).fields

    def declares(self, domain: Domain, step: str, key: str) -> bool:
        """Whether the step (shared fields included) declares the key."""
        return key in self.get_required_context(domain, step).keys

    @staticmethod
    def group_context_by_source(
        context: ProcessStepContext | Iterable[ContextField],
    ) -> dict[SourceType, tuple[ContextField, ...]]:
        """Partition fields by source type, in first-seen order."""
        fields = context.fields if isinstance(context, ProcessStepContext) else tuple(context)
        groups: dict[SourceType, list[ContextField]] = {}
        for field in fields:
            groups.setdefault(field.source_type, []).append(field)
        return {source: tuple(grouped) for source, grouped in groups.items()}

    def find_steps_using_field(self, key: str) -> list[tuple[Domain, str]]:
        """(domain, step) pairs whose context includes the key.

        A shared field counts for every step of its domain.
        """
        found: list[tuple[Domain, str]] = []
        for context in self._domains_list:
            shared = any(field.key == key for field in context.shared_fields)
            for step in context.steps:
                if shared or any(field.key == key for field in step.fields):
                    found.append((context.domain, step.step))
        return found

    def generate_context_summary(self, domain: Domain | None = None) -> dict[Domain, ContextSummary]:
        """Step and field counts per domain, or for one domain."""
        summary: dict[Domain, ContextSummary] = {}
        for context in self._domains_list:
            if domain is not None and context.domain != domain:
                continue
            total = 0
            required = 0
            for step in context.steps:
                fields = (*context.shared_fields, *step.fields)
                total += len(fields)
                required += sum(1 for field in fields if field.required)
            summary[context.domain] = ContextSummary(
                steps=len(context.steps),
                total_fields=total,
                required_fields=required,
            )
        return summary

    def __len__(self) -> int:
        return len(self._steps)
