"""Registry construction and the process-wide registry instance.

Every catalog is built and validated here, in dependency order. A catalog
that breaks an invariant raises RegistryInvariantViolation out of
load_registries; nothing catches it, so a bad deploy fails at startup
instead of misrouting requests.
"""

from dataclasses import dataclass

from switchboard.config import Settings, get_settings
from switchboard.context import DOMAIN_CONTEXTS, ContextMap
from switchboard.observability.logging import get_logger
from switchboard.patterns import INTENT_PATTERNS, WORKFLOW_PATTERNS, PatternRegistry
from switchboard.prompts import PROMPT_TEMPLATES, PromptTemplateRegistry
from switchboard.taxonomy import TaxonomyRegistry
from switchboard.taxonomy.catalog import DOMAINS, INTENTS
from switchboard.workflows import TOOL_CATALOG, WORKFLOWS, WorkflowRegistry

logger = get_logger(__name__)


@dataclass(frozen=True)
class Registries:
    """All validated catalogs, shared read-only by every request."""

    taxonomy: TaxonomyRegistry
    patterns: PatternRegistry
    workflows: WorkflowRegistry
    context_map: ContextMap
    templates: PromptTemplateRegistry


# Registries shared by the process - built on first access
_registries: Registries | None = None


def load_registries(settings: Settings | None = None) -> Registries:
    """Build and validate every catalog.

    Args:
        settings: Settings to read limits from (defaults to get_settings())

    Returns:
        A fresh Registries instance

    Raises:
        RegistryInvariantViolation: a catalog failed validation
    """
    settings = settings or get_settings()

    taxonomy = TaxonomyRegistry(DOMAINS, INTENTS)
    workflows = WorkflowRegistry(WORKFLOWS, TOOL_CATALOG)
    patterns = PatternRegistry(
        (*INTENT_PATTERNS, *WORKFLOW_PATTERNS),
        taxonomy,
        workflows.ids,
        max_example_overlaps=settings.coverage.max_pattern_overlaps,
    )
    context_map = ContextMap(DOMAIN_CONTEXTS)
    templates = PromptTemplateRegistry(PROMPT_TEMPLATES, taxonomy, workflows, context_map, TOOL_CATALOG)

    logger.info(
        "registries_loaded",
        intents=len(taxonomy),
        patterns=len(patterns),
        workflows=len(workflows),
        context_steps=len(context_map),
        templates=len(templates),
    )
    return Registries(
        taxonomy=taxonomy,
        patterns=patterns,
        workflows=workflows,
        context_map=context_map,
        templates=templates,
    )


def get_registries() -> Registries:
    """Get the shared registries, loading them on first access."""
    global _registries
    if _registries is None:
        _registries = load_registries()
    return _registries


def reset_registries() -> None:
    """Drop the shared registries.

    Useful for testing to ensure fresh state between tests.
    """
    global _registries
    _registries = None
