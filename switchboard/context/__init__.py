"""Context declarations and resolution."""

from switchboard.context.catalog import DOMAIN_CONTEXTS
from switchboard.context.context_map import ContextMap
from switchboard.context.models import (
    ContextField,
    ContextPriority,
    ContextSummary,
    DomainContext,
    ProcessStepContext,
    SourceType,
    ValueKind,
)
from switchboard.context.resolution import resolve_step_context

__all__ = [
    "ContextField",
    "ContextMap",
    "ContextPriority",
    "ContextSummary",
    "DOMAIN_CONTEXTS",
    "DomainContext",
    "ProcessStepContext",
    "SourceType",
    "ValueKind",
    "resolve_step_context",
]
