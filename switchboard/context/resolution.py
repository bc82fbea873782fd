"""Resolve a step's declared context through the data-loading layer."""

from typing import Any

from switchboard.context.models import ProcessStepContext
from switchboard.errors import MissingRequiredContext
from switchboard.interfaces import ContextResolver
from switchboard.observability.logging import get_logger

logger = get_logger(__name__)


def resolve_step_context(context: ProcessStepContext, resolver: ContextResolver) -> dict[str, Any]:
    """Fetch every field of a step in one resolver call.

    Missing optional fields are filled with their empty value. A missing
    required field (absent or None) aborts the build.

    Args:
        context: Step context from the context map
        resolver: Data-loading layer

    Returns:
        Key to value for every field of the step

    Raises:
        MissingRequiredContext: a required field was not resolved
    """
    resolved = dict(resolver.resolve(context.fields))

    values: dict[str, Any] = {}
    missing: list[str] = []
    for field in context.fields:
        value = resolved.get(field.key)
        if value is None:
            if field.required:
                missing.append(field.key)
                continue
            value = field.empty_value()
        values[field.key] = value

    if missing:
        logger.info(
            "context_resolution_incomplete",
            domain=context.domain.value,
            step=context.step,
            missing_keys=missing,
        )
        raise MissingRequiredContext(f"{context.domain.value}/{context.step}", missing)

    return values
