"""Test factories for creating test data."""

from tests.factories.registries import (
    ContextFieldFactory,
    IntentFactory,
    PatternFactory,
    StepFactory,
    TemplateFactory,
    WorkflowFactory,
    build_registries,
)

__all__ = [
    "ContextFieldFactory",
    "IntentFactory",
    "PatternFactory",
    "StepFactory",
    "TemplateFactory",
    "WorkflowFactory",
    "build_registries",
]
