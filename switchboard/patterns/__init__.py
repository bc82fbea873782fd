"""Trigger-phrase pattern pools for intents and workflows."""

from switchboard.patterns.compiler import CompiledPattern, compile_pattern
from switchboard.patterns.intent_catalog import INTENT_PATTERNS
from switchboard.patterns.models import (
    HitKind,
    PatternDefinition,
    PatternHit,
    PatternOverlap,
    PatternPool,
)
from switchboard.patterns.overlaps import find_overlapping_patterns
from switchboard.patterns.registry import PatternRegistry
from switchboard.patterns.workflow_catalog import WORKFLOW_PATTERNS

__all__ = [
    "CompiledPattern",
    "HitKind",
    "INTENT_PATTERNS",
    "PatternDefinition",
    "PatternHit",
    "PatternOverlap",
    "PatternPool",
    "PatternRegistry",
    "WORKFLOW_PATTERNS",
    "compile_pattern",
    "find_overlapping_patterns",
]
