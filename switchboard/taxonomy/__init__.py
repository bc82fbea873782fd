"""Domain and intent taxonomy."""

from switchboard.taxonomy.enums import (
    Domain,
    EntityType,
    IntentCategory,
    IntentEffect,
    RiskLevel,
)
from switchboard.taxonomy.models import DomainMetadata, IntentDefinition
from switchboard.taxonomy.registry import TaxonomyRegistry

__all__ = [
    "Domain",
    "DomainMetadata",
    "EntityType",
    "IntentCategory",
    "IntentDefinition",
    "IntentEffect",
    "RiskLevel",
    "TaxonomyRegistry",
]
