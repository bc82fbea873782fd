"""Entity extraction: typed values from free text."""

from switchboard.extraction.dates import normalize_date, normalize_date_range, normalize_time
from switchboard.extraction.extractor import (
    entities_of_type,
    extract_entities,
    validate_required_entities,
)
from switchboard.extraction.models import ExtractedEntity, ExtractionResult, Span
from switchboard.extraction.normalizers import normalize_email, normalize_phone

__all__ = [
    "ExtractedEntity",
    "ExtractionResult",
    "Span",
    "entities_of_type",
    "extract_entities",
    "normalize_date",
    "normalize_date_range",
    "normalize_email",
    "normalize_phone",
    "normalize_time",
    "validate_required_entities",
]
