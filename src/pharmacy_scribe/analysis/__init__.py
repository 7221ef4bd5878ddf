from .entities import extract_entities
from .fallback import build_fallback_summary
from .models import (
    EntityCategory,
    Medication,
    Speaker,
    StructuredSummary,
    TranscriptSegment,
)
from .segmenter import segment

__all__ = [
    "extract_entities",
    "build_fallback_summary",
    "segment",
    "EntityCategory",
    "Medication",
    "Speaker",
    "StructuredSummary",
    "TranscriptSegment",
]
