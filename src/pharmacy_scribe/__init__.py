"""Pharmacy consultation scribe: transcription, speaker segmentation, entity
extraction, structured summaries and document export."""

from .analysis import (
    EntityCategory,
    Medication,
    Speaker,
    StructuredSummary,
    TranscriptSegment,
    build_fallback_summary,
    extract_entities,
    segment,
)

__version__ = "0.1.0"

__all__ = [
    "EntityCategory",
    "Medication",
    "Speaker",
    "StructuredSummary",
    "TranscriptSegment",
    "build_fallback_summary",
    "extract_entities",
    "segment",
]
