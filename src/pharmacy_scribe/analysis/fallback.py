"""Keyword-derived summary used when the language model output does not parse."""

from __future__ import annotations

from .entities import vocabulary_hits
from .models import Medication, StructuredSummary
from .vocabulary import FALLBACK_MEDICATIONS


KEY_TOPIC_RULES: tuple[tuple[str, str], ...] = (
    ("medication", "Medication discussion"),
    ("side effect", "Side effects"),
    ("allergy", "Allergies"),
    ("dosage", "Dosage instructions"),
    ("refill", "Refill request"),
)

ACTION_ITEM_RULES: tuple[tuple[str, str], ...] = (
    ("follow up", "Schedule follow-up appointment"),
    ("refill", "Process medication refill"),
    ("call", "Call patient with updates"),
)

PATIENT_CONCERN_RULES: tuple[tuple[str, str], ...] = (
    ("pain", "Pain management"),
    ("side effect", "Medication side effects"),
    ("allergy", "Allergic reactions"),
)

RECOMMENDATION_RULES: tuple[tuple[str, str], ...] = (
    ("take with food", "Take medication with food"),
    ("avoid alcohol", "Avoid alcohol while taking medication"),
    ("monitor", "Monitor for side effects"),
)


def apply_rules(lowered: str, rules: tuple[tuple[str, str], ...]) -> list[str]:
    """Return the label of every rule whose trigger occurs in ``lowered``."""
    return [label for trigger, label in rules if trigger in lowered]


def build_fallback_summary(transcript: str) -> StructuredSummary:
    """Build a StructuredSummary from keyword hits in the full transcript.

    Every rule is checked independently against the whole transcript, so
    several labels can fire for one field. Fields with no hits get their
    placeholder entry.
    """
    lowered = (transcript or "").lower()
    medications = [
        Medication(name=name.capitalize())
        for name in vocabulary_hits(lowered, FALLBACK_MEDICATIONS)
    ]
    summary = StructuredSummary(
        key_topics=apply_rules(lowered, KEY_TOPIC_RULES),
        medications=medications,
        action_items=apply_rules(lowered, ACTION_ITEM_RULES),
        patient_concerns=apply_rules(lowered, PATIENT_CONCERN_RULES),
        pharmacist_recommendations=apply_rules(lowered, RECOMMENDATION_RULES),
    )
    return summary.with_placeholders()
