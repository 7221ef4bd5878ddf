"""Keyword and regex extraction of pharmacy entities from transcript text."""

from __future__ import annotations

import re

from .models import EntityCategory
from .vocabulary import (
    ALLERGY_RE,
    DOSAGE_RE,
    INTERACTION_RE,
    MEDICATIONS,
    SIDE_EFFECTS,
)


def vocabulary_hits(text: str, vocabulary: tuple[str, ...]) -> list[str]:
    """Return vocabulary entries contained in ``text``, in vocabulary order."""
    lowered = (text or "").lower()
    return [term for term in vocabulary if term in lowered]


def pattern_hits(text: str, pattern: re.Pattern[str]) -> list[str]:
    """Return every full match of ``pattern`` in order, keeping the input casing."""
    return [m.group(0) for m in pattern.finditer(text or "")]


def extract_entities(transcript: str) -> list[EntityCategory]:
    """Scan a transcript for medications, dosages, side effects, allergies and interactions.

    Category order is fixed regardless of where the matches occur, and a
    category with no matches is left out rather than returned empty.
    Medication and side-effect names come back lowercase, exactly as they
    appear in the vocabulary tables.
    """
    categories = [
        ("Medications", vocabulary_hits(transcript, MEDICATIONS)),
        ("Dosages", pattern_hits(transcript, DOSAGE_RE)),
        ("Side Effects", vocabulary_hits(transcript, SIDE_EFFECTS)),
        ("Allergies", pattern_hits(transcript, ALLERGY_RE)),
        ("Drug Interactions", pattern_hits(transcript, INTERACTION_RE)),
    ]
    return [EntityCategory(name=name, items=items) for name, items in categories if items]
