"""Fixed vocabularies and patterns shared by the keyword-based analysers."""

from __future__ import annotations

import re


MEDICATIONS: tuple[str, ...] = (
    "aspirin",
    "ibuprofen",
    "acetaminophen",
    "amoxicillin",
    "metformin",
    "lisinopril",
    "atorvastatin",
    "omeprazole",
    "albuterol",
    "prednisone",
    "warfarin",
    "insulin",
    "morphine",
    "oxycodone",
    "hydrocodone",
)

# The fallback summary only ever scanned the first ten names.
FALLBACK_MEDICATIONS: tuple[str, ...] = MEDICATIONS[:10]

SIDE_EFFECTS: tuple[str, ...] = (
    "nausea",
    "dizziness",
    "headache",
    "fatigue",
    "diarrhea",
    "constipation",
    "rash",
    "itching",
    "swelling",
    "shortness of breath",
    "chest pain",
    "irregular heartbeat",
    "fever",
    "chills",
    "sore throat",
)

DOSAGE_RE = re.compile(r"[0-9]+\s*(?:mg|mcg|g|ml|tablet|capsule|dose|puff)", re.IGNORECASE)

# Middle spans are non-greedy: a match ends at the first allergen or drug word.
ALLERGY_RE = re.compile(
    r"(?:allergic|allergy|reaction).*?(?:penicillin|sulfa|aspirin|latex|peanut|shellfish)",
    re.IGNORECASE,
)
INTERACTION_RE = re.compile(
    r"(?:interaction|interact|conflict).*?(?:medication|drug|medicine)",
    re.IGNORECASE,
)

QUESTION_CUES: tuple[str, ...] = ("what", "how", "when", "why", "can you", "could you")
PHARMACIST_CUES: tuple[str, ...] = (
    "dosage",
    "side effect",
    "medication",
    "prescription",
    "pharmacy",
)
