"""Pydantic models for speaker segments, entities and structured summaries."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Speaker(str, Enum):
    PHARMACIST = "Pharmacist"
    PATIENT = "Patient"


class TranscriptSegment(BaseModel):
    """A contiguous span of transcript text attributed to one speaker role."""

    model_config = ConfigDict(frozen=True)

    speaker: Speaker = Field(..., description="Speaker role at the time the segment was emitted")
    text: str = Field(..., min_length=1, description="Segment text, sentence-terminated")
    timestamp: int = Field(..., ge=0, description="Approximate start time in seconds")


class EntityCategory(BaseModel):
    """A named list of pharmacy terms found in a transcript."""

    model_config = ConfigDict(frozen=True)

    name: str
    items: list[str] = Field(default_factory=list)


class Medication(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    dosage: str = ""
    frequency: str = ""
    notes: str = ""

    @field_validator("dosage", "frequency", "notes", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value


NO_MEDICATIONS = Medication(name="No specific medications mentioned")

PLACEHOLDERS: dict[str, list] = {
    "key_topics": ["General consultation"],
    "medications": [NO_MEDICATIONS],
    "action_items": ["Review consultation notes"],
    "patient_concerns": ["General health discussion"],
    "pharmacist_recommendations": ["Follow prescribed regimen"],
}


class StructuredSummary(BaseModel):
    """Structured clinical summary of a pharmacy consultation.

    Field aliases follow the camelCase schema the language model is asked to
    return; either spelling is accepted on input. Use ``model_dump(by_alias=True)``
    to produce the vendor-shaped dict.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key_topics: list[str] = Field(default_factory=list, alias="keyTopics")
    medications: list[Medication] = Field(default_factory=list)
    action_items: list[str] = Field(default_factory=list, alias="actionItems")
    patient_concerns: list[str] = Field(default_factory=list, alias="patientConcerns")
    pharmacist_recommendations: list[str] = Field(
        default_factory=list, alias="pharmacistRecommendations"
    )

    def with_placeholders(self) -> "StructuredSummary":
        """Return a copy where every empty list holds its placeholder entry."""
        updates = {
            field: list(default)
            for field, default in PLACEHOLDERS.items()
            if not getattr(self, field)
        }
        if not updates:
            return self
        return self.model_copy(update=updates)

    def sections(self) -> list[tuple[str, list[str]]]:
        """Return (heading, display lines) pairs in rendering order."""
        return [
            ("Key Topics", list(self.key_topics)),
            ("Medications Mentioned", [format_medication(m) for m in self.medications]),
            ("Action Items", list(self.action_items)),
            ("Patient Concerns", list(self.patient_concerns)),
            ("Pharmacist Recommendations", list(self.pharmacist_recommendations)),
        ]


def format_medication(med: Medication) -> str:
    """Render a medication as 'name - dosage (frequency) - notes', skipping blanks."""
    line = med.name
    if med.dosage:
        line += f" - {med.dosage}"
    if med.frequency:
        line += f" ({med.frequency})"
    if med.notes:
        line += f" - {med.notes}"
    return line
