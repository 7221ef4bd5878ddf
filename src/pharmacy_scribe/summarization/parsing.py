"""Turn raw language-model text into a StructuredSummary."""

from __future__ import annotations

import json

from pydantic import ValidationError

from ..analysis.models import StructuredSummary
from ..errors import SummaryParseError


REQUIRED_KEYS = frozenset({
    "keyTopics",
    "medications",
    "actionItems",
    "patientConcerns",
    "pharmacistRecommendations",
})


def strip_code_fences(raw_text: str) -> str:
    """Remove a surrounding Markdown code fence (```json ... ```), if any."""
    text = (raw_text or "").strip()
    if text.startswith("```"):
        text = text.strip("`").strip()
        if text.lower().startswith("json"):
            text = text[4:].strip()
    return text


def parse_summary_response(raw_text: str) -> StructuredSummary:
    """Parse and validate a summary returned by the language model.

    Raises:
        SummaryParseError: if the text is not JSON, is not an object with
            every summary key, or fails model validation.
    """
    text = strip_code_fences(raw_text)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SummaryParseError(f"Summary is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise SummaryParseError(f"Summary must be a JSON object, got {type(payload).__name__}")

    missing = REQUIRED_KEYS - payload.keys()
    if missing:
        raise SummaryParseError(f"Summary is missing keys: {sorted(missing)}")

    try:
        summary = StructuredSummary.model_validate(payload)
    except ValidationError as exc:
        raise SummaryParseError(f"Summary does not match the schema: {exc}") from exc
    return summary.with_placeholders()
