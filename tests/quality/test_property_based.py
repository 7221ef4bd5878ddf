"""Property-based tests using Hypothesis.

Property-based testing generates hundreds of random inputs and verifies that
invariants hold for all of them. This catches edge cases that hand-written
example tests miss: empty strings, unicode, runs of punctuation, very long
inputs.

These tests do NOT mock anything; they test pure functions directly.
"""

from __future__ import annotations

import math
import string

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from pharmacy_scribe.analysis.entities import extract_entities
from pharmacy_scribe.analysis.fallback import build_fallback_summary
from pharmacy_scribe.analysis.models import Medication, Speaker, StructuredSummary
from pharmacy_scribe.analysis.segmenter import SECONDS_PER_SENTENCE, segment, split_sentences
from pharmacy_scribe.analysis.vocabulary import MEDICATIONS
from pharmacy_scribe.export import render_summary_text
from pharmacy_scribe.transcription.audio import SUPPORTED_MIMETYPES, mimetype_for

pytestmark = pytest.mark.quality

CATEGORY_ORDER = ["Medications", "Dosages", "Side Effects", "Allergies", "Drug Interactions"]

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

# Free transcript text: letters, digits, punctuation, spaces (any script)
transcript_text = st.text(
    alphabet=st.characters(categories=("L", "N", "P", "Zs")),
    max_size=500,
)

# Transcript without sentence delimiters
unpunctuated_text = st.text(
    alphabet=string.ascii_letters + string.digits + " ,'-",
    max_size=300,
)

# Sentences assembled from pharmacy-ish words, so cues actually fire
pharmacy_words = st.sampled_from([
    "what", "how", "can", "you", "dosage", "side", "effect", "refill", "pharmacy",
    "aspirin", "insulin", "500", "mg", "allergic", "to", "penicillin", "take",
    "with", "food", "monitor", "pain", "call", "I", "feel", "dizzy", "nausea",
])
pharmacy_sentence = st.lists(pharmacy_words, min_size=1, max_size=12).map(" ".join)
pharmacy_transcript = st.lists(
    st.tuples(pharmacy_sentence, st.sampled_from([".", "?", "!", "...", "?!"])),
    max_size=15,
).map(lambda parts: " ".join(s + p for s, p in parts))

# Summary items free of newlines and bullets
summary_item = st.text(alphabet=string.ascii_letters + string.digits + " -/()", min_size=1, max_size=60)
item_lists = st.lists(summary_item, max_size=5)


# ---------------------------------------------------------------------------
# Segmenter properties
# ---------------------------------------------------------------------------

class TestSegmenterProperties:

    @given(text=transcript_text)
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_segment_count_is_half_the_sentences_rounded_up(self, text: str) -> None:
        sentences = split_sentences(text)
        assert len(segment(text)) == math.ceil(len(sentences) / 2)

    @given(text=transcript_text)
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_timestamps_advance_one_minute_per_segment(self, text: str) -> None:
        timestamps = [s.timestamp for s in segment(text)]
        assert timestamps == [2 * SECONDS_PER_SENTENCE * i for i in range(len(timestamps))]

    @given(text=transcript_text)
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_segment_text_is_never_empty(self, text: str) -> None:
        for seg in segment(text):
            assert seg.text.strip()
            assert seg.text.endswith(".")
            assert seg.speaker in (Speaker.PHARMACIST, Speaker.PATIENT)

    @given(text=unpunctuated_text)
    @settings(max_examples=200)
    def test_no_punctuation_gives_at_most_one_segment(self, text: str) -> None:
        result = segment(text)
        assert len(result) == (1 if text.strip() else 0)

    @given(text=pharmacy_transcript)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_segments_preserve_every_sentence_in_order(self, text: str) -> None:
        rebuilt = " ".join(s.text for s in segment(text))
        assert rebuilt == " ".join(f"{s}." for s in split_sentences(text))


# ---------------------------------------------------------------------------
# Entity extraction properties
# ---------------------------------------------------------------------------

class TestEntityProperties:

    @given(text=transcript_text | pharmacy_transcript)
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_extraction_is_deterministic(self, text: str) -> None:
        assert extract_entities(text) == extract_entities(text)

    @given(text=pharmacy_transcript)
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_categories_follow_fixed_order_and_are_non_empty(self, text: str) -> None:
        categories = extract_entities(text)
        names = [c.name for c in categories]
        assert names == [n for n in CATEGORY_ORDER if n in names]
        assert all(c.items for c in categories)

    @given(text=pharmacy_transcript)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_medications_come_from_vocabulary(self, text: str) -> None:
        meds = {c.name: c.items for c in extract_entities(text)}.get("Medications", [])
        assert meds == [m for m in MEDICATIONS if m in meds]
        assert len(meds) == len(set(meds))


# ---------------------------------------------------------------------------
# Fallback summary properties
# ---------------------------------------------------------------------------

class TestFallbackProperties:

    @given(text=transcript_text | pharmacy_transcript)
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_no_field_is_ever_empty(self, text: str) -> None:
        summary = build_fallback_summary(text)
        for _, lines in summary.sections():
            assert lines

    @given(text=pharmacy_transcript)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_fallback_medications_carry_no_details(self, text: str) -> None:
        for med in build_fallback_summary(text).medications:
            assert med.dosage == med.frequency == med.notes == ""
            assert med.name[:1].isupper()


# ---------------------------------------------------------------------------
# Text export properties
# ---------------------------------------------------------------------------

class TestTextExportProperties:

    @given(
        topics=item_lists,
        med_names=item_lists,
        actions=item_lists,
        concerns=item_lists,
        recommendations=item_lists,
    )
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_every_item_rendered_once_in_order(
        self, topics, med_names, actions, concerns, recommendations
    ) -> None:
        summary = StructuredSummary(
            key_topics=topics,
            medications=[Medication(name=n) for n in med_names],
            action_items=actions,
            patient_concerns=concerns,
            pharmacist_recommendations=recommendations,
        ).with_placeholders()

        text = render_summary_text(summary)
        bullets = [line[2:] for line in text.splitlines() if line.startswith("• ")]
        expected = [line for _, lines in summary.sections() for line in lines]
        assert bullets == expected


# ---------------------------------------------------------------------------
# Audio validation properties
# ---------------------------------------------------------------------------

class TestMimetypeProperties:

    @given(ext=st.sampled_from([".wav", ".mp3", ".flac", ".ogg", ".webm", ".mp4", ".m4a"]))
    def test_known_extensions_map_to_supported_types(self, ext: str) -> None:
        assert mimetype_for(f"consultation{ext}") in SUPPORTED_MIMETYPES
        assert mimetype_for(f"consultation{ext.upper()}") == mimetype_for(f"consultation{ext}")
