"""Rule-based Pharmacist / Patient attribution for flat transcripts.

The speech-to-text integration returns a single block of text without
diarization, so speaker roles are guessed from sentence cues:

  - a sentence with a question cue and no pharmacy vocabulary switches the
    current speaker to Patient,
  - a sentence with pharmacy vocabulary switches it to Pharmacist,
  - anything else leaves the current speaker unchanged.

Sentences are grouped two at a time. The label on a segment is the speaker
state when the segment is emitted, so a segment whose two sentences were
spoken by different people carries only the second sentence's label.
Timestamps are synthetic: 30 seconds per sentence.
"""

from __future__ import annotations

import re
from functools import reduce
from typing import NamedTuple

from .models import Speaker, TranscriptSegment
from .vocabulary import PHARMACIST_CUES, QUESTION_CUES


SECONDS_PER_SENTENCE = 30
SENTENCES_PER_SEGMENT = 2

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


class SegmenterState(NamedTuple):
    """Accumulator threaded through the sentence fold."""

    speaker: Speaker = Speaker.PHARMACIST
    buffer: str = ""
    window_start: int = 0
    clock: int = 0
    segments: tuple[TranscriptSegment, ...] = ()


def split_sentences(transcript: str) -> list[str]:
    """Split on runs of '.', '!' and '?', dropping empty fragments."""
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(transcript or "") if s.strip()]


def is_question(sentence: str) -> bool:
    lowered = sentence.lower()
    return "?" in sentence or any(cue in lowered for cue in QUESTION_CUES)


def has_medical_terms(sentence: str) -> bool:
    lowered = sentence.lower()
    return any(cue in lowered for cue in PHARMACIST_CUES)


def classify_sentence(sentence: str, current: Speaker) -> Speaker:
    """Return the speaker after hearing ``sentence``; sticky when no cue fires."""
    medical = has_medical_terms(sentence)
    if is_question(sentence) and not medical:
        return Speaker.PATIENT
    if medical:
        return Speaker.PHARMACIST
    return current


def step(state: SegmenterState, sentence: str, index: int, total: int) -> SegmenterState:
    """Advance the fold by one sentence, emitting a segment when a window closes."""
    speaker = classify_sentence(sentence, state.speaker)
    buffer = state.buffer + sentence + ". "
    clock = state.clock + SECONDS_PER_SENTENCE

    closes_window = index % SENTENCES_PER_SEGMENT == SENTENCES_PER_SEGMENT - 1
    if not (closes_window or index == total - 1):
        return state._replace(speaker=speaker, buffer=buffer, clock=clock)

    segment = TranscriptSegment(
        speaker=speaker,
        text=buffer.strip(),
        timestamp=state.window_start,
    )
    return SegmenterState(
        speaker=speaker,
        buffer="",
        window_start=clock,
        clock=clock,
        segments=state.segments + (segment,),
    )


def segment(transcript: str) -> list[TranscriptSegment]:
    """Split a flat transcript into speaker-attributed segments.

    Args:
        transcript: Raw transcript text from the speech-to-text vendor.

    Returns:
        Segments in order of appearance. Empty or whitespace-only input
        yields an empty list.
    """
    sentences = split_sentences(transcript)
    total = len(sentences)
    final = reduce(
        lambda state, item: step(state, item[1], item[0], total),
        enumerate(sentences),
        SegmenterState(),
    )
    return list(final.segments)
