"""Pydantic models for speech-to-text results."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..analysis.models import TranscriptSegment
from ..analysis.segmenter import segment


class TimedWord(BaseModel):
    """A single recognised word with its offsets in the recording."""

    word: str = Field(..., description="Recognised word")
    start: float = Field(default=0.0, description="Start time in seconds")
    end: float = Field(default=0.0, description="End time in seconds")


class TranscriptionResult(BaseModel):
    """Transcript returned by a speech-to-text vendor, with heuristic segments."""

    text: str = Field(default="", description="Full transcript text")
    duration: float = Field(default=0.0, ge=0, description="Recording length in seconds")
    words: list[TimedWord] = Field(default_factory=list)
    segments: list[TranscriptSegment] = Field(default_factory=list)
    provider: str = Field(default="", description="Vendor that produced the transcript")
    language: str = Field(default="en-US")
    request_id: str = Field(default="", description="Vendor request ID, when available")

    def with_text(self, text: str) -> "TranscriptionResult":
        """Return a copy holding ``text`` and a freshly computed segment list."""
        return self.model_copy(update={"text": text, "segments": segment(text)})

    @classmethod
    def from_deepgram_response(
        cls,
        response: object,
        language: str = "en-US",
    ) -> "TranscriptionResult":
        """Parse a Deepgram PreRecordedResponse into a TranscriptionResult."""
        results = getattr(response, "results", None)
        if results is None:
            return cls(provider="deepgram", language=language)

        text = ""
        raw_words: list = []
        channels = getattr(results, "channels", None) or []
        if channels:
            alternatives = getattr(channels[0], "alternatives", None) or []
            if alternatives:
                text = getattr(alternatives[0], "transcript", "") or ""
                raw_words = getattr(alternatives[0], "words", None) or []

        words = [
            TimedWord(
                word=getattr(w, "punctuated_word", None) or getattr(w, "word", ""),
                start=getattr(w, "start", 0.0),
                end=getattr(w, "end", 0.0),
            )
            for w in raw_words
        ]

        metadata = getattr(response, "metadata", None)
        request_id = getattr(metadata, "request_id", "") if metadata else ""
        duration = getattr(metadata, "duration", None) if metadata else None
        if not isinstance(duration, (int, float)):
            duration = words[-1].end if words else 0.0

        return cls(
            text=text,
            duration=float(duration),
            words=words,
            segments=segment(text),
            provider="deepgram",
            language=language,
            request_id=request_id or "",
        )
