"""Pharmacy consultation use case.

The pharmacist records or uploads the consultation; the transcript is
segmented for review, optionally edited, summarised by a language model and
exported as PDF, Word or plain text.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from ..analysis.entities import extract_entities
from ..analysis.models import EntityCategory, StructuredSummary
from ..errors import InvalidInputError
from ..export import export_summary, generate_file_name
from ..summarization.base import BaseSummarizer
from ..transcription.base import BaseTranscriber
from ..transcription.models import TranscriptionResult

logger = logging.getLogger(__name__)

EXPORT_PREFIX = "pharmacy-summary"


class ConsultationPipeline:
    """Audio file → transcript → reviewed segments → structured summary → document."""

    def __init__(
        self,
        transcriber: BaseTranscriber | None = None,
        summarizer: BaseSummarizer | None = None,
    ) -> None:
        self._transcriber = transcriber
        self._summarizer = summarizer

    def transcribe(
        self,
        audio_path: str | Path,
        language: str | None = None,
    ) -> TranscriptionResult:
        """Transcribe the consultation recording."""
        if self._transcriber is None:
            raise InvalidInputError("No transcriber configured")
        return self._transcriber.transcribe_file(audio_path, language=language)

    @staticmethod
    def revise(result: TranscriptionResult, edited_text: str) -> TranscriptionResult:
        """Apply a reviewed transcript; the segment list is rebuilt, never patched."""
        if not edited_text or not edited_text.strip():
            raise InvalidInputError("Edited transcript must not be empty")
        return result.with_text(edited_text)

    @staticmethod
    def entities(source: TranscriptionResult | str) -> list[EntityCategory]:
        return extract_entities(_text_of(source))

    def summarize(self, source: TranscriptionResult | str) -> StructuredSummary:
        """Summarise a transcript with the configured language model."""
        if self._summarizer is None:
            raise InvalidInputError("No summarizer configured")
        return self._summarizer.summarize(_text_of(source))

    @staticmethod
    def export(
        summary: StructuredSummary,
        fmt: str,
        result: TranscriptionResult | None = None,
    ) -> bytes:
        return export_summary(summary, fmt, result)

    def save(
        self,
        summary: StructuredSummary,
        fmt: str,
        directory: str | Path,
        result: TranscriptionResult | None = None,
        today: date | None = None,
    ) -> Path:
        """Write the exported summary into ``directory`` and return its path."""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / generate_file_name(EXPORT_PREFIX, fmt, today)
        path.write_bytes(self.export(summary, fmt, result))
        logger.info("Saved %s summary to %s", fmt, path)
        return path


def _text_of(source: TranscriptionResult | str) -> str:
    if isinstance(source, TranscriptionResult):
        return source.text
    return source or ""
