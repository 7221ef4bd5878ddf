"""Summary export to plain text, PDF and Word documents."""

from __future__ import annotations

from datetime import date

from ..analysis.models import StructuredSummary
from ..errors import InvalidInputError
from ..transcription.models import TranscriptionResult
from .pdf import render_summary_pdf
from .text import (
    format_time,
    generate_file_name,
    render_summary_text,
    render_transcript_text,
)
from .word import render_summary_docx

EXPORT_FORMATS = ("pdf", "docx", "txt")


def export_summary(
    summary: StructuredSummary,
    fmt: str,
    transcription: TranscriptionResult | None = None,
    generated_on: date | None = None,
) -> bytes:
    """Render ``summary`` in one of EXPORT_FORMATS and return the file bytes.

    Raises:
        InvalidInputError: for an unknown format.
    """
    fmt = fmt.lower().lstrip(".")
    if fmt == "pdf":
        return render_summary_pdf(summary, transcription, generated_on)
    if fmt == "docx":
        return render_summary_docx(summary, transcription, generated_on)
    if fmt == "txt":
        return render_summary_text(summary, transcription, generated_on).encode("utf-8")
    raise InvalidInputError(f"Unsupported export format {fmt!r}; expected one of {EXPORT_FORMATS}")


__all__ = [
    "EXPORT_FORMATS",
    "export_summary",
    "format_time",
    "generate_file_name",
    "render_summary_docx",
    "render_summary_pdf",
    "render_summary_text",
    "render_transcript_text",
]
