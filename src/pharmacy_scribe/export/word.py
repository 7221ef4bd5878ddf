"""Word (.docx) rendering with python-docx."""

from __future__ import annotations

from datetime import date
from io import BytesIO

from docx import Document
from docx.shared import Pt

from ..analysis.models import StructuredSummary
from ..transcription.models import TranscriptionResult
from .text import BULLET, TITLE, footer_lines


def render_summary_docx(
    summary: StructuredSummary,
    transcription: TranscriptionResult | None = None,
    generated_on: date | None = None,
) -> bytes:
    """Render a summary as a Word document and return its bytes."""
    document = Document()

    title = document.add_paragraph()
    run = title.add_run(TITLE)
    run.bold = True
    run.font.size = Pt(16)
    title.paragraph_format.space_after = Pt(20)

    for heading, lines in summary.sections():
        para = document.add_paragraph()
        run = para.add_run(f"{heading.upper()}:")
        run.bold = True
        run.font.size = Pt(12)
        para.paragraph_format.space_before = Pt(20)
        para.paragraph_format.space_after = Pt(10)

        for line in lines:
            item = document.add_paragraph()
            item.add_run(f"{BULLET} {line}").font.size = Pt(11)
            item.paragraph_format.space_after = Pt(5)

    for line in footer_lines(transcription, generated_on):
        document.add_paragraph(line).paragraph_format.space_before = Pt(4)

    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()
