"""PDF rendering with reportlab platypus."""

from __future__ import annotations

from datetime import date
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from ..analysis.models import StructuredSummary
from ..transcription.models import TranscriptionResult
from .text import BULLET, footer_lines


def render_summary_pdf(
    summary: StructuredSummary,
    transcription: TranscriptionResult | None = None,
    generated_on: date | None = None,
) -> bytes:
    """Render a summary as an A4 PDF document and return its bytes."""
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        title="Pharmacy Consultation Summary",
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "Title",
        parent=styles["Heading1"],
        alignment=TA_LEFT,
        spaceAfter=12,
    )
    section_style = ParagraphStyle(
        "Section",
        parent=styles["Heading3"],
        spaceBefore=12,
        spaceAfter=6,
    )
    body_style = styles["Normal"]
    footer_style = ParagraphStyle(
        "Footer",
        parent=body_style,
        fontSize=9,
        spaceBefore=24,
    )

    story: list = [Paragraph("Pharmacy Consultation Summary", title_style), Spacer(1, 12)]
    for heading, lines in summary.sections():
        story.append(Paragraph(escape(heading), section_style))
        for line in lines:
            story.append(Paragraph(f"{BULLET} {escape(line)}", body_style))

    footer = "<br/>".join(escape(line) for line in footer_lines(transcription, generated_on))
    story.append(Paragraph(footer, footer_style))

    doc.build(story)
    return buffer.getvalue()
