"""Plain-text rendering of summaries and reviewed transcripts."""

from __future__ import annotations

from datetime import date

from ..analysis.models import StructuredSummary, TranscriptSegment
from ..transcription.models import TranscriptionResult


TITLE = "PHARMACY CONSULTATION SUMMARY"
BULLET = "•"


def format_time(seconds: float) -> str:
    """Format a duration in seconds as MM:SS."""
    total = int(seconds)
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


def footer_lines(
    transcription: TranscriptionResult | None,
    generated_on: date | None = None,
) -> list[str]:
    generated_on = generated_on or date.today()
    duration = format_time(transcription.duration) if transcription else "N/A"
    return [
        f"Generated on: {generated_on.isoformat()}",
        f"Duration: {duration}",
    ]


def render_summary_text(
    summary: StructuredSummary,
    transcription: TranscriptionResult | None = None,
    generated_on: date | None = None,
) -> str:
    """Render a summary as the plain-text document used for copy and .txt export.

    Each section heading is followed by one bullet line per item, in the
    order the items appear in the summary.
    """
    blocks = [TITLE]
    for heading, lines in summary.sections():
        body = "\n".join(f"{BULLET} {line}" for line in lines)
        blocks.append(f"{heading.upper()}:\n{body}")
    blocks.append("\n".join(footer_lines(transcription, generated_on)))
    return "\n\n".join(blocks)


def render_transcript_text(segments: list[TranscriptSegment]) -> str:
    """Render segments as ``[MM:SS] Speaker: text`` lines."""
    return "\n".join(
        f"[{format_time(s.timestamp)}] {s.speaker.value}: {s.text}" for s in segments
    )


def generate_file_name(prefix: str, extension: str, today: date | None = None) -> str:
    """Return ``prefix-YYYY-MM-DD.extension``."""
    stamp = (today or date.today()).isoformat()
    return f"{prefix}-{stamp}.{extension.lstrip('.')}"
