"""Example: run a pharmacy consultation end to end (or in demo mode with mock data).

Usage:
    # Demo mode, no API keys or audio file needed:
    python examples/consultation_demo.py

    # Real file (Deepgram + OpenAI):
    DEEPGRAM_API_KEY=<key> OPENAI_API_KEY=<key> python examples/consultation_demo.py path/to/audio.wav
"""

from __future__ import annotations

import json
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

# Make sure the package is importable when running from the project root
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pharmacy_scribe.config import ScribeSettings, build_summarizer, build_transcriber
from pharmacy_scribe.export import render_summary_text, render_transcript_text
from pharmacy_scribe.summarization import OpenAISummarizer
from pharmacy_scribe.transcription import DeepgramTranscriber
from pharmacy_scribe.use_cases import ConsultationPipeline


DEMO_TRANSCRIPT = (
    "Hi, I'm here to pick up my prescription. "
    "Your atorvastatin is ready, take one tablet 20 mg every evening. "
    "Can I take it with grapefruit juice? "
    "Avoid alcohol and grapefruit, they can interact with this medication. "
    "I'm also allergic to penicillin. "
    "Noted, I will call your doctor to follow up."
)


def _print_consultation(pipeline: ConsultationPipeline, audio_path: str | Path, out_dir: Path) -> None:
    result = pipeline.transcribe(audio_path)

    print("Speaker segments:")
    print("-" * 50)
    print(render_transcript_text(result.segments))
    print()

    print("Entities:")
    print(json.dumps([c.model_dump() for c in pipeline.entities(result)], indent=2))
    print()

    summary = pipeline.summarize(result)
    print(render_summary_text(summary, result))
    print()

    for fmt in ("pdf", "docx"):
        print(f"Saved {pipeline.save(summary, fmt, out_dir, result)}")


def run_demo() -> None:
    """Run with a mock Deepgram response and a non-JSON model reply (keyword fallback)."""
    print("=== Pharmacy Consultation Demo (mock mode) ===\n")

    mock_response = MagicMock()
    mock_response.metadata = MagicMock(request_id="demo-request-001", duration=95.0)
    mock_response.results.channels = [
        MagicMock(alternatives=[MagicMock(transcript=DEMO_TRANSCRIPT, words=[])])
    ]

    llm = MagicMock()
    llm.chat.completions.create.return_value = MagicMock(
        choices=[MagicMock(message=MagicMock(content="Sorry, I cannot produce JSON right now."))]
    )

    with patch("pharmacy_scribe.transcription.deepgram.DeepgramClient") as mock_client:
        mock_client.return_value.listen.rest.v.return_value.transcribe_file.return_value = mock_response
        pipeline = ConsultationPipeline(
            DeepgramTranscriber(api_key="demo-key"),
            OpenAISummarizer(client=llm),
        )

        with tempfile.TemporaryDirectory() as tmp:
            wav = Path(tmp) / "demo.wav"
            wav.write_bytes(b"RIFF" + b"\x00" * 96)
            _print_consultation(pipeline, wav, Path(tmp) / "exports")


def run_real(audio_path: str) -> None:
    """Transcribe and summarise a real recording using PHARMACY_SCRIBE_* settings."""
    print(f"=== Consultation: {audio_path} ===\n")
    settings = ScribeSettings.from_env()
    pipeline = ConsultationPipeline(build_transcriber(settings), build_summarizer(settings))
    _print_consultation(pipeline, audio_path, Path.cwd())


if __name__ == "__main__":
    if len(sys.argv) > 1:
        run_real(sys.argv[1])
    else:
        run_demo()
