"""Shared pytest fixtures, mock factories, and test markers.

Test tiers
----------
  unit        Fast, fully offline, zero external dependencies.
              Always run. Target: < 1 second total.

  integration Mock external services. Always run. Validates the
              record → transcribe → review → summarise → export flow
              without real network calls.

  quality     Deep validation: exported document contents and
              property-based (Hypothesis) checks of the text analysers.
              Always run offline.

  live        Real API calls. Skipped unless the required environment
              variables are set. See tests/live/conftest.py for guards.

Run specific tiers:
  pytest tests/unit tests/integration tests/quality   # offline only
  pytest tests/live -m live                           # live only
  pytest tests/ -v                                    # everything
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pharmacy_scribe.analysis.models import StructuredSummary
from pharmacy_scribe.transcription.models import TimedWord, TranscriptionResult
from tests.fixtures.audio import generate_silence_wav, generate_sine_wav, validate_wav

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast offline unit tests")
    config.addinivalue_line("markers", "integration: mock-based integration tests")
    config.addinivalue_line("markers", "quality: export validation and property-based tests")
    config.addinivalue_line("markers", "live: requires real credentials (skipped by default)")


# ---------------------------------------------------------------------------
# Transcript / summary fixtures
# ---------------------------------------------------------------------------

CONSULTATION_TEXT = (
    "Good morning, I'm here to pick up my prescription. "
    "Sure, you are on lisinopril 10 mg once daily. "
    "What should I do if I feel dizzy? "
    "Dizziness is a common side effect early on, so monitor your blood pressure. "
    "Can you also refill my metformin? "
    "Yes, I will process the refill and call you when it is ready."
)

SAMPLE_WORDS = [
    TimedWord(word="Good", start=0.2, end=0.5),
    TimedWord(word="morning,", start=0.5, end=0.9),
    TimedWord(word="ready.", start=41.0, end=42.4),
]


@pytest.fixture
def consultation_text() -> str:
    return CONSULTATION_TEXT


@pytest.fixture
def sample_transcription(consultation_text: str) -> TranscriptionResult:
    return TranscriptionResult(
        text="",
        duration=42.4,
        words=SAMPLE_WORDS,
        provider="deepgram",
        request_id="test-request-001",
    ).with_text(consultation_text)


@pytest.fixture
def sample_summary_json() -> dict:
    with open(FIXTURES_DIR / "sample_summary.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def sample_summary(sample_summary_json: dict) -> StructuredSummary:
    return StructuredSummary.model_validate(sample_summary_json)


# ---------------------------------------------------------------------------
# Deepgram mock response factory
# ---------------------------------------------------------------------------

def make_deepgram_mock_response(
    transcript: str,
    words: list[TimedWord] | None = None,
    duration: float | None = 42.4,
) -> MagicMock:
    """Build a MagicMock that mimics a Deepgram PreRecordedResponse."""
    mock_response = MagicMock()
    mock_response.metadata.request_id = "mock-request-001"
    mock_response.metadata.duration = duration
    mock_words = [
        MagicMock(word=w.word.lower().strip(".,?!"), punctuated_word=w.word, start=w.start, end=w.end)
        for w in (words or [])
    ]
    mock_response.results.channels = [
        MagicMock(alternatives=[MagicMock(transcript=transcript, words=mock_words)])
    ]
    return mock_response


@pytest.fixture
def deepgram_mock_response(consultation_text: str) -> MagicMock:
    return make_deepgram_mock_response(consultation_text, SAMPLE_WORDS)


@pytest.fixture
def deepgram_mock_response_no_channels() -> MagicMock:
    """Simulates a response for silent audio: no channels, no duration."""
    mock_response = MagicMock()
    mock_response.metadata.request_id = "mock-empty-001"
    mock_response.metadata.duration = None
    mock_response.results.channels = []
    return mock_response


# ---------------------------------------------------------------------------
# HTTP mock factory (Google Speech-to-Text, Gemini)
# ---------------------------------------------------------------------------

def make_http_response(status_code: int = 200, payload: object = None, text: str | None = None) -> MagicMock:
    """Build a MagicMock that mimics a requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = payload if payload is not None else {}
    response.text = text if text is not None else json.dumps(payload or {})
    return response


def make_session(*responses: MagicMock) -> MagicMock:
    session = MagicMock()
    session.post.side_effect = list(responses)
    return session


def gemini_payload(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


# ---------------------------------------------------------------------------
# OpenAI mock factory
# ---------------------------------------------------------------------------

def make_openai_client(content: str | None = None, error: Exception | None = None) -> MagicMock:
    """Build a MagicMock OpenAI client whose chat completion returns ``content``."""
    client = MagicMock()
    create = client.chat.completions.create
    if error is not None:
        create.side_effect = error
    else:
        create.return_value = MagicMock(choices=[MagicMock(message=MagicMock(content=content))])
    return client


# ---------------------------------------------------------------------------
# Audio fixtures: real RIFF/WAV files
# ---------------------------------------------------------------------------

@pytest.fixture
def real_wav_file(tmp_path: Path) -> Path:
    """A real RIFF/WAV file: mono, 16-bit, 16kHz, 1-second sine wave at 440Hz."""
    path = tmp_path / "consultation_440hz_1s.wav"
    generate_sine_wav(path, duration_seconds=1.0, frequency_hz=440.0)

    # Self-verify immediately so a bad fixture fails loudly
    props = validate_wav(path)
    assert props["channels"] == 1
    assert props["frame_rate"] == 16000
    assert props["n_frames"] == 16000

    return path


@pytest.fixture
def dummy_wav_file(tmp_path: Path) -> Path:
    """Short silent WAV for tests that mock the vendor client."""
    path = tmp_path / "dummy.wav"
    generate_silence_wav(path, duration_seconds=0.1)
    return path
