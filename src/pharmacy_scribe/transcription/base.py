"""Abstract base class for speech-to-text vendor adapters."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from ..errors import InvalidInputError
from .audio import validate_audio_file
from .models import TranscriptionResult

logger = logging.getLogger(__name__)


class BaseTranscriber(ABC):
    """Common file handling for Deepgram, Google and other transcribers."""

    provider: str = ""

    def __init__(self, language: str = "en-US") -> None:
        self.language = language

    @abstractmethod
    def transcribe_bytes(
        self,
        audio: bytes,
        mimetype: str = "audio/wav",
        language: str | None = None,
    ) -> TranscriptionResult:
        """Send raw audio to the vendor and return the parsed result."""

    def transcribe_file(
        self,
        path: str | Path,
        language: str | None = None,
    ) -> TranscriptionResult:
        """Validate an audio file and transcribe its contents.

        Raises:
            InvalidInputError: if the file fails validation.
            VendorError: if the vendor call fails.
        """
        path = Path(path)
        mimetype = validate_audio_file(path)
        logger.info("Transcribing %s (%s) with %s", path.name, mimetype, self.provider)
        return self.transcribe_bytes(path.read_bytes(), mimetype, language)

    @staticmethod
    def _require_audio(audio: bytes) -> None:
        if not audio:
            raise InvalidInputError("No audio provided")
