"""Pre-recorded transcription using Deepgram Nova-3 Medical."""

from __future__ import annotations

import logging
import os

from deepgram import DeepgramClient, PrerecordedOptions

from ..errors import VendorAuthError, classify_vendor_error
from .base import BaseTranscriber
from .models import TranscriptionResult

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "nova-3-medical"


class DeepgramTranscriber(BaseTranscriber):
    """Transcribe recorded consultations with Deepgram's pre-recorded API."""

    provider = "deepgram"

    def __init__(
        self,
        api_key: str | None = None,
        language: str = "en-US",
        model: str = DEFAULT_MODEL,
        keyterms: list[str] | None = None,
    ) -> None:
        super().__init__(language)
        self._api_key = api_key or os.environ.get("DEEPGRAM_API_KEY", "")
        self._client = DeepgramClient(self._api_key) if self._api_key else None
        self.model = model
        self.keyterms = keyterms or []

    def transcribe_bytes(
        self,
        audio: bytes,
        mimetype: str = "audio/wav",
        language: str | None = None,
    ) -> TranscriptionResult:
        """Transcribe an in-memory recording.

        Args:
            audio: Encoded audio bytes.
            mimetype: MIME type sent alongside the buffer.
            language: BCP-47 tag; defaults to the transcriber's language.

        Returns:
            TranscriptionResult with text, word timings and speaker segments.
        """
        self._require_audio(audio)
        if self._client is None:
            raise VendorAuthError("Deepgram API key not configured", "Deepgram")

        language = language or self.language
        options = PrerecordedOptions(
            model=self.model,
            smart_format=True,
            punctuate=True,
            language=language,
            keyterm=self.keyterms,
        )
        source = {"buffer": audio, "mimetype": mimetype}

        try:
            response = self._client.listen.rest.v("1").transcribe_file(source, options)
        except Exception as exc:
            status = _status_of(exc)
            logger.error("Deepgram transcription failed (status=%s): %s", status, exc)
            raise classify_vendor_error("Deepgram", status, str(exc)) from exc

        result = TranscriptionResult.from_deepgram_response(response, language=language)
        logger.info(
            "Deepgram returned %d words, %d segments (request %s)",
            len(result.words),
            len(result.segments),
            result.request_id or "-",
        )
        return result


def _status_of(exc: Exception) -> int | None:
    """Best-effort HTTP status from a Deepgram SDK exception."""
    status = getattr(exc, "status", None)
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None
