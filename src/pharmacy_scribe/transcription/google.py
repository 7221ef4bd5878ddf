"""Google Cloud Speech-to-Text v1 ``speech:recognize`` REST client."""

from __future__ import annotations

import base64
import logging
import os
from typing import Any

import requests

from ..analysis.segmenter import segment
from ..errors import VendorAuthError, VendorFormatError, VendorUnavailable, classify_vendor_error
from .base import BaseTranscriber
from .models import TimedWord, TranscriptionResult

logger = logging.getLogger(__name__)

RECOGNIZE_URL = "https://speech.googleapis.com/v1/speech:recognize"
DEFAULT_MODEL = "latest_long"

# Rough speech bitrate (16 kbps) used when the response carries no word offsets.
_ESTIMATED_BYTES_PER_SECOND = 16000 / 8


class GoogleSpeechTranscriber(BaseTranscriber):
    """Synchronous recognition through the Speech-to-Text REST API."""

    provider = "google"

    def __init__(
        self,
        api_key: str | None = None,
        language: str = "en-US",
        model: str = DEFAULT_MODEL,
        session: requests.Session | None = None,
        timeout: float = 120.0,
    ) -> None:
        super().__init__(language)
        self._api_key = api_key or os.environ.get("GOOGLE_API_KEY", "")
        self._session = session or requests.Session()
        self.model = model
        self.timeout = timeout

    def transcribe_bytes(
        self,
        audio: bytes,
        mimetype: str = "audio/wav",
        language: str | None = None,
    ) -> TranscriptionResult:
        self._require_audio(audio)
        if not self._api_key:
            raise VendorAuthError("Google API key not configured", "Google Speech-to-Text")

        language = language or self.language
        body = {
            "config": {
                "languageCode": language,
                "enableWordTimeOffsets": True,
                "enableAutomaticPunctuation": True,
                "model": self.model,
            },
            "audio": {"content": base64.b64encode(audio).decode("ascii")},
        }

        try:
            response = self._session.post(
                RECOGNIZE_URL,
                params={"key": self._api_key},
                json=body,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Google Speech-to-Text transport failure: %s", exc)
            raise VendorUnavailable(
                "Google Speech-to-Text failed. Please try again.",
                "Google Speech-to-Text",
            ) from exc

        if not response.ok:
            message = _error_message(response)
            logger.error(
                "Google Speech-to-Text error %s (%s): %s",
                response.status_code,
                mimetype,
                message,
            )
            raise classify_vendor_error("Google Speech-to-Text", response.status_code, message)

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Google Speech-to-Text returned a non-JSON body: %.200s", response.text)
            raise VendorUnavailable(
                "Google Speech-to-Text returned an unreadable response. Please try again.",
                "Google Speech-to-Text",
                response.status_code,
            ) from exc

        results = (data.get("results") if isinstance(data, dict) else None) or []
        if not results:
            raise VendorFormatError(
                "No speech detected in the audio file.",
                "Google Speech-to-Text",
                response.status_code,
            )

        text = " ".join(
            r["alternatives"][0].get("transcript", "").strip()
            for r in results
            if r.get("alternatives")
        ).strip()
        words = [
            TimedWord(
                word=w.get("word", ""),
                start=parse_duration(w.get("startTime")),
                end=parse_duration(w.get("endTime")),
            )
            for r in results
            for w in (r.get("alternatives") or [{}])[0].get("words", [])
        ]

        duration = words[-1].end if words else 0.0
        if duration == 0:
            duration = max(round(len(audio) / _ESTIMATED_BYTES_PER_SECOND), 1)

        return TranscriptionResult(
            text=text,
            duration=round(duration),
            words=words,
            segments=segment(text),
            provider=self.provider,
            language=language,
        )


def parse_duration(value: Any) -> float:
    """Convert a protobuf Duration to seconds.

    The REST API renders durations as strings like ``"1.500s"``; older
    clients expose ``{"seconds": "1", "nanos": 500000000}``.
    """
    if value is None:
        return 0.0
    if isinstance(value, dict):
        seconds = float(value.get("seconds", 0) or 0)
        nanos = float(value.get("nanos", 0) or 0)
        return seconds + nanos / 1_000_000_000
    text = str(value).strip()
    if text.endswith("s"):
        text = text[:-1]
    try:
        return float(text)
    except ValueError:
        return 0.0


def _error_message(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or ""
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        return f"{error.get('status', '')} {error.get('message', '')}".strip()
    return str(payload)
