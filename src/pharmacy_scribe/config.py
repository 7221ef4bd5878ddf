"""Vendor selection and credentials.

Every client also accepts explicit credentials and otherwise reads the
vendor's own environment variable (DEEPGRAM_API_KEY, GOOGLE_API_KEY,
OPENAI_API_KEY). The PHARMACY_SCRIBE_* variables choose which vendors run.
"""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field

from .summarization.base import BaseSummarizer
from .summarization.gemini import GeminiSummarizer
from .summarization.openai_summarizer import OpenAISummarizer
from .transcription.base import BaseTranscriber
from .transcription.deepgram import DeepgramTranscriber
from .transcription.google import GoogleSpeechTranscriber


class ScribeSettings(BaseModel):
    """Which speech-to-text and summarisation vendors to use."""

    provider: Literal["deepgram", "google"] = Field(default="deepgram")
    summarizer: Literal["openai", "gemini"] = Field(default="openai")
    language: str = Field(default="en-US", description="BCP-47 language tag for transcription")
    model: str | None = Field(default=None, description="Summarisation model override")
    deepgram_api_key: str | None = None
    google_api_key: str | None = None
    openai_api_key: str | None = None

    @classmethod
    def from_env(cls) -> "ScribeSettings":
        values: dict[str, str] = {}
        for field, var in (
            ("provider", "PHARMACY_SCRIBE_PROVIDER"),
            ("summarizer", "PHARMACY_SCRIBE_SUMMARIZER"),
            ("language", "PHARMACY_SCRIBE_LANGUAGE"),
            ("model", "PHARMACY_SCRIBE_MODEL"),
        ):
            value = os.environ.get(var)
            if value:
                values[field] = value.strip().lower() if field in ("provider", "summarizer") else value
        return cls(**values)


def build_transcriber(settings: ScribeSettings) -> BaseTranscriber:
    if settings.provider == "google":
        return GoogleSpeechTranscriber(api_key=settings.google_api_key, language=settings.language)
    return DeepgramTranscriber(api_key=settings.deepgram_api_key, language=settings.language)


def build_summarizer(settings: ScribeSettings) -> BaseSummarizer:
    kwargs = {"model": settings.model} if settings.model else {}
    if settings.summarizer == "gemini":
        return GeminiSummarizer(api_key=settings.google_api_key, **kwargs)
    return OpenAISummarizer(api_key=settings.openai_api_key, **kwargs)
