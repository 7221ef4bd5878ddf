"""Summarisation through the Gemini ``generateContent`` REST endpoint."""

from __future__ import annotations

import logging
import os

import requests

from ..errors import VendorAuthError, VendorUnavailable, classify_vendor_error
from .base import BaseSummarizer

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"
API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"


class GeminiSummarizer(BaseSummarizer):
    """Gemini summariser talking to the Generative Language REST API."""

    provider = "Gemini"

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.3,
        max_output_tokens: int = 2000,
        session: requests.Session | None = None,
        timeout: float = 120.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("GOOGLE_API_KEY", "")
        self._session = session or requests.Session()
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{API_BASE}/{self.model}:generateContent"

    def complete(self, prompt: str) -> str:
        if not self._api_key:
            raise VendorAuthError("Google API key not configured", self.provider)

        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_output_tokens,
            },
        }
        logger.info("Requesting summary from Gemini model %s", self.model)
        try:
            response = self._session.post(
                self.url,
                params={"key": self._api_key},
                json=body,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Gemini transport failure: %s", exc)
            raise VendorUnavailable(
                "Gemini summary generation failed. Please try again.", self.provider
            ) from exc

        if not response.ok:
            message = response.text or ""
            logger.error("Gemini returned %s: %s", response.status_code, message)
            raise classify_vendor_error(self.provider, response.status_code, message)

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Gemini returned a non-JSON body: %.200s", response.text)
            raise VendorUnavailable(
                "Gemini returned an unreadable response. Please try again.",
                self.provider,
                response.status_code,
            ) from exc

        candidates = (data.get("candidates") if isinstance(data, dict) else None) or []
        if not candidates:
            raise VendorUnavailable("No response from Gemini API.", self.provider)

        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts)
