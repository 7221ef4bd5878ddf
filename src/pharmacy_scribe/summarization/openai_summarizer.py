"""Summarisation through the OpenAI chat completions API."""

from __future__ import annotations

import logging
import os

import openai
from openai import OpenAI

from ..errors import VendorAuthError, VendorUnavailable, classify_vendor_error
from .base import BaseSummarizer
from .prompt import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o"


class OpenAISummarizer(BaseSummarizer):
    """Chat-completions summariser (``gpt-4o`` by default)."""

    provider = "OpenAI"

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.3,
        max_tokens: int = 2000,
        client: OpenAI | None = None,
    ) -> None:
        self._api_key = api_key or os.environ.get("OPENAI_API_KEY", "")
        if client is None and self._api_key:
            client = OpenAI(api_key=self._api_key)
        self._client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def complete(self, prompt: str) -> str:
        if self._client is None:
            raise VendorAuthError("OpenAI API key not configured", self.provider)

        logger.info("Requesting summary from OpenAI model %s", self.model)
        try:
            completion = self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except openai.APIStatusError as exc:
            logger.error("OpenAI returned %s: %s", exc.status_code, exc)
            raise classify_vendor_error(self.provider, exc.status_code, str(exc)) from exc
        except openai.APIConnectionError as exc:
            logger.error("OpenAI connection failure: %s", exc)
            raise VendorUnavailable(
                "Summary generation failed. Please try again.", self.provider
            ) from exc

        if not completion.choices:
            return ""
        return completion.choices[0].message.content or ""
