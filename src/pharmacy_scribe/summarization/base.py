"""Abstract base class for summarisation vendor adapters."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ..analysis.fallback import build_fallback_summary
from ..analysis.models import StructuredSummary
from ..errors import InvalidInputError, SummaryParseError, VendorUnavailable
from .parsing import parse_summary_response
from .prompt import build_summary_prompt

logger = logging.getLogger(__name__)


class BaseSummarizer(ABC):
    """Prompt a language model for a structured summary, with keyword fallback."""

    provider: str = ""

    @abstractmethod
    def complete(self, prompt: str) -> str:
        """Send ``prompt`` to the vendor and return the raw response text.

        Raises:
            VendorError: for any vendor or transport failure.
        """

    def summarize(self, transcript: str) -> StructuredSummary:
        """Summarise a consultation transcript.

        Vendor failures propagate as VendorError subclasses. A response that
        arrives but does not parse is replaced by the keyword summary.

        Raises:
            InvalidInputError: if the transcript is empty.
            VendorError: if the vendor call fails or returns nothing.
        """
        if not transcript or not transcript.strip():
            raise InvalidInputError("No text provided")

        raw_text = self.complete(build_summary_prompt(transcript))
        if not raw_text or not raw_text.strip():
            raise VendorUnavailable("No response from AI service", self.provider)

        try:
            return parse_summary_response(raw_text)
        except SummaryParseError as exc:
            logger.warning(
                "%s summary did not parse, using keyword fallback: %s", self.provider, exc
            )
            return build_fallback_summary(transcript)
