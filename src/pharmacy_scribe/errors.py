"""Error taxonomy for vendor calls and invalid input.

Vendor failures are surfaced to the caller as a typed exception whose
``str()`` is a message fit to show a pharmacist. Nothing here is retried.
"""

from __future__ import annotations


class PharmacyScribeError(Exception):
    """Base class for every error raised by pharmacy_scribe."""


class InvalidInputError(PharmacyScribeError, ValueError):
    """Raised for a missing or empty transcript, or an unusable audio file."""


class SummaryParseError(PharmacyScribeError):
    """Raised when a summarisation response is not valid summary JSON.

    Summarizers catch this themselves and fall back to the keyword summary.
    """


class VendorError(PharmacyScribeError):
    """A speech-to-text or language-model vendor call failed."""

    def __init__(
        self,
        message: str,
        provider: str = "",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class VendorAuthError(VendorError):
    """Missing, invalid or disabled API credential."""


class VendorQuotaExceeded(VendorError):
    """The vendor rejected the call for quota or rate-limit reasons."""


class VendorFormatError(VendorError):
    """Unsupported audio encoding, audio too long, or no speech detected."""


class VendorUnavailable(VendorError):
    """Server-side failure, transport failure or an empty vendor response."""


_QUOTA_MARKERS = ("quota", "insufficient_quota", "rate limit", "429")
_AUTH_MARKERS = ("api key", "api_key", "unauthorized", "permission", "service_disabled")
_TOO_LONG_MARKERS = ("sync input too long", "duration limit", "too long")
_ENCODING_MARKERS = ("sample_rate", "sample rate", "encoding")


def classify_vendor_error(
    provider: str,
    status_code: int | None,
    message: str = "",
) -> VendorError:
    """Map a raw vendor status code and error text to a typed VendorError.

    Args:
        provider: Human-readable vendor name used in the message ('OpenAI', ...).
        status_code: HTTP status returned by the vendor, if any.
        message: Raw error text from the vendor or transport layer.

    Returns:
        An instance of the most specific VendorError subclass. The caller
        raises it (usually ``from`` the original exception).
    """
    text = (message or "").lower()

    if status_code == 429 or any(m in text for m in _QUOTA_MARKERS):
        return VendorQuotaExceeded(
            f"{provider} API quota exceeded. Please check your billing and usage limits.",
            provider,
            status_code,
        )

    if status_code in (401, 403) or any(m in text for m in _AUTH_MARKERS):
        return VendorAuthError(
            f"Invalid {provider} API key or the API is not enabled. Please check your configuration.",
            provider,
            status_code,
        )

    if status_code == 400 or (status_code is None and "audio" in text):
        if any(m in text for m in _TOO_LONG_MARKERS):
            detail = "Audio file is too long for processing. Please try with a shorter recording."
        elif any(m in text for m in _ENCODING_MARKERS):
            detail = "Audio format issue. Please try recording again or upload a different audio file."
        elif "audio" in text:
            detail = "Invalid audio file. Please ensure the file contains speech and is not corrupted."
        else:
            detail = "Invalid audio format. Please try a different audio file."
        return VendorFormatError(detail, provider, status_code)

    return VendorUnavailable(
        f"{provider} request failed. Please try again.",
        provider,
        status_code,
    )
