"""Audio file checks performed before anything is uploaded to a vendor."""

from __future__ import annotations

from pathlib import Path

from ..errors import InvalidInputError


MAX_AUDIO_BYTES = 50 * 1024 * 1024

_MIMETYPES = {
    ".wav": "audio/wav",
    ".mp3": "audio/mpeg",
    ".mp4": "audio/mp4",
    ".m4a": "audio/m4a",
    ".flac": "audio/flac",
    ".ogg": "audio/ogg",
    ".webm": "audio/webm",
}

SUPPORTED_MIMETYPES = frozenset(_MIMETYPES.values())


def mimetype_for(path: str | Path) -> str:
    """Return the MIME type for common audio file extensions."""
    return _MIMETYPES.get(Path(path).suffix.lower(), "audio/wav")


def validate_audio_file(path: str | Path) -> str:
    """Check that ``path`` is a non-empty, supported audio file of at most 50 MB.

    Returns:
        The file's MIME type.

    Raises:
        InvalidInputError: if the file is missing, empty, too large or of an
            unsupported type.
    """
    path = Path(path)
    if not path.is_file():
        raise InvalidInputError(f"No audio file provided: {path}")

    suffix = path.suffix.lower()
    if suffix not in _MIMETYPES:
        raise InvalidInputError(
            f"Invalid file type {suffix or '(none)'!r}. Please upload an audio file."
        )
    size = path.stat().st_size
    if size == 0:
        raise InvalidInputError(f"Audio file is empty: {path.name}")
    if size > MAX_AUDIO_BYTES:
        raise InvalidInputError(
            f"Audio file is too large ({size / (1024 * 1024):.1f} MB); the limit is 50 MB."
        )
    return _MIMETYPES[suffix]
